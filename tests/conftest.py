from collections import defaultdict

from rich.console import Console
from rich.table import Table

# Registered in pyproject.toml
KNOWN_MARKERS = ("unit_common", "unit_core", "unit_ui")


def pytest_terminal_summary(terminalreporter, exitstatus, config):
    """Print pass/fail counts per marker at the end of the session."""
    _ = (exitstatus, config)
    marker_stats = defaultdict(lambda: {"passed": 0, "failed": 0, "skipped": 0, "total": 0})

    for outcome in ("passed", "failed", "skipped"):
        for report in terminalreporter.stats.get(outcome, []):
            if report.when != "call" and not (report.when == "setup" and report.outcome == "skipped"):
                continue
            for marker in KNOWN_MARKERS:
                if marker in report.keywords:
                    stats = marker_stats[marker]
                    stats[outcome] += 1
                    stats["total"] += 1

    if not marker_stats:
        return

    table = Table(title="Test Statistics by Marker", show_header=True, header_style="bold magenta")
    table.add_column("Marker", style="cyan")
    table.add_column("Total", justify="right")
    table.add_column("Passed", justify="right", style="green")
    table.add_column("Failed", justify="right", style="red")
    table.add_column("Skipped", justify="right", style="yellow")

    for marker in sorted(marker_stats):
        stats = marker_stats[marker]
        table.add_row(
            marker,
            str(stats["total"]),
            str(stats["passed"]),
            str(stats["failed"]),
            str(stats["skipped"]),
        )

    console = Console()
    console.print("\n")
    console.print(table)
