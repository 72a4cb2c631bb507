from __future__ import annotations

import shlex
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from um_common.errors import UMError
from um_core.arena import Arena
from um_core.clipboard import CommandClipboard
from um_core.mode import load_arena
from um_core.navigation import BREADCRUMB_SEPARATOR
from um_core.paths import SearchPaths
from um_ui.cli.presenter import Presenter
from um_ui.tui import theme


def build_lists_table(arena: Arena) -> Table:
    table = Table(title=theme.panel_title("Menu lists"), show_header=True)
    table.add_column("List", justify="right")
    table.add_column("Parent", justify="right")
    table.add_column("Depth", justify="right")
    table.add_column("Path")
    table.add_column("Items", justify="right")
    for index, menu in enumerate(arena.lists):
        parent = "-" if menu.back_reference is None else str(menu.back_reference.list_index)
        path = BREADCRUMB_SEPARATOR.join(item.display_plain for item in arena.path(index))
        table.add_row(
            str(index), parent, str(arena.depth(index)), path or "(root)", str(len(menu.items))
        )
    return table


def register_check_commands(app: typer.Typer, present: Presenter) -> None:
    @app.command("check")
    def check(
        config: Optional[Path] = typer.Option(
            None,
            "--config",
            "-c",
            help="Root config file; defaults to config.yaml on the search path.",
        ),
    ) -> None:
        """Resolve the configuration and summarize the resulting menu."""
        try:
            arena = load_arena(config_path=config)
        except UMError as exc:
            present.error(str(exc))
            raise typer.Exit(1)

        present.console.print(build_lists_table(arena))
        present.success(f"{len(arena)} lists, {arena.item_count()} items")
        present.info(f"Clipboard helper: {shlex.join(CommandClipboard.from_env().command)}")

    @app.command("paths")
    def paths() -> None:
        """Print the directories searched for config and fragment files."""
        try:
            search = SearchPaths.from_env()
        except UMError as exc:
            present.error(str(exc))
            raise typer.Exit(1)
        for base in search.bases:
            typer.echo(str(base))
