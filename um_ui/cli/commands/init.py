from __future__ import annotations

import typer

from um_common.errors import UMError
from um_core.paths import SearchPaths
from um_ui.cli.presenter import Presenter

STARTER_CONFIG = """\
# Each key is a row; a string value is copied, a map opens a submenu.
# Names may use rich markup, e.g. "[bold]Arrows[/bold]".
root:
  "Em dash": "—"
  "Ellipsis": "…"
  "[bold]Arrows[/bold]":
    "Right arrow": "→"
    "Left arrow": "←"
  # Fragments are looked up in this directory, then the system ones.
  # extends: ["unicode.yaml", "emoji.yaml"]
"""


def register_init_command(app: typer.Typer, present: Presenter) -> None:
    @app.command("init")
    def init(
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config."),
    ) -> None:
        """Write a starter config.yaml into the user config directory."""
        try:
            target = SearchPaths.from_env().default_config
        except UMError as exc:
            present.error(str(exc))
            raise typer.Exit(1)

        if target.exists() and not force:
            present.warning(f"Config already exists: {target} (use --force to overwrite)")
            raise typer.Exit(1)

        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(STARTER_CONFIG, encoding="utf-8")
        present.success(f"Config written to {target}")
