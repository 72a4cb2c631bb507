from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer

from um_common.config.env import parse_bool_env
from um_common.errors import UMError
from um_common.logging import configure_logging, default_log_file
from um_core.mode import MenuMode
from um_ui.cli.presenter import Presenter
from um_ui.tui.matching import MatcherConfig
from um_ui.tui.menu_screen import MenuScreen, StatusLine


def register_show_command(app: typer.Typer, present: Presenter) -> None:
    @app.command("show")
    def show(
        ctx: typer.Context,
        config: Optional[Path] = typer.Option(
            None,
            "--config",
            "-c",
            help="Root config file; defaults to config.yaml on the search path.",
        ),
        title: str = typer.Option("unicode", "--title", help="Frame title for the picker."),
    ) -> None:
        """Open the picker and copy the chosen entry to the clipboard."""
        status = StatusLine()
        try:
            mode = MenuMode.init(config_path=config, on_clipboard_error=status.report)
        except UMError as exc:
            present.error(f"failed to read configuration: {exc}")
            raise typer.Exit(1)

        fuzzy = parse_bool_env(os.environ.get("UM_FUZZY"))
        matcher_config = MatcherConfig(enable_fuzzy=True if fuzzy is None else fuzzy)
        # The picker owns the terminal; keep records off the screen.
        debug = bool((ctx.obj or {}).get("debug", False))
        configure_logging(debug=debug, log_file=str(default_log_file()), force=True)

        MenuScreen(mode, title=title, status=status, matcher_config=matcher_config).run()
