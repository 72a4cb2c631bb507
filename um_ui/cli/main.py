"""
Command-line interface for unicode-menu.

Opens a searchable, nested picker of characters and snippets and copies the
chosen one to the clipboard.
"""

from __future__ import annotations

import typer

from um_common.logging import configure_logging
from um_ui.cli.commands.check import register_check_commands
from um_ui.cli.commands.init import register_init_command
from um_ui.cli.commands.show import register_show_command
from um_ui.cli.presenter import Presenter

present = Presenter()

app = typer.Typer(
    help="Pick characters, emoji and snippets from a nested menu.",
    no_args_is_help=True,
)


@app.callback()
def entry(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options shared by every command."""
    ctx.obj = {"debug": debug}
    configure_logging(debug=debug, force=True)


register_show_command(app, present)
register_check_commands(app, present)
register_init_command(app, present)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
