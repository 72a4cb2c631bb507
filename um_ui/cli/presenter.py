"""Rich console output for CLI commands."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from um_ui.tui import theme


class Presenter:
    """Print leveled one-line messages; message text is never parsed as markup."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _print(self, level: str, message: str) -> None:
        self.console.print(theme.presenter_message(level, escape(message)))

    def info(self, message: str) -> None:
        self._print("info", message)

    def warning(self, message: str) -> None:
        self._print("warning", message)

    def error(self, message: str) -> None:
        self._print("error", message)

    def success(self, message: str) -> None:
        self._print("success", message)
