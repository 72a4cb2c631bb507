from __future__ import annotations

from typing import Any

from prompt_toolkit.application import Application
from prompt_toolkit.formatted_text import ANSI, StyleAndTextTuples, to_formatted_text
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Frame, TextArea
from rich.console import Console
from rich.text import Span, Text

from um_common.errors import ClipboardError
from um_core.events import Cancel, Complete, Event, Ok
from um_core.mode import MenuMode
from um_core.models import StyleSpan
from um_core.navigation import Action
from um_ui.tui import theme
from um_ui.tui.matching import MatcherConfig, make_matcher


class StatusLine:
    """Last recoverable error to show under the list."""

    def __init__(self) -> None:
        self.text = ""

    def report(self, error: ClipboardError) -> None:
        self.text = f"Copy failed: {error}"

    def clear(self) -> None:
        self.text = ""


def render_ansi(console: Console, plain: str, spans: tuple[StyleSpan, ...]) -> str:
    text = Text(plain, spans=[Span(s.start, s.end, s.style) for s in spans], end="")
    with console.capture() as cap:
        console.print(text, end="", soft_wrap=True)
    return cap.get()


def render_markup_ansi(console: Console, markup: str) -> str:
    with console.capture() as cap:
        console.print(Text.from_markup(markup, emoji=False, end=""), end="", soft_wrap=True)
    return cap.get()


class MenuScreen:
    """Full-screen terminal host driving a MenuMode.

    Keeps the row filter and highlighted row; everything about which list
    is showing lives in the mode.
    """

    def __init__(
        self,
        mode: MenuMode,
        *,
        title: str = "unicode",
        status: StatusLine | None = None,
        matcher_config: MatcherConfig | None = None,
    ) -> None:
        self._mode = mode
        self._status = status or StatusLine()
        self._matcher_config = matcher_config or MatcherConfig()
        self._console = Console(force_terminal=True, color_system="truecolor")

        self._filtered: list[int] = []
        self._selected_index = 0

        self.search = TextArea(height=1, prompt="Search: ", style="class:search")
        self.list_control = FormattedTextControl(self._render_list, focusable=False)
        self._path_control = FormattedTextControl(self._render_path)
        self._status_control = FormattedTextControl(self._render_status)

        layout = HSplit(
            [
                Window(content=self._path_control, height=1, style="class:path"),
                self.search,
                Window(height=1, char="-", style="class:separator"),
                Window(self.list_control),
                Window(content=self._status_control, height=1, style="class:status"),
            ]
        )
        self._app: Application[Any] = Application(
            layout=Layout(Frame(layout, title=title), focused_element=self.search),
            key_bindings=self._bindings(),
            style=Style.from_dict(dict(theme.prompt_toolkit_menu_style())),
            full_screen=True,
        )

        self.search.buffer.on_text_changed += lambda _: self._on_query_changed()
        self.apply_filter()

    @property
    def filtered(self) -> list[int]:
        return self._filtered

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def selected_line(self) -> int | None:
        if not self._filtered:
            return None
        return self._filtered[self._clamp_index(self._selected_index)]

    def run(self) -> Any:
        return self._app.run()

    def apply_filter(self) -> None:
        matcher = make_matcher(self.search.text, self._matcher_config)
        self._filtered = [
            line for line in range(self._mode.entries()) if self._mode.matches(line, matcher)
        ]
        self._selected_index = 0

    def move(self, delta: int) -> None:
        if not self._filtered:
            return
        self._selected_index = (self._selected_index + delta) % len(self._filtered)

    def dispatch(self, event: Event) -> Action:
        """Forward one event to the mode and apply the resulting action."""
        self._status.clear()
        before = self._mode.engine.active_list_index
        action = self._mode.react(event, self.search)
        if action is Action.EXIT:
            self._exit(isinstance(event, Ok))
            return action
        if self._mode.engine.active_list_index != before:
            self.search.text = ""
        self.apply_filter()
        self._app.invalidate()
        return action

    def _on_query_changed(self) -> None:
        self.apply_filter()
        self._app.invalidate()

    def _clamp_index(self, value: int) -> int:
        if not self._filtered:
            return 0
        return max(0, min(value, len(self._filtered) - 1))

    def _render_list(self) -> StyleAndTextTuples:
        frags: StyleAndTextTuples = []
        for pos, line in enumerate(self._filtered):
            plain = self._mode.entry_content(line)
            ansi = render_ansi(self._console, plain, self._mode.entry_attributes(line))
            row = to_formatted_text(ANSI(ansi))
            if pos == self._selected_index:
                frags.append(("class:selected", " > "))
                frags.extend((f"class:selected {style}", text) for style, text, *_ in row)
            else:
                frags.append(("", "   "))
                frags.extend(row)
            frags.append(("", "\n"))
        return frags

    def _render_path(self) -> StyleAndTextTuples:
        message = self._mode.message()
        if not message:
            return []
        return to_formatted_text(ANSI(render_markup_ansi(self._console, message)))

    def _render_status(self) -> str:
        return self._status.text

    def _bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("down")
        def _(event: Any) -> None:
            self.move(1)
            self._app.invalidate()

        @kb.add("up")
        def _(event: Any) -> None:
            self.move(-1)
            self._app.invalidate()

        @kb.add("enter")
        def _(event: Any) -> None:
            line = self.selected_line
            if line is None:
                return
            self.dispatch(Ok(line))

        @kb.add("tab")
        def _(event: Any) -> None:
            self.dispatch(Complete(self.selected_line))

        @kb.add("escape")
        def _(event: Any) -> None:
            self.dispatch(Cancel(self.selected_line))

        @kb.add("c-c")
        def _(event: Any) -> None:
            self._exit(False)

        return kb

    def _exit(self, result: Any) -> None:
        try:
            self._app.exit(result=result)
        except Exception as exc:  # pragma: no cover - defensive
            if "Return value already set" not in str(exc):
                raise
