"""Navigation state machine over an immutable menu arena."""

from __future__ import annotations

import enum
import logging
from typing import Callable, Protocol

from um_common.errors import ClipboardError
from um_core.arena import ROOT_INDEX, Arena, Item, ListContent, MenuList, TextContent
from um_core.clipboard import Clipboard
from um_core.models import StyleSpan

logger = logging.getLogger(__name__)

BREADCRUMB_SEPARATOR = " / "

Matcher = Callable[[str], bool]
ErrorSink = Callable[[ClipboardError], None]


class Action(enum.Enum):
    EXIT = "exit"
    RELOAD = "reload"


class SearchInput(Protocol):
    """Host-owned search box; only its text is read and replaced."""

    text: str


class NavigationEngine:
    """Tracks the active list and reacts to selection, cancel and completion.

    The arena is shared read-only; ``active_list_index`` is the only state
    that changes over the life of the engine.
    """

    def __init__(
        self,
        arena: Arena,
        clipboard: Clipboard,
        *,
        on_clipboard_error: ErrorSink | None = None,
    ) -> None:
        if len(arena) == 0:
            raise ValueError("NavigationEngine requires a non-empty arena.")
        self._arena = arena
        self._clipboard = clipboard
        self._on_clipboard_error = on_clipboard_error
        self.active_list_index = ROOT_INDEX

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def active_list(self) -> MenuList:
        return self._arena[self.active_list_index]

    @property
    def depth(self) -> int:
        return self._arena.depth(self.active_list_index)

    def item(self, i: int) -> Item:
        return self.active_list.items[i]

    def entry_count(self) -> int:
        return len(self.active_list.items)

    def entry_render(self, i: int) -> tuple[str, tuple[StyleSpan, ...]]:
        item = self.item(i)
        return item.display_plain, item.display_attributes

    def entry_completed_text(self, i: int) -> str:
        return self.item(i).display_plain

    def on_select(self, i: int) -> Action:
        content = self.item(i).content
        if isinstance(content, ListContent):
            self.active_list_index = content.list_index
            return Action.RELOAD

        assert isinstance(content, TextContent)
        try:
            self._clipboard.copy(content.payload)
        except ClipboardError as exc:
            logger.error("failed to copy text to clipboard: %s", exc)
            if self._on_clipboard_error is not None:
                self._on_clipboard_error(exc)
            return Action.RELOAD
        return Action.EXIT

    def on_cancel(self, search_input: SearchInput | None = None) -> Action:
        back = self.active_list.back_reference
        if back is None:
            return Action.EXIT
        self.active_list_index = back.list_index
        if search_input is not None:
            search_input.text = ""
        return Action.RELOAD

    def on_complete(self, i: int, search_input: SearchInput) -> Action:
        search_input.text = self.item(i).display_plain
        return Action.RELOAD

    def breadcrumb(self) -> str:
        names = [item.display_markup for item in self._arena.path(self.active_list_index)]
        return BREADCRUMB_SEPARATOR.join(names)

    def matches(self, i: int, matcher: Matcher) -> bool:
        return matcher(self.item(i).display_plain)
