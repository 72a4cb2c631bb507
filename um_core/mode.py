"""Host-facing adapter translating launcher callbacks into navigation."""

from __future__ import annotations

import logging
from pathlib import Path

from um_common.errors import UMError, error_to_payload
from um_core.arena import Arena, build_arena
from um_core.clipboard import Clipboard, CommandClipboard
from um_core.events import Cancel, Complete, Event, Ok
from um_core.models import StyleSpan
from um_core.navigation import Action, ErrorSink, Matcher, NavigationEngine, SearchInput
from um_core.paths import SearchPaths, resolve_config_source
from um_core.resolver import ConfigResolver

logger = logging.getLogger(__name__)


def load_arena(
    *,
    config_path: Path | None = None,
    paths: SearchPaths | None = None,
) -> Arena:
    """Read, resolve and flatten the configuration. All-or-nothing."""
    search = paths or SearchPaths.from_env()
    loaded = resolve_config_source(search, config_path)
    logger.info("Loading configuration from %s", loaded.path)
    resolved = ConfigResolver(search).resolve_source(loaded)
    arena = build_arena(resolved)
    logger.info(
        "Built menu with %d lists and %d items", len(arena), arena.item_count()
    )
    return arena


class MenuMode:
    """The callback surface a host launcher drives."""

    def __init__(self, engine: NavigationEngine) -> None:
        self.engine = engine

    @classmethod
    def init(
        cls,
        *,
        config_path: Path | None = None,
        paths: SearchPaths | None = None,
        clipboard: Clipboard | None = None,
        on_clipboard_error: ErrorSink | None = None,
    ) -> "MenuMode":
        """Build the mode or raise; the host must refuse to load on error."""
        try:
            arena = load_arena(config_path=config_path, paths=paths)
        except UMError as exc:
            logger.error(
                "failed to read configuration: %s", exc, extra={"um_error": error_to_payload(exc)}
            )
            raise
        engine = NavigationEngine(
            arena,
            clipboard or CommandClipboard.from_env(),
            on_clipboard_error=on_clipboard_error,
        )
        return cls(engine)

    def entries(self) -> int:
        return self.engine.entry_count()

    def entry_content(self, line: int) -> str:
        return self.engine.entry_render(line)[0]

    def entry_attributes(self, line: int) -> tuple[StyleSpan, ...]:
        return self.engine.entry_render(line)[1]

    def completed_text(self, line: int) -> str:
        return self.engine.entry_completed_text(line)

    def react(self, event: Event, search_input: SearchInput) -> Action:
        if isinstance(event, Cancel):
            return self.engine.on_cancel(search_input)
        if isinstance(event, Ok):
            return self.engine.on_select(event.selected)
        if isinstance(event, Complete) and event.selected is not None:
            return self.engine.on_complete(event.selected, search_input)
        logger.debug("Ignoring event %r", event)
        return Action.RELOAD

    def message(self) -> str:
        return self.engine.breadcrumb()

    def matches(self, line: int, matcher: Matcher) -> bool:
        return self.engine.matches(line, matcher)
