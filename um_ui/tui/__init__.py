"""prompt_toolkit host for the menu mode."""

from um_ui.tui.matching import MatcherConfig, make_matcher
from um_ui.tui.menu_screen import MenuScreen

__all__ = ["MatcherConfig", "make_matcher", "MenuScreen"]
