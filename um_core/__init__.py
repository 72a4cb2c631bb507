"""Configuration resolution and menu navigation for unicode-menu."""

from um_core.api import (
    Action,
    Arena,
    ConfigResolver,
    MenuMode,
    NavigationEngine,
    SearchPaths,
    build_arena,
    load_arena,
)

__all__ = [
    "Action",
    "Arena",
    "build_arena",
    "ConfigResolver",
    "load_arena",
    "MenuMode",
    "NavigationEngine",
    "SearchPaths",
]
