"""Public API surface for um_core."""

from um_core.arena import Arena, BackReference, Item, ListContent, MenuList, TextContent, build_arena
from um_core.clipboard import CommandClipboard
from um_core.events import Cancel, Complete, CustomCommand, CustomInput, DeleteEntry, Ok
from um_core.mode import MenuMode, load_arena
from um_core.navigation import Action, NavigationEngine
from um_core.paths import SearchPaths
from um_core.resolver import ConfigResolver

__all__ = [
    "Action",
    "Arena",
    "BackReference",
    "build_arena",
    "Cancel",
    "CommandClipboard",
    "Complete",
    "ConfigResolver",
    "CustomCommand",
    "CustomInput",
    "DeleteEntry",
    "Item",
    "ListContent",
    "load_arena",
    "MenuList",
    "MenuMode",
    "NavigationEngine",
    "Ok",
    "SearchPaths",
    "TextContent",
]
