"""Configuration data model before and after resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias, Union


@dataclass(frozen=True)
class StyleSpan:
    """A styled character range of an item's plain display text."""

    start: int
    end: int
    style: str


@dataclass(frozen=True)
class RawItem:
    display_markup: str
    payload: Union[str, "UnresolvedNode"]


@dataclass(frozen=True)
class UnresolvedNode:
    """One menu level as written in a document.

    ``direct`` items come first in display order; fragments named in
    ``extends`` are appended after them, in the listed order.
    """

    extends: tuple[str, ...] = ()
    direct: tuple[RawItem, ...] = ()


@dataclass(frozen=True)
class Leaf:
    payload: str


@dataclass(frozen=True)
class Submenu:
    items: tuple["ResolvedItem", ...] = field(default_factory=tuple)


ResolvedContent: TypeAlias = Union[Leaf, Submenu]


@dataclass(frozen=True)
class ResolvedItem:
    display_plain: str
    display_attributes: tuple[StyleSpan, ...]
    display_markup: str
    content: ResolvedContent


@dataclass(frozen=True)
class ResolvedNode:
    """The fully resolved root menu."""

    items: tuple[ResolvedItem, ...] = ()
