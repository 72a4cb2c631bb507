"""Flatten a resolved menu tree into an indexable arena of lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Sequence, TypeAlias, Union

from um_core.models import Leaf, ResolvedItem, ResolvedNode, StyleSpan

ROOT_INDEX = 0


class BackReference(NamedTuple):
    """Where a list was entered from: the parent list and the item slot in it."""

    list_index: int
    item_slot: int


@dataclass(frozen=True)
class TextContent:
    payload: str


@dataclass(frozen=True)
class ListContent:
    list_index: int


ItemContent: TypeAlias = Union[TextContent, ListContent]


@dataclass(frozen=True)
class Item:
    display_plain: str
    display_attributes: tuple[StyleSpan, ...]
    display_markup: str
    content: ItemContent


@dataclass(frozen=True)
class MenuList:
    back_reference: BackReference | None
    items: tuple[Item, ...]

    @property
    def is_root(self) -> bool:
        return self.back_reference is None


@dataclass(frozen=True)
class Arena:
    """All menu lists, root first. Never mutated after build_arena returns."""

    lists: tuple[MenuList, ...]

    def __len__(self) -> int:
        return len(self.lists)

    def __getitem__(self, index: int) -> MenuList:
        return self.lists[index]

    @property
    def root(self) -> MenuList:
        return self.lists[ROOT_INDEX]

    def depth(self, index: int) -> int:
        """Number of back-reference hops from ``index`` to the root."""
        depth = 0
        back = self.lists[index].back_reference
        while back is not None:
            depth += 1
            back = self.lists[back.list_index].back_reference
        return depth

    def path(self, index: int) -> list[Item]:
        """Items entered to reach ``index``, in root-to-current order."""
        trail: list[Item] = []
        back = self.lists[index].back_reference
        while back is not None:
            parent = self.lists[back.list_index]
            trail.append(parent.items[back.item_slot])
            back = parent.back_reference
        trail.reverse()
        return trail

    def item_count(self) -> int:
        return sum(len(menu.items) for menu in self.lists)


def build_arena(root: ResolvedNode | Sequence[ResolvedItem]) -> Arena:
    """Pre-order walk of the resolved tree.

    Every submenu gets the next free slot before its own children are
    visited, so child indices are always greater than their parent's.
    """
    items = root.items if isinstance(root, ResolvedNode) else tuple(root)
    slots: list[tuple[BackReference | None, list[Item]]] = []
    root_index = _register(items, slots, None)
    assert root_index == ROOT_INDEX
    return Arena(tuple(MenuList(back, tuple(entries)) for back, entries in slots))


def _register(
    items: Sequence[ResolvedItem],
    slots: list[tuple[BackReference | None, list[Item]]],
    back_reference: BackReference | None,
) -> int:
    list_index = len(slots)
    entries: list[Item] = []
    slots.append((back_reference, entries))

    for slot, resolved in enumerate(items):
        content: ItemContent
        if isinstance(resolved.content, Leaf):
            content = TextContent(resolved.content.payload)
        else:
            child = _register(
                resolved.content.items, slots, BackReference(list_index, slot)
            )
            content = ListContent(child)
        entries.append(
            Item(
                display_plain=resolved.display_plain,
                display_attributes=resolved.display_attributes,
                display_markup=resolved.display_markup,
                content=content,
            )
        )
    return list_index
