"""Tests for flattening resolved trees into the arena."""

from __future__ import annotations

import pytest

from um_core.arena import BackReference, ListContent, TextContent, build_arena
from um_core.resolver import ConfigResolver


pytestmark = pytest.mark.unit_core


def _arena(config_dirs, text: str):
    return build_arena(ConfigResolver(config_dirs.paths).resolve_root(text))


def test_two_level_document(config_dirs) -> None:
    arena = _arena(config_dirs, 'root:\n  "A": "x"\n  "B":\n    "C": "y"\n')

    assert len(arena) == 2
    root, child = arena.lists
    assert root.back_reference is None
    assert [item.display_plain for item in root.items] == ["A", "B"]
    assert root.items[0].content == TextContent("x")
    assert root.items[1].content == ListContent(1)
    assert child.back_reference == BackReference(0, 1)
    assert [item.display_plain for item in child.items] == ["C"]
    assert child.items[0].content == TextContent("y")


def test_pre_order_indices(config_dirs) -> None:
    arena = _arena(
        config_dirs,
        "root:\n"
        "  P:\n"
        "    Q:\n"
        "      q: q\n"
        "    r: r\n"
        "  S:\n"
        "    s: s\n",
    )
    # root=0, P=1, Q=2, S=3
    assert arena[0].items[0].content == ListContent(1)
    assert arena[1].items[0].content == ListContent(2)
    assert arena[0].items[1].content == ListContent(3)
    assert arena[2].back_reference == BackReference(1, 0)
    assert arena[3].back_reference == BackReference(0, 1)


def test_back_reference_chains_reach_root(config_dirs) -> None:
    arena = _arena(config_dirs, "root:\n  a:\n    b:\n      c:\n        d: x\n  e: y\n")

    for index, menu in enumerate(arena.lists):
        hops = 0
        back = menu.back_reference
        while back is not None:
            assert back.list_index < index
            back = arena[back.list_index].back_reference
            hops += 1
        assert hops == arena.depth(index)
    assert [arena.depth(i) for i in range(len(arena))] == [0, 1, 2, 3]
    assert sum(1 for menu in arena.lists if menu.is_root) == 1


def test_diamond_includes_make_distinct_lists(config_dirs) -> None:
    config_dirs.write_user("shared.yaml", "Sub:\n  s: s\n")
    arena = _arena(
        config_dirs,
        "root:\n  L:\n    extends: [shared.yaml]\n  R:\n    extends: [shared.yaml]\n",
    )
    # root, L, L/Sub, R, R/Sub
    assert len(arena) == 5
    assert arena[2].back_reference == BackReference(1, 0)
    assert arena[4].back_reference == BackReference(3, 0)
    assert arena[2] is not arena[4]


def test_empty_root_still_builds_a_root_list(config_dirs) -> None:
    arena = _arena(config_dirs, "root: {}\n")
    assert len(arena) == 1
    assert arena.root.items == ()
    assert arena.item_count() == 0


def test_path_lists_entered_items(config_dirs) -> None:
    arena = _arena(config_dirs, "root:\n  a:\n    b:\n      c: x\n")
    assert [item.display_plain for item in arena.path(2)] == ["a", "b"]
    assert arena.path(0) == []
