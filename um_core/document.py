"""Decode configuration documents into unresolved menu nodes.

Decoding happens in two passes. YAML is first loaded into a generic tree
where every mapping keeps all of its keys in order (duplicates included).
The classification pass then pulls the reserved ``extends`` key out of each
mapping and turns the remaining keys into menu items.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator

import yaml

from um_common.errors import ConfigError
from um_core.models import RawItem, UnresolvedNode

EXTENDS_KEY = "extends"
ROOT_KEY = "root"


@dataclass(frozen=True)
class OrderedPairs:
    """A decoded mapping as an ordered list of key/value pairs."""

    pairs: tuple[tuple[Any, Any], ...]

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)

    def keys(self) -> list[Any]:
        return [key for key, _ in self.pairs]


class OrderedPairsLoader(yaml.SafeLoader):
    """SafeLoader that decodes mappings as OrderedPairs."""


def _construct_pairs(loader: OrderedPairsLoader, node: yaml.MappingNode) -> OrderedPairs:
    loader.flatten_mapping(node)
    return OrderedPairs(tuple(loader.construct_pairs(node, deep=True)))


OrderedPairsLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_pairs
)


def load_generic(text: str, *, source: str) -> Any:
    """First pass: YAML text to a generic ordered tree."""
    try:
        return yaml.load(text, Loader=OrderedPairsLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(
            f"failed to parse file {source}: {exc}",
            context={"path": source},
            cause=exc,
        ) from exc


def parse_root_document(text: str, *, source: str) -> UnresolvedNode:
    """Parse a root configuration document (``root:`` plus nothing else)."""
    data = load_generic(text, source=source)
    if not isinstance(data, OrderedPairs):
        raise ConfigError(
            f"failed to parse file {source}: expected a mapping with a '{ROOT_KEY}' key",
            context={"path": source},
        )

    root: OrderedPairs | None = None
    for key, value in data:
        if key != ROOT_KEY:
            raise ConfigError(
                f"failed to parse file {source}: unknown field {key!r}, expected '{ROOT_KEY}'",
                context={"path": source, "field": key},
            )
        if root is not None:
            raise ConfigError(
                f"failed to parse file {source}: duplicate field '{ROOT_KEY}'",
                context={"path": source},
            )
        if not isinstance(value, OrderedPairs):
            raise ConfigError(
                f"failed to parse file {source}: '{ROOT_KEY}' must be a map of items",
                context={"path": source},
            )
        root = value

    if root is None:
        raise ConfigError(
            f"failed to parse file {source}: missing field '{ROOT_KEY}'",
            context={"path": source},
        )
    return classify_node(root, source=source)


def parse_fragment_document(text: str, *, source: str) -> UnresolvedNode:
    """Parse an included fragment; the whole document is one node."""
    data = load_generic(text, source=source)
    if data is None:
        return UnresolvedNode()
    if not isinstance(data, OrderedPairs):
        raise ConfigError(
            f"failed to deserialize included file {source}: expected a map of items",
            context={"path": source},
        )
    return classify_node(data, source=source)


def classify_node(data: OrderedPairs, *, source: str) -> UnresolvedNode:
    """Second pass: split a mapping into ``extends`` and direct items."""
    extends: list[str] = []
    direct: list[RawItem] = []

    for key, value in data:
        if not isinstance(key, str):
            raise ConfigError(
                f"{source}: item names must be strings, got {key!r}",
                context={"path": source, "item": key},
            )
        if key == EXTENDS_KEY:
            extends.extend(_classify_extends(value, source=source))
            continue
        direct.append(RawItem(key, _classify_content(key, value, source=source)))

    return UnresolvedNode(extends=tuple(extends), direct=tuple(direct))


def _classify_extends(value: Any, *, source: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(ref, str) for ref in value):
        raise ConfigError(
            f"{source}: '{EXTENDS_KEY}' must be a list of file names",
            context={"path": source},
        )
    return list(value)


def _classify_content(name: str, value: Any, *, source: str) -> str | UnresolvedNode:
    if isinstance(value, str):
        return value
    if isinstance(value, OrderedPairs):
        return classify_node(value, source=source)
    raise ConfigError(
        f"{source}: item {name!r} must map to a string or a map of items, "
        f"got {type(value).__name__}",
        context={"path": source, "item": name},
    )
