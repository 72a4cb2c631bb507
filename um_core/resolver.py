"""Resolve configuration documents into an ordered tree of menu items."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Protocol

from um_common.errors import CyclicIncludeError, UMError
from um_core.document import parse_fragment_document, parse_root_document
from um_core.markup import ParsedMarkup, parse_markup
from um_core.models import Leaf, ResolvedItem, ResolvedNode, Submenu, UnresolvedNode
from um_core.paths import LoadedSource

logger = logging.getLogger(__name__)

MarkupParser = Callable[[str], ParsedMarkup]


class FragmentLoader(Protocol):
    def load(self, reference: str | Path) -> LoadedSource:
        ...


class ConfigResolver:
    """Merge direct items with included fragments, depth-first.

    Each node resolves to its direct items in source order followed by the
    items of every ``extends`` fragment in listed order. A fragment that is
    reached again while it is still being resolved is a cycle; reaching the
    same fragment through two separate branches is not, and each inclusion
    is read and resolved on its own.
    """

    def __init__(
        self,
        loader: FragmentLoader,
        *,
        markup_parser: MarkupParser = parse_markup,
    ) -> None:
        self._loader = loader
        self._parse_markup = markup_parser

    def resolve_root(self, source_text: str, *, source: str = "<config>") -> ResolvedNode:
        node = parse_root_document(source_text, source=source)
        chain = (source,)
        try:
            items = self.resolve_node(node, chain=chain)
        except UMError as exc:
            exc.add_context(path=source)
            raise
        logger.debug("Resolved %d top-level items from %s", len(items), source)
        return ResolvedNode(items)

    def resolve_source(self, loaded: LoadedSource) -> ResolvedNode:
        return self.resolve_root(loaded.text, source=str(loaded.path))

    def resolve_node(
        self,
        node: UnresolvedNode,
        *,
        chain: tuple[str, ...] = (),
    ) -> tuple[ResolvedItem, ...]:
        resolved: list[ResolvedItem] = []
        self._resolve_into(node, resolved, chain)
        return tuple(resolved)

    def _resolve_into(
        self,
        node: UnresolvedNode,
        resolved: list[ResolvedItem],
        chain: tuple[str, ...],
    ) -> None:
        for raw in node.direct:
            if isinstance(raw.payload, str):
                content: Leaf | Submenu = Leaf(raw.payload)
            else:
                content = Submenu(self.resolve_node(raw.payload, chain=chain))

            try:
                parsed = self._parse_markup(raw.display_markup)
            except UMError as exc:
                exc.add_context(item=raw.display_markup, include_chain=list(chain))
                raise

            resolved.append(
                ResolvedItem(
                    display_plain=parsed.plain,
                    display_attributes=parsed.attributes,
                    display_markup=raw.display_markup,
                    content=content,
                )
            )

        for reference in node.extends:
            self._include(reference, resolved, chain)

    def _include(
        self,
        reference: str,
        resolved: list[ResolvedItem],
        chain: tuple[str, ...],
    ) -> None:
        try:
            loaded = self._loader.load(reference)
        except UMError as exc:
            exc.add_context(include_chain=list(chain))
            raise

        identity = str(loaded.path)
        if identity in chain:
            cycle = [*chain, identity]
            raise CyclicIncludeError(
                "cyclic include: " + " -> ".join(cycle),
                context={"reference": reference, "include_chain": cycle},
            )

        fragment = parse_fragment_document(loaded.text, source=identity)
        logger.debug("Including %s (%s)", reference, identity)
        self._resolve_into(fragment, resolved, (*chain, identity))
