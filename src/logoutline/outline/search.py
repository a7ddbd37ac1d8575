"""Lookups over an outline forest.

These back the "search job" command and the reverse navigation from a
rendered view (an offset range or a cursor line) to the matching tree node.
All return ``None`` or an empty list on a miss; nothing here raises.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from logoutline.core.contracts.node import Node


def iter_nodes(forest: Iterable[Node]) -> Iterator[Node]:
    """Yield every node of `forest`, depth-first pre-order."""
    for root in forest:
        yield from root.walk()


def search_titles(forest: Iterable[Node], query: str) -> list[Node]:
    """Return nodes whose title contains `query`, ignoring case."""
    needle = query.strip().lower()
    if not needle:
        return []
    return [n for n in iter_nodes(forest) if n.title and needle in n.title.lower()]


def find_by_range(forest: Iterable[Node], start: int, end: int) -> Node | None:
    """First job node spanning exactly ``[start, end)``."""
    for node in iter_nodes(forest):
        if node.kind == "job" and node.block.start == start and node.block.end == end:
            return node
    return None


def find_by_line(forest: Iterable[Node], line: int) -> Node | None:
    """First node whose title sits on `line`."""
    for node in iter_nodes(forest):
        if node.block.title_line == line:
            return node
    return None


def find_parent(forest: Iterable[Node], target: Node) -> Node | None:
    """Parent of `target` (compared by identity); ``None`` for a root."""
    for node in iter_nodes(forest):
        if any(child is target for child in node.children):
            return node
    return None


__all__ = ["find_by_line", "find_by_range", "find_parent", "iter_nodes", "search_titles"]
