"""
Hierarchy builder: flat blocks → forest of realization groups.

Three passes, each a plain function so they can be tested in isolation:

1. :func:`assemble_tree` nests blocks with a stack of open ancestors. A block
   closes every open ancestor whose level is greater than or *equal* to its
   own, so equal levels become siblings. Unknown levels rank below all known
   ones (see :class:`~logoutline.core.contracts.level.NestingLevel`).
2. :func:`group_by_realization` wraps the roots in one synthetic group per
   realization number, in first-appearance order, plus ``Unassigned`` for
   roots without one.
3. :func:`aggregate_elapsed` sums elapsed time bottom-up and returns a new
   tree; the input tree is left untouched.

:func:`build_outline` runs all three.
"""

from __future__ import annotations

from collections.abc import Sequence

from logoutline.core.contracts.block import Block
from logoutline.core.contracts.node import Node

UNASSIGNED_TITLE = "Unassigned"


def assemble_tree(blocks: Sequence[Block]) -> list[Node]:
    """Nest `blocks` by level and return the root nodes in source order."""
    roots: list[Node] = []
    stack: list[Node] = []
    for block in blocks:
        node = Node(block=block)
        level = block.nesting
        while stack and stack[-1].block.nesting >= level:
            stack.pop()
        if stack:
            stack[-1].add_child(node)
        else:
            roots.append(node)
        stack.append(node)
    return roots


def group_title(realization: int | None) -> str:
    """Display title of the group holding `realization`."""
    return UNASSIGNED_TITLE if realization is None else f"Realization {realization}"


def group_by_realization(roots: Sequence[Node]) -> list[Node]:
    """Wrap `roots` in one group node per distinct realization number.

    Group order is the order in which each realization is first seen; roots
    keep their relative order inside a group.
    """
    buckets: dict[int | None, list[Node]] = {}
    for root in roots:
        buckets.setdefault(root.block.realization, []).append(root)

    groups: list[Node] = []
    for realization, members in buckets.items():
        block = Block(
            level=None,
            title=group_title(realization),
            content="",
            start=members[0].block.start,
            end=max(members[-1].block.end, members[0].block.start),
            elapsed=None,
            realization=realization,
            title_line=None,
        )
        groups.append(Node(block=block, children=list(members), has_children=True, kind="group"))
    return groups


def aggregate_elapsed(node: Node) -> Node:
    """Return a copy of `node` whose elapsed values include their subtrees.

    A leaf keeps its own value (possibly ``None``). An internal node whose
    children contribute at least one known value gets its own elapsed (or
    zero) plus those contributions; otherwise it keeps its own value.
    """
    if not node.children:
        return node.model_copy(update={"children": []})

    children = [aggregate_elapsed(child) for child in node.children]
    known = [c.block.elapsed for c in children if c.block.elapsed is not None]
    elapsed = node.block.elapsed
    if known:
        elapsed = (elapsed or 0.0) + sum(known)
    block = node.block.model_copy(update={"elapsed": elapsed})
    return node.model_copy(update={"block": block, "children": children})


def build_outline(blocks: Sequence[Block]) -> list[Node]:
    """Assemble, group and aggregate `blocks` into the displayed forest."""
    groups = group_by_realization(assemble_tree(blocks))
    return [aggregate_elapsed(group) for group in groups]


__all__ = [
    "UNASSIGNED_TITLE",
    "aggregate_elapsed",
    "assemble_tree",
    "build_outline",
    "group_by_realization",
    "group_title",
]
