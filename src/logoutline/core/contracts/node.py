"""
Node Contract

A Node wraps one :class:`Block` plus its ordered children (source order).
Synthetic *group* nodes wrap the top-level job nodes of one realization; their
block carries no content and an unknown level.

Nodes are rebuilt from scratch on every parse. The builder mutates `children`
and `has_children` only while assembling the tree; elapsed aggregation
produces a new tree rather than writing into an existing one.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel, Field

from logoutline.core.contracts.block import Block

NodeKind = Literal["job", "group"]


class Node(BaseModel):
    """An element of the outline forest."""

    block: Block
    children: list[Node] = Field(default_factory=list)
    has_children: bool = Field(
        default=False, description="True once a child was attached; drives collapse/icon state."
    )
    kind: NodeKind = "job"

    @property
    def title(self) -> str:
        return self.block.title

    @property
    def elapsed(self) -> float | None:
        return self.block.elapsed

    def add_child(self, child: Node) -> None:
        """Append `child` and mark this node as a parent."""
        self.children.append(child)
        self.has_children = True

    def walk(self) -> Iterator[Node]:
        """Yield this node and all descendants, depth-first pre-order."""
        stack: list[Node] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


__all__ = ["Node", "NodeKind"]
