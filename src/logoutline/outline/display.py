"""Presentation data for outline nodes.

Front ends (the Rich tree in the CLI, the JSON served by the API, an editor
tree view) all need the same things per node: a label, an annotation with the
elapsed time, a tooltip, an icon hint and the navigation target. This module
computes them once, without depending on any UI toolkit.
"""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, Field

from logoutline.core.contracts.messages import HighlightMessage
from logoutline.core.contracts.node import Node, NodeKind
from logoutline.core.settings import load_settings
from logoutline.parsing.duration import format_elapsed

IconKind = Literal["folder", "note", "skipped", "deactivated", "event"]

_NOTE = re.compile(r"^Note\b", flags=re.IGNORECASE)
_SKIPPED = re.compile(r"skipped$", flags=re.IGNORECASE)
_DEACTIVATED = re.compile(r"deactivated$", flags=re.IGNORECASE)

FOLDER_INDENT_STEP = 6
FOLDER_INDENT_MAX = 12


class FolderIcon(BaseModel):
    """Theme fills and horizontal offset (px) of a folder icon."""

    light: str
    dark: str
    indent: int = Field(default=0, ge=0, le=FOLDER_INDENT_MAX)


class NodeView(BaseModel):
    """Everything a tree widget needs to show and navigate one node."""

    label: str
    description: str = Field(default="", description="Formatted elapsed time, or empty.")
    tooltip: str
    icon: IconKind
    folder_icon: FolderIcon | None = None
    collapsible: bool = False
    kind: NodeKind = "job"
    highlight: HighlightMessage
    children: list[NodeView] = Field(default_factory=list)


def node_label(node: Node) -> str:
    """Title, or a placeholder naming the level when the title is blank."""
    block = node.block
    if block.title:
        return block.title
    return f"Block (level {block.nesting})"


def icon_for(node: Node) -> IconKind:
    """Icon hint: parents are folders, leaves are classified by title."""
    if node.has_children:
        return "folder"
    title = node.title.strip()
    if _NOTE.search(title):
        return "note"
    if _SKIPPED.search(title):
        return "skipped"
    if _DEACTIVATED.search(title):
        return "deactivated"
    return "event"


def folder_indent(level: int | None) -> int:
    """Icon offset for a parent at `level`; unknown levels and groups sit flush."""
    if level is None:
        return 0
    return min(max(0, level) * FOLDER_INDENT_STEP, FOLDER_INDENT_MAX)


def describe(node: Node, *, recursive: bool = True) -> NodeView:
    """Build the :class:`NodeView` for `node` (and its subtree by default)."""
    description = format_elapsed(node.elapsed)
    icon = icon_for(node)
    folder = None
    if icon == "folder":
        cfg = load_settings()
        folder = FolderIcon(
            light=cfg.folder_icon_light,
            dark=cfg.folder_icon_dark,
            indent=folder_indent(node.block.level),
        )
    return NodeView(
        label=node_label(node),
        description=description,
        tooltip=f"{node.title} - {description}",
        icon=icon,
        folder_icon=folder,
        collapsible=node.has_children,
        kind=node.kind,
        highlight=HighlightMessage.for_block(node.block),
        children=[describe(c) for c in node.children] if recursive else [],
    )


def describe_forest(forest: list[Node]) -> list[NodeView]:
    return [describe(root) for root in forest]


__all__ = [
    "FolderIcon",
    "IconKind",
    "NodeView",
    "describe",
    "describe_forest",
    "folder_indent",
    "icon_for",
    "node_label",
]
