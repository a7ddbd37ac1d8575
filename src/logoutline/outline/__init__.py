"""Outline stage: build, query and present the forest of job nodes."""

from __future__ import annotations

from logoutline.outline.hierarchy import (
    aggregate_elapsed,
    assemble_tree,
    build_outline,
    group_by_realization,
)
from logoutline.outline.search import find_by_line, find_by_range, find_parent, search_titles

__all__ = [
    "aggregate_elapsed",
    "assemble_tree",
    "build_outline",
    "find_by_line",
    "find_by_range",
    "find_parent",
    "group_by_realization",
    "search_titles",
]
