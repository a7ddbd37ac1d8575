"""Tests for outline lookups (title search, range/line/parent resolution)."""

from __future__ import annotations

import pytest

from logoutline.core.contracts.node import Node
from logoutline.outline.hierarchy import build_outline
from logoutline.outline.search import (
    find_by_line,
    find_by_range,
    find_parent,
    iter_nodes,
    search_titles,
)
from logoutline.parsing.extractor import extract_blocks


@pytest.fixture  # type: ignore[misc]
def forest(job_log: str) -> list[Node]:
    return build_outline(extract_blocks(job_log))


def test_iter_nodes_is_preorder(forest: list[Node]) -> None:
    titles = [n.title for n in iter_nodes(forest)]
    assert titles == [
        "Realization 1",
        "Load grid",
        "Compute volumes",
        "Unassigned",
        "Export - skipped",
    ]


def test_search_is_case_insensitive_substring(forest: list[Node]) -> None:
    assert [n.title for n in search_titles(forest, "GRID")] == ["Load grid"]
    assert [n.title for n in search_titles(forest, "o")] == [
        "Realization 1",
        "Load grid",
        "Compute volumes",
        "Export - skipped",
    ]


def test_search_without_match_or_query(forest: list[Node]) -> None:
    assert search_titles(forest, "nothing like this") == []
    assert search_titles(forest, "   ") == []


def test_find_by_range_and_line(forest: list[Node], job_log: str) -> None:
    compute = search_titles(forest, "compute")[0]
    found = find_by_range(forest, compute.block.start, compute.block.end)
    assert found is compute
    assert find_by_line(forest, 8) is compute
    assert find_by_range(forest, 1, 2) is None
    assert find_by_line(forest, 999) is None


def test_find_parent(forest: list[Node]) -> None:
    compute = search_titles(forest, "compute")[0]
    parent = find_parent(forest, compute)
    assert parent is not None and parent.title == "Load grid"
    assert find_parent(forest, forest[0]) is None
