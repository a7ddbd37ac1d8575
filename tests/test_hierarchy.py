"""
Tests for the hierarchy builder.

Covers the three passes separately (assemble, group, aggregate) and the
combined :func:`build_outline` over a parsed log.
"""

from __future__ import annotations

from collections.abc import Sequence

from logoutline.core.contracts.block import Block
from logoutline.outline.hierarchy import (
    aggregate_elapsed,
    assemble_tree,
    build_outline,
    group_by_realization,
)
from logoutline.parsing.extractor import extract_blocks


def _blocks(
    levels: Sequence[int | None],
    *,
    elapsed: Sequence[float | None] | None = None,
    realizations: Sequence[int | None] | None = None,
) -> list[Block]:
    """Make one block per level, 10 characters apart."""
    out = []
    for i, level in enumerate(levels):
        out.append(
            Block(
                level=level,
                title=f"job {i}",
                start=i * 10,
                end=i * 10 + 5,
                elapsed=elapsed[i] if elapsed else None,
                realization=realizations[i] if realizations else None,
            )
        )
    return out


# --------------------------------------------------------------------------- #
# Assembly
# --------------------------------------------------------------------------- #


def test_levels_nest_and_equal_levels_are_siblings() -> None:
    roots = assemble_tree(_blocks([0, 1, 1, 0, 2]))

    assert [r.title for r in roots] == ["job 0", "job 3"]
    assert [c.title for c in roots[0].children] == ["job 1", "job 2"]
    assert [c.title for c in roots[1].children] == ["job 4"]
    assert roots[0].has_children and roots[1].has_children
    assert not roots[0].children[0].has_children


def test_deeper_block_after_sibling_nests_under_it() -> None:
    roots = assemble_tree(_blocks([0, 1, 2, 1]))
    (root,) = roots
    first, second = root.children
    assert [c.title for c in first.children] == ["job 2"]
    assert second.title == "job 3"


def test_unknown_level_ranks_below_known_levels() -> None:
    roots = assemble_tree(_blocks([None, 0, None]))
    assert [r.title for r in roots] == ["job 0", "job 2"]
    assert [c.title for c in roots[0].children] == ["job 1"]


def test_empty_input() -> None:
    assert assemble_tree([]) == []
    assert build_outline([]) == []


# --------------------------------------------------------------------------- #
# Grouping
# --------------------------------------------------------------------------- #


def test_groups_follow_first_appearance_order() -> None:
    roots = assemble_tree(_blocks([0, 0, 0, 0], realizations=[1, None, 1, 2]))
    groups = group_by_realization(roots)

    assert [g.title for g in groups] == ["Realization 1", "Unassigned", "Realization 2"]
    assert [len(g.children) for g in groups] == [2, 1, 1]
    assert [c.title for c in groups[0].children] == ["job 0", "job 2"]
    assert all(g.kind == "group" and g.has_children for g in groups)


def test_group_block_is_synthetic() -> None:
    roots = assemble_tree(_blocks([0, 0], realizations=[7, 7]))
    (group,) = group_by_realization(roots)
    block = group.block
    assert block.level is None
    assert block.content == ""
    assert block.realization == 7
    assert (block.start, block.end) == (0, 15)


# --------------------------------------------------------------------------- #
# Aggregation
# --------------------------------------------------------------------------- #


def test_parent_sums_own_and_known_children() -> None:
    (root,) = assemble_tree(_blocks([0, 1, 1], elapsed=[2.0, 3.0, None]))
    assert aggregate_elapsed(root).elapsed == 5.0


def test_aggregation_does_not_mutate_input() -> None:
    (root,) = assemble_tree(_blocks([0, 1], elapsed=[2.0, 3.0]))
    summed = aggregate_elapsed(root)
    assert summed.elapsed == 5.0
    assert root.elapsed == 2.0
    assert summed.children[0] is not root.children[0]


def test_all_unknown_children_keep_parent_value() -> None:
    (root,) = assemble_tree(_blocks([0, 1], elapsed=[4.0, None]))
    assert aggregate_elapsed(root).elapsed == 4.0
    (bare,) = assemble_tree(_blocks([0, 1]))
    assert aggregate_elapsed(bare).elapsed is None


def test_unknown_parent_counts_as_zero_with_known_children() -> None:
    (root,) = assemble_tree(_blocks([0, 1, 2], elapsed=[None, None, 1.5]))
    summed = aggregate_elapsed(root)
    assert summed.elapsed == 1.5
    assert summed.children[0].elapsed == 1.5


def test_build_outline_over_parsed_log(job_log: str) -> None:
    forest = build_outline(extract_blocks(job_log))

    assert [g.title for g in forest] == ["Realization 1", "Unassigned"]
    load = forest[0].children[0]
    assert load.title == "Load grid"
    assert [c.title for c in load.children] == ["Compute volumes"]
    assert load.elapsed == 62.5
    assert forest[0].elapsed == 62.5
    assert forest[1].elapsed == 0.0
