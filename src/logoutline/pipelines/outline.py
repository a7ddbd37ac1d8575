"""
Outline pipeline: from a log document to the forest shown in a tree view.

Flow
----
1. If the caller did not hand over a preprocessed copy, preprocess the raw
   text and keep the raw text as the reference document.
2. Extract blocks, with offsets in reference-document coordinates.
3. Build the forest (assemble → group by realization → aggregate elapsed).

Everything the run depends on travels in an explicit :class:`OutlineContext`;
the pipeline keeps no state between calls, so each call is an independent
rebuild and callers simply drop the previous result.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypedDict

from logoutline.core.contracts.block import Block
from logoutline.core.contracts.node import Node
from logoutline.core.settings import get_logger
from logoutline.outline.hierarchy import build_outline
from logoutline.parsing.extractor import ExtractOptions, extract_blocks
from logoutline.parsing.preprocess import preprocess

logger = get_logger(__name__)


@dataclass(frozen=True)
class OutlineContext:
    """Inputs of one outline run.

    Attributes
    ----------
    text:
        The document to scan. Treated as raw (and preprocessed here) unless
        `original` is also given.
    original:
        The unprocessed document when `text` is already preprocessed.
    source_name:
        Display name for messages, usually the file name.
    options:
        Extractor tunables.
    """

    text: str
    original: str | None = None
    source_name: str = "<memory>"
    options: ExtractOptions = field(default_factory=ExtractOptions)


class OutlineResult(TypedDict):
    """Payload returned by :func:`run_outline`."""

    source_name: str
    blocks: list[Block]
    forest: list[Node]
    message: str


def context_from_path(path: str | Path, *, options: ExtractOptions | None = None) -> OutlineContext:
    """Read a log file (UTF-8, undecodable bytes replaced) into a context."""
    p = Path(path)
    text = p.read_text(encoding="utf-8", errors="replace")
    return OutlineContext(text=text, source_name=p.name, options=options or ExtractOptions())


def run_outline(ctx: OutlineContext) -> OutlineResult:
    """Extract the blocks of `ctx` and build its outline forest."""
    if ctx.original is None:
        scanned, original = preprocess(ctx.text), ctx.text
    else:
        scanned, original = ctx.text, ctx.original

    blocks = extract_blocks(scanned, original, options=ctx.options)
    if not blocks:
        logger.info("no job blocks in %s", ctx.source_name)
        return {
            "source_name": ctx.source_name,
            "blocks": [],
            "forest": [],
            "message": f"No RMS job blocks found in '{ctx.source_name}'.",
        }

    forest = build_outline(blocks)
    logger.info(
        "%s: %d blocks in %d realization groups", ctx.source_name, len(blocks), len(forest)
    )
    return {"source_name": ctx.source_name, "blocks": blocks, "forest": forest, "message": ""}
