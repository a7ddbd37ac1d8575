"""
Block extractor: scan a log document for ``<pre>`` job records.

Each ``<pre>…</pre>`` region becomes one :class:`Block`. For every region the
extractor:

1. Takes the inner text and drops carriage returns.
2. Pulls out a ``- for project realization N`` annotation into
   ``Block.realization`` and removes every occurrence from the text.
3. Strips markup tags and decodes character references.
4. Collapses spaces/tabs, right-trims lines and drops leading/trailing blank
   lines; the first non-blank line is the title.
5. Sets ``elapsed = 0`` for titles ending in ``- skipped`` / ``- deactivated``;
   otherwise looks for an ``H:MM:SS.F`` duration shortly after ``</pre>``,
   preferring a labeled one (``Elapsed time: 0:00:01.0``).
6. Estimates the nesting level with :func:`infer_depth`.
7. When the caller passes the unprocessed original document, maps the region
   back into its coordinates (see :func:`_remap`).

Failure policy
--------------
Nothing here raises for malformed input. Each anomaly (unmatched tags, an
unparseable duration, a failed remap) only degrades the field it affects on
that one block.

Remapping caveat
----------------
Locating a region in the original document is a best-effort substring
search from a moving cursor. Repeated content that also appears *before* the
true position but after the cursor will be matched first. Regions whose
inner text is blank are never searched for. When the search misses, or the
region is blank, the block keeps its scanned-document offsets.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from pydantic import BaseModel, Field

from logoutline.core.contracts.block import Block
from logoutline.core.result import Result, err, ok
from logoutline.core.settings import get_logger, load_settings
from logoutline.parsing.depth import infer_depth
from logoutline.parsing.duration import DURATION, duration_pattern, parse_duration
from logoutline.parsing.entities import decode_entities

logger = get_logger(__name__)

_REGION = re.compile(r"<pre\b([^>]*)>(.*?)</pre>", flags=re.IGNORECASE | re.DOTALL)
_REALIZATION = re.compile(r"\s*-\s*for\s+project\s+realization\s*(\d+)\b", flags=re.IGNORECASE)
_TAGS = re.compile(r"<[^>]*>")
_SPACES = re.compile(r"[\t ]+")
_ZERO_TITLE = re.compile(r"(?:-\s*skipped|-\s*deactivated)\s*$")
_LABELED_DURATION = re.compile(
    rf"(?:elapsed|elapsed time|elapse|took|duration)[:\s]*({DURATION})", flags=re.IGNORECASE
)
_BARE_DURATION = duration_pattern()

_OPEN = "<pre"
_CLOSE = "</pre>"


class ExtractOptions(BaseModel):
    """Tunables for the heuristics around each block."""

    duration_window: int = Field(
        default_factory=lambda: load_settings().duration_window,
        ge=1,
        description="Max characters after </pre> searched for a duration.",
    )
    open_probe: str = Field(
        default=_OPEN,
        min_length=1,
        description="Literal that marks the next block; truncates the duration window.",
    )


class _Span(NamedTuple):
    start: int
    end: int
    title_line: int | None
    cursor: int


# --------------------------------------------------------------------------- #
# Text normalization
# --------------------------------------------------------------------------- #


def _split_realization(inner: str) -> tuple[str, int | None]:
    """Return `inner` without realization annotations, plus the first N found."""
    m = _REALIZATION.search(inner)
    if not m:
        return inner, None
    try:
        realization: int | None = int(m.group(1))
    except ValueError as exc:
        logger.debug("unreadable realization number: %s", exc)
        realization = None
    return _REALIZATION.sub("", inner), realization


def normalize_content(text: str) -> str:
    """Strip tags, decode entities and tidy whitespace line by line."""
    text = decode_entities(_TAGS.sub("", text))
    lines = [_SPACES.sub(" ", line).rstrip() for line in text.split("\n")]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    return "\n".join(lines)


def first_title(content: str) -> str:
    """First non-blank line of `content`, trimmed; empty if there is none."""
    for line in content.split("\n"):
        if line.strip():
            return line.strip()
    return ""


def title_indicates_zero(title: str) -> bool:
    """True for titles of jobs that were skipped or deactivated."""
    return _ZERO_TITLE.search(title.lower()) is not None


# --------------------------------------------------------------------------- #
# Metadata around a block
# --------------------------------------------------------------------------- #


def _find_elapsed(text: str, after: int, options: ExtractOptions) -> float | None:
    """Look for a duration in the window that follows a closing ``</pre>``."""
    window_end = min(len(text), after + options.duration_window)
    next_block = text.find(options.open_probe, after)
    if next_block != -1:
        window_end = min(window_end, next_block)
    chunk = text[after:window_end]
    if not chunk:
        return None
    m = _LABELED_DURATION.search(chunk) or _BARE_DURATION.search(chunk)
    if not m:
        return None
    return parse_duration(m.group(1))


def _safe_depth(text: str, offset: int) -> int | None:
    try:
        return infer_depth(text, offset)
    except Exception as exc:  # noqa: BLE001
        logger.debug("depth inference failed at offset %d: %s", offset, exc)
        return None


def _first_line_in(doc: str, lo: int, hi: int) -> int | None:
    """Zero-based line number in `doc` of the first non-blank line in ``doc[lo:hi]``."""
    if hi <= lo:
        return None
    for index, line in enumerate(doc[lo:hi].split("\n")):
        if line.strip():
            return doc.count("\n", 0, lo) + index
    return None


def _remap(original: str, inner: str, cursor: int) -> Result[_Span, str]:
    """Locate a region's raw inner text in the unprocessed document.

    Searching starts at `cursor` (end of the previous remapped region) so that
    repeated content maps to successive occurrences. Blank inner text would
    match anywhere, so it is reported as a miss.
    """
    if not inner.strip():
        return err("blank region has no text to locate")
    found = original.find(inner, cursor)
    if found == -1:
        return err(f"inner text not found after offset {cursor}")
    after = found + len(inner)

    pre_start = original.rfind(_OPEN, 0, found + len(_OPEN))
    if pre_start == -1:
        line = _first_line_in(original, found, after)
        return ok(_Span(found, after, line, after))

    next_gt = original.find(">", after)
    close = original.find(_CLOSE, after)
    inner_end = after
    if close != -1 and close < next_gt:
        end = close + len(_CLOSE)
        inner_end = close
    else:
        next_pre = original.find(_OPEN + ">", after)
        if next_pre != -1 and next_gt != -1 and next_pre < next_gt:
            end = next_pre - 1
        else:
            end = after
    end = max(end, pre_start)

    open_end = original.find(">", pre_start)
    inner_start = open_end + 1 if open_end != -1 else pre_start
    line = _first_line_in(original, inner_start, inner_end)
    return ok(_Span(pre_start, end, line, end))


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #


def extract_blocks(
    text: str,
    original: str | None = None,
    *,
    options: ExtractOptions | None = None,
) -> list[Block]:
    """Extract job blocks from `text` in document order.

    Parameters
    ----------
    text:
        The document to scan, usually after :func:`~logoutline.parsing.preprocess`.
    original:
        The unprocessed document. When given and different from `text`,
        offsets and title lines refer to it instead of `text`.
    options:
        Heuristic tunables; defaults come from settings.

    Returns
    -------
    list[Block]
        One block per ``<pre>`` region; empty when there is none.
    """
    options = options or ExtractOptions()
    remap = original is not None and original != text
    reference = original if (remap and original is not None) else text

    blocks: list[Block] = []
    cursor = 0
    for m in _REGION.finditer(text):
        raw_inner = m.group(2)
        body, realization = _split_realization(raw_inner.replace("\r", ""))
        content = normalize_content(body)
        title = first_title(content)

        if title_indicates_zero(title):
            elapsed: float | None = 0.0
        else:
            elapsed = _find_elapsed(text, m.end(), options)

        level = _safe_depth(text, m.start())

        start, end = m.start(), m.end()
        title_line: int | None = None
        if remap and original is not None:
            span = _remap(original, raw_inner, cursor)
            if span.is_ok():
                start, end, title_line, cursor = span.unwrap()
            else:
                logger.debug("remap failed for %r: %s", title, span.unwrap_err())
        else:
            title_line = _first_line_in(text, m.start(2), m.end(2))

        end = min(end, len(reference))
        start = min(start, end)
        blocks.append(
            Block(
                level=level,
                title=title,
                content=content,
                start=start,
                end=end,
                elapsed=elapsed,
                realization=realization,
                title_line=title_line,
            )
        )

    logger.debug("extracted %d blocks", len(blocks))
    return blocks


__all__ = [
    "ExtractOptions",
    "extract_blocks",
    "first_title",
    "normalize_content",
    "title_indicates_zero",
]
