"""Approximate markup nesting depth at an offset.

This is a counting heuristic, not a parser: it walks tag-shaped matches from
the start of the text and keeps a running depth of open, non-void tags.
Malformed or irregular markup produces an estimate, never an error.

>>> html = "<div><div><pre>X</pre></div></div>"
>>> infer_depth(html, html.index("<pre>"))
2
"""

from __future__ import annotations

import re

VOID_TAGS: frozenset[str] = frozenset(
    {
        "area", "base", "br", "col", "embed", "hr", "img",
        "input", "link", "meta", "param", "source", "track", "wbr",
    }
)

_TAG = re.compile(r"</?([a-zA-Z0-9_-]+)(?:\s[^>]*)?>")


def infer_depth(markup: str, offset: int) -> int:
    """Return the count of unmatched open tags that start before `offset`.

    Close tags decrement the depth but never below zero; self-closing
    (``<x/>``) and void tags do not increment it. Tags at or after `offset`
    are not examined.
    """
    depth = 0
    if offset <= 0:
        return depth
    for m in _TAG.finditer(markup):
        if m.start() >= offset:
            break
        tag = m.group(0)
        if tag.startswith("</"):
            if depth > 0:
                depth -= 1
        elif not tag.endswith("/>") and m.group(1).lower() not in VOID_TAGS:
            depth += 1
    return depth


__all__ = ["VOID_TAGS", "infer_depth"]
