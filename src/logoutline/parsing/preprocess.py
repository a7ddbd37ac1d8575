"""Textual fix-ups applied to a log document before it is scanned.

Deactivated jobs are logged as a ``<pre>`` whose last line ends in
`` - deactivated`` and that is never closed. Closing the region right after
the marker lets the extractor delimit it like any other job.
"""

from __future__ import annotations

import re

_DEACTIVATED_EOL = re.compile(r"( - deactivated)(?=\r?\n|$)")


def preprocess(text: str) -> str:
    """Return `text` with an explicit ``</pre>`` after each deactivated marker."""
    return _DEACTIVATED_EOL.sub(r"\1</pre>", text)


__all__ = ["preprocess"]
