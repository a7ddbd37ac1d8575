"""Elapsed-time parsing and formatting.

Job logs print durations in one fixed shape, ``H:MM:SS.F`` (hours may have
any number of digits, the fraction at least one). :func:`parse_duration`
accepts exactly that shape and returns seconds; anything else, including
values too large to represent as a float, is reported as "no duration"
(``None``) rather than an error.

:func:`format_seconds` goes the other way for display, and
:func:`parse_label` reads a formatted label back into seconds.

Examples
--------
>>> parse_duration("0:01:05.50")
65.5
>>> parse_duration("1:2:3.4") is None
True
>>> format_seconds(3661.25)
'1 hr 01 mins 1.25s'
>>> parse_label(format_seconds(125.5))
125.5
"""

from __future__ import annotations

import math
import re

DURATION = r"[0-9]+:[0-5][0-9]:[0-5][0-9]\.[0-9]+"

_DURATION_EXACT = re.compile(r"^([0-9]+):([0-5][0-9]):([0-5][0-9])\.([0-9]+)$")
_LABEL = re.compile(
    r"^\s*(?:(?P<h>\d+)\s*hr\s+)?(?:(?P<m>\d+)\s*mins\s+)?(?P<s>-?\d+(?:\.\d+)?)\s*s\s*$"
)


def duration_pattern() -> re.Pattern[str]:
    """Return the unanchored ``H:MM:SS.F`` pattern, capturing the whole value."""
    return re.compile(f"({DURATION})")


def parse_duration(text: str | None) -> float | None:
    """Parse ``H:MM:SS.F`` into seconds, or return ``None`` for any other shape."""
    if not text:
        return None
    m = _DURATION_EXACT.match(text.strip())
    if not m:
        return None
    try:
        hours, minutes, seconds = int(m.group(1)), int(m.group(2)), int(m.group(3))
        total = hours * 3600 + minutes * 60 + seconds + float("0." + m.group(4))
    except (ValueError, OverflowError):
        return None
    return total if math.isfinite(total) else None


def _trim(number: str) -> str:
    """Drop trailing zeros and a bare trailing decimal point."""
    if "." in number:
        number = number.rstrip("0").rstrip(".")
    return number


def format_seconds(secs: float) -> str:
    """Render seconds as ``"H hr MM mins Ss"``, ``"M mins Ss"`` or ``"Ss"``."""
    if not math.isfinite(secs):
        return str(secs)
    magnitude = abs(secs)
    if magnitude >= 3600:
        hours = math.floor(secs / 3600)
        rem = secs - hours * 3600
        minutes = math.floor(rem / 60)
        seconds = _trim(f"{rem - minutes * 60:.3f}")
        return f"{hours} hr {minutes:02d} mins {seconds}s"
    if magnitude >= 60:
        minutes = math.floor(secs / 60)
        seconds = _trim(f"{secs - minutes * 60:.3f}")
        return f"{minutes} mins {seconds}s"
    digits = 6 if magnitude < 1e-3 else 3
    return f"{_trim(f'{secs:.{digits}f}')}s"


def format_elapsed(secs: float | None) -> str:
    """Display form of an optional elapsed value (empty when unknown)."""
    return "" if secs is None else format_seconds(secs)


def parse_label(label: str) -> float | None:
    """Read a label produced by :func:`format_seconds` back into seconds."""
    m = _LABEL.match(label or "")
    if not m:
        return None
    try:
        hours = int(m.group("h") or 0)
        minutes = int(m.group("m") or 0)
        total = hours * 3600 + minutes * 60 + float(m.group("s"))
    except (ValueError, OverflowError):
        return None
    return total if math.isfinite(total) else None


__all__ = [
    "DURATION",
    "duration_pattern",
    "format_elapsed",
    "format_seconds",
    "parse_duration",
    "parse_label",
]
