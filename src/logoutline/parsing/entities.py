"""Decode the HTML character references that show up in log text.

Only numeric references and a handful of named ones are handled; anything
else is left as-is. Decoding never fails: a numeric reference that does not
map to a valid code point becomes the empty string.

>>> decode_entities("a &amp; b &#65; &nbsp;c")
'a & b A\\xa0c'
"""

from __future__ import annotations

import re

_NUMERIC = re.compile(r"&#(x?[0-9a-fA-F]+);?", flags=re.IGNORECASE)
_NAMED = re.compile(r"&([a-zA-Z]+);?")

NAMED_ENTITIES: dict[str, str] = {
    "nbsp": "\u00a0",
    "lt": "<",
    "gt": ">",
    "amp": "&",
    "quot": '"',
    "apos": "'",
}


def _decode_numeric(match: re.Match[str]) -> str:
    ref = match.group(1)
    try:
        if ref[0] in "xX":
            return chr(int(ref[1:], 16))
        return chr(int(ref, 10))
    except (ValueError, OverflowError):
        return ""


def _decode_named(match: re.Match[str]) -> str:
    return NAMED_ENTITIES.get(match.group(1).lower(), match.group(0))


def decode_entities(text: str) -> str:
    """Replace numeric and known named character references in `text`."""
    if not text:
        return text
    text = _NUMERIC.sub(_decode_numeric, text)
    return _NAMED.sub(_decode_named, text)


__all__ = ["NAMED_ENTITIES", "decode_entities"]
