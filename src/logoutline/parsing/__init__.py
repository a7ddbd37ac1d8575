"""Parsing stage: turn a log document into a flat, ordered list of Blocks."""

from __future__ import annotations

from logoutline.parsing.duration import format_seconds, parse_duration
from logoutline.parsing.entities import decode_entities
from logoutline.parsing.extractor import ExtractOptions, extract_blocks
from logoutline.parsing.preprocess import preprocess

__all__ = [
    "ExtractOptions",
    "decode_entities",
    "extract_blocks",
    "format_seconds",
    "parse_duration",
    "preprocess",
]
