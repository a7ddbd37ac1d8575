"""Tests for the deactivated-marker fix-up."""

from __future__ import annotations

from logoutline.parsing.preprocess import preprocess


def test_closes_region_after_deactivated_marker() -> None:
    assert preprocess("<pre>\nJob - deactivated\nnext") == "<pre>\nJob - deactivated</pre>\nnext"


def test_marker_at_end_of_text_and_crlf() -> None:
    assert preprocess("<pre>Job - deactivated") == "<pre>Job - deactivated</pre>"
    assert preprocess("a - deactivated\r\nb") == "a - deactivated</pre>\r\nb"


def test_marker_mid_line_is_left_alone() -> None:
    text = "<pre>Job - deactivated by user</pre>"
    assert preprocess(text) == text
