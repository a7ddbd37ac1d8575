"""Tests for the anchored HTML view."""

from __future__ import annotations

from logoutline.outline.render import inject_anchors, render_document


def test_anchor_ids_use_original_offsets(raw_log: str) -> None:
    html = inject_anchors(raw_log)
    assert '<pre id="b_0">' in html
    assert '<pre id="b_43">' in html
    assert '<pre id="b_69">' in html
    assert "Job B - deactivated</pre>" in html


def test_unprocessed_text_gets_anchors_at_scanned_offsets(job_log: str) -> None:
    html = inject_anchors(job_log)
    assert html.count(' id="b_') == 3
    assert '<pre id="b_19">' in html


def test_render_document_wraps_page(job_log: str) -> None:
    page = render_document(job_log, title="run <1>.log")
    assert page.startswith("<!DOCTYPE html>")
    assert "<title>run &lt;1&gt;.log</title>" in page
    assert "white-space: pre-wrap" in page
    assert "Compute volumes" in page


def test_highlight_script_selects_title_line(job_log: str) -> None:
    page = render_document(job_log)
    assert "function selectTitleLine(el)" in page
    assert "selectTitleLine(el);" in page
    assert "text.indexOf('\\n', start)" in page
