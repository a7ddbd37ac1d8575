# tests/test_cli.py
"""
Tests for the logoutline command-line interface (CLI).

Scope
-----
1.  **Command Registration**: `--help` lists the commands.
2.  **Argument Validation**: Typer's `exists=True` check on the log file.
3.  **Rendering**: tree, table, JSON and HTML outputs over a real log.
4.  **Error Handling**: graceful exit codes on failures.

We use `typer.testing.CliRunner` to invoke the app in-process.
"""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from logoutline.cli import app


@pytest.fixture  # type: ignore[misc]
def runner() -> CliRunner:
    """Create a fresh CliRunner for each test."""
    return CliRunner()


@pytest.fixture  # type: ignore[misc]
def log_file(tmp_path: Path, job_log: str) -> Path:
    path = tmp_path / "run.log"
    path.write_text(job_log, encoding="utf-8")
    return path


def test_cli_help_shows_usage(runner: CliRunner) -> None:
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0, f"Help failed: {result.output}"
    for command in ("outline", "blocks", "search", "render"):
        assert command in result.output


def test_outline_fails_on_missing_file(runner: CliRunner) -> None:
    result = runner.invoke(app, ["outline", "ghost.log"])
    assert result.exit_code != 0
    assert "does not exist" in result.output


def test_outline_prints_tree(runner: CliRunner, log_file: Path) -> None:
    result = runner.invoke(app, ["outline", str(log_file)])
    assert result.exit_code == 0, f"CLI Failed with Output:\n{result.output}"
    assert "Realization 1" in result.output
    assert "Compute volumes" in result.output
    assert "1 mins 2.5s" in result.output


def test_outline_json(runner: CliRunner, log_file: Path) -> None:
    result = runner.invoke(app, ["outline", str(log_file), "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [g["label"] for g in payload] == ["Realization 1", "Unassigned"]
    assert payload[0]["children"][0]["highlight"]["title_line"] == 3


def test_outline_reports_empty_log(runner: CliRunner, tmp_path: Path) -> None:
    empty = tmp_path / "empty.log"
    empty.write_text("<html>nothing</html>", encoding="utf-8")
    result = runner.invoke(app, ["outline", str(empty)])
    assert result.exit_code == 0
    assert "No RMS job blocks found" in result.output


def test_blocks_table(runner: CliRunner, log_file: Path) -> None:
    result = runner.invoke(app, ["blocks", str(log_file)])
    assert result.exit_code == 0, result.output
    assert "Load grid" in result.output
    assert "N/A" not in result.output


def test_search_matches_and_misses(runner: CliRunner, log_file: Path) -> None:
    hit = runner.invoke(app, ["search", str(log_file), "COMPUTE"])
    assert hit.exit_code == 0, hit.output
    assert "Found 1 matches" in hit.output
    assert "Compute volumes" in hit.output

    miss = runner.invoke(app, ["search", str(log_file), "zzz"])
    assert miss.exit_code == 0
    assert "No matches" in miss.output


def test_render_writes_html(runner: CliRunner, log_file: Path, tmp_path: Path) -> None:
    target = tmp_path / "view.html"
    result = runner.invoke(app, ["render", str(log_file), "-o", str(target)])
    assert result.exit_code == 0, result.output
    assert 'id="b_19"' in target.read_text(encoding="utf-8")

    default = runner.invoke(app, ["render", str(log_file)])
    assert default.exit_code == 0, default.output
    assert (tmp_path / "run.outline.html").exists()


def test_outline_handles_pipeline_crash(runner: CliRunner, log_file: Path) -> None:
    with patch("logoutline.cli.run_outline") as mock_run:
        mock_run.side_effect = RuntimeError("disk on fire")
        result = runner.invoke(app, ["outline", str(log_file)])

    assert result.exit_code == 1, f"Expected 1, got {result.exit_code}:\n{result.output}"
    assert "Outline Error" in result.output
    assert "disk on fire" in result.output
