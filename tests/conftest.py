"""Shared fixtures: two small job logs and settings isolation.

`job_log` is an HTML log with nested ``<div>`` sections, one realization
annotation and a skipped job. `raw_log` is an *unprocessed* log whose
deactivated job is never closed, so it only parses after preprocessing.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from logoutline.core.settings import load_settings

JOB_LOG = (
    "<html><body>\n"
    "<div>\n"
    "<pre>\n"
    "Load grid - for project realization 1\n"
    "  some   detail &amp; more\n"
    "</pre>\n"
    "Elapsed time: 0:00:02.5\n"
    "<div>\n"
    "<pre>Compute volumes</pre>\n"
    "took 0:01:00.0\n"
    "</div>\n"
    "<pre>Export - skipped</pre>\n"
    "Elapsed: 0:00:09.0\n"
    "</div>\n"
    "</body></html>\n"
)

RAW_LOG = (
    "<pre>\n"
    "Job A\n"
    "</pre>\n"
    "Elapsed time: 0:00:01.0\n"
    "<pre>\n"
    "Job B - deactivated\n"
    "<pre>\n"
    "Job C\n"
    "</pre>\n"
    "duration 0:00:03.0\n"
)


@pytest.fixture  # type: ignore[misc]
def job_log() -> str:
    return JOB_LOG


@pytest.fixture  # type: ignore[misc]
def raw_log() -> str:
    return RAW_LOG


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    """Drop cached settings after each test so env overrides do not leak."""
    yield
    load_settings.cache_clear()
