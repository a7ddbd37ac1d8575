"""Pipeline entry points for logoutline.

Currently exposed:

- :func:`run_outline`: preprocess → extract → build, implemented in ``outline.py``.
"""

from __future__ import annotations

from .outline import OutlineContext, OutlineResult, context_from_path, run_outline

__all__ = ["OutlineContext", "OutlineResult", "context_from_path", "run_outline"]
