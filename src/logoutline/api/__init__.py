"""HTTP front end for logoutline (FastAPI)."""

from __future__ import annotations

from logoutline.api.app import create_app

__all__ = ["create_app"]
