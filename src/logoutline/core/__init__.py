"""Core package for logoutline: settings, result container, data contracts."""

from __future__ import annotations

__all__ = ["__doc__"]
