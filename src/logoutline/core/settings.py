"""Centralized configuration using Pydantic Settings (v2).

This module exposes a single, cached `settings` instance that reads from:
- Real environment variables (highest precedence)
- `.env` files at the working directory: .env, .env.local, .env.dev/.env.test/.env.prod

The parser only needs one tunable (the width of the window searched for a
duration after each job block); the remaining fields drive logging and the
folder icon colors handed to outline front ends.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["dev", "test", "prod"]
LogLevelName = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

HEX_COLOR = r"^#[0-9a-fA-F]{6}$"


class Settings(BaseSettings):
    """Typed configuration loaded from env and `.env` files.

    Attributes
    ----------
    environment : EnvName
        Runtime environment flag; maps from `LOGOUTLINE_ENV`.
    log_level : LogLevelName
        Global log level string; maps from `LOG_LEVEL`.
    duration_window : int
        Number of characters after a closing ``</pre>`` scanned for an elapsed
        time; maps from `LOGOUTLINE_DURATION_WINDOW`.
    folder_icon_light, folder_icon_dark : str
        Fill colors for folder icons in light/dark themes.
    """

    environment: EnvName = Field(default="dev", alias="LOGOUTLINE_ENV")
    log_level: LogLevelName = Field(default="INFO", alias="LOG_LEVEL")
    duration_window: int = Field(default=400, ge=1, alias="LOGOUTLINE_DURATION_WINDOW")
    folder_icon_light: str = Field(
        default="#2100f4", pattern=HEX_COLOR, alias="LOGOUTLINE_FOLDER_ICON_LIGHT"
    )
    folder_icon_dark: str = Field(
        default="#ffcc00", pattern=HEX_COLOR, alias="LOGOUTLINE_FOLDER_ICON_DARK"
    )

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local", ".env.dev", ".env.test", ".env.prod"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def log_level_numeric(self) -> int:
        """Return the numeric logging level corresponding to `self.log_level`."""
        return getattr(logging, self.log_level, logging.INFO)


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Create and cache a `Settings` instance.

    Tests force a rebuild via `load_settings.cache_clear()` after mutating
    `os.environ`.
    """
    os.environ.setdefault("LOGOUTLINE_ENV", "dev")
    return Settings()


settings: Settings = load_settings()


def get_logger(name: str = "logoutline") -> logging.Logger:
    """Return a process-global logger configured to the current log level."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
        )
        logger.addHandler(handler)
    logger.setLevel(load_settings().log_level_numeric())
    logger.propagate = False
    return logger
