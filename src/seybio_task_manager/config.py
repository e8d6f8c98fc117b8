# src/seybio_task_manager/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole package.
- Nothing is required at import time; every field has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "SEYBIO_TASKS"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_dir: Path | None

    # ---- Serialization ----
    json_indent: int | None

    @staticmethod
    def from_env() -> Settings:
        app_name = _env(_k("APP_NAME"), "seybio-tasks").strip() or "seybio-tasks"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"
        log_dir = _env_path(_k("LOG_DIR"), None)

        # 0 or negative means compact output, same as unset.
        json_indent = _env_int(_k("JSON_INDENT"), None)
        if json_indent is not None and json_indent <= 0:
            json_indent = None

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_dir=log_dir,
            json_indent=json_indent,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
