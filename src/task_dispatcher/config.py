# src/task_dispatcher/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "DISPATCHER"

load_dotenv(override=False)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- HTTP ----
    host: str
    port: int

    # ---- Local data paths ----
    data_dir: Path
    tasks_path: Path

    # ---- Time ----
    utc_offset_hours: float

    # ---- Reclaimer ----
    reclaim_enabled: bool
    reclaim_interval_seconds: float
    reclaim_timeout_seconds: float

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "task-dispatcher") or "task-dispatcher"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        host = _env(_k("HOST"), "0.0.0.0")
        port = _env_int(_k("PORT"), 80)

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/dispatcher"))
        # Relative to the working directory, not data_dir.
        tasks_path = _env_path(_k("TASKS_PATH"), Path("task.json"))

        utc_offset_hours = _env_float(_k("UTC_OFFSET_HOURS"), 8.0)

        reclaim_enabled = _env_bool(_k("RECLAIM_ENABLED"), True)
        reclaim_interval_seconds = _env_float(_k("RECLAIM_INTERVAL_SECONDS"), 3600.0)
        reclaim_timeout_seconds = _env_float(_k("RECLAIM_TIMEOUT_SECONDS"), 10800.0)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            host=host,
            port=port,
            data_dir=data_dir,
            tasks_path=tasks_path,
            utc_offset_hours=utc_offset_hours,
            reclaim_enabled=reclaim_enabled,
            reclaim_interval_seconds=reclaim_interval_seconds,
            reclaim_timeout_seconds=reclaim_timeout_seconds,
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS
