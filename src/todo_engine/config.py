# src/todo_engine/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Invalid values fall back to defaults instead of failing at startup.
- Settings are injectable: tests build their own instead of reading the env.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

ENV_PREFIX = "TODO"

STORAGE_BACKENDS = ("json", "sqlite", "memory", "none")
DEFAULT_STORAGE_KEY = "kavia.todo.v1"


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


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s=%r; using %s", name, raw, default)
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value not in choices:
        logger.warning("Invalid %s=%r (expected one of %s); using %s", name, raw, choices, default)
        return default
    return value


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Persistence ----
    data_dir: Path
    storage_backend: str
    storage_path: Path
    storage_key: str
    persist_in_background: bool

    # ---- Presentation ----
    announce_seconds: float

    @property
    def log_dir(self) -> Path:
        return self.data_dir

    @staticmethod
    def from_env(*, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv(override=False)

        app_name = _env(_k("APP_NAME"), "todo").strip() or "todo"
        log_level = _env(_k("LOG_LEVEL"), "INFO").strip().upper() or "INFO"

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        storage_backend = _env_choice(_k("STORAGE_BACKEND"), STORAGE_BACKENDS, "json")
        default_file = "storage.sqlite3" if storage_backend == "sqlite" else "storage.json"
        storage_path = _env_path(_k("STORAGE_PATH"), data_dir / default_file)
        storage_key = _env(_k("STORAGE_KEY"), DEFAULT_STORAGE_KEY).strip() or DEFAULT_STORAGE_KEY
        persist_in_background = _env_bool(_k("PERSIST_IN_BACKGROUND"), True)

        announce_seconds = max(0.0, _env_float(_k("ANNOUNCE_SECONDS"), 1.2))

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            storage_backend=storage_backend,
            storage_path=storage_path,
            storage_key=storage_key,
            persist_in_background=persist_in_background,
            announce_seconds=announce_seconds,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
