# src/task_journal/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object per invocation, passed explicitly (no hidden globals).
- Nothing required at import time; every value has a default.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

ENV_PREFIX = "TASK_JOURNAL"

DEFAULT_JOURNAL_NAME = ".rusty-journal.json"
_SORT_ORDERS = ("asc", "desc")


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_path(name: str, default: Path | None) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    val = raw.strip().lower()
    return val if val in choices else default


def _env_log_level(name: str, default: str) -> str:
    raw = _env(name, default).strip().upper()
    return raw if isinstance(logging.getLevelName(raw), int) else default


def default_journal_file() -> Path:
    return Path.home() / DEFAULT_JOURNAL_NAME


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str
    log_file: Path | None

    # ---- Journal ----
    journal_file: Path
    default_sort_order: str

    @staticmethod
    def from_env(*, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            # .env next to where the command runs; real env vars win.
            load_dotenv(find_dotenv(usecwd=True), override=False)

        app_name = _env(_k("APP_NAME"), "task-journal").strip() or "task-journal"
        log_level = _env_log_level(_k("LOG_LEVEL"), "WARNING")
        log_file = _env_path(_k("LOG_FILE"), None)

        journal_file = _env_path(_k("FILE"), None) or default_journal_file()
        default_sort_order = _env_choice(_k("SORT_ORDER"), _SORT_ORDERS, "asc")

        return Settings(
            app_name=app_name,
            log_level=log_level,
            log_file=log_file,
            journal_file=journal_file,
            default_sort_order=default_sort_order,
        )


def get_settings() -> Settings:
    return Settings.from_env()
