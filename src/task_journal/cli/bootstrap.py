# src/task_journal/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves the journal file (flag > settings/env > ~/.rusty-journal.json),
- wires the TaskStore and console I/O into AppState.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from ..config import default_journal_file, get_settings
from ..core.state import AppState
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def resolve_journal_file(cli_value: str | Path | None, settings) -> Path:
    if cli_value:
        return Path(cli_value).expanduser()
    configured = getattr(settings, "journal_file", None)
    if configured:
        return Path(configured)
    return default_journal_file()


def create_initial_state(
    *,
    settings=None,
    journal_file: str | Path | None = None,
    read: Callable[[str], str] = input,
    emit: Callable[[str], None] = print,
) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the CLI easy to test; if settings is
    None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    path = resolve_journal_file(journal_file, settings)
    logger.debug("Using journal file %s", path)

    return AppState(
        settings=settings,
        task_store=TaskStore(path),
        read=read,
        emit=emit,
    )
