# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

import pytest

from task_journal.logging_setup import _ConsoleNoiseFilter
from task_journal.tasks.task_store import TaskStore


@pytest.fixture()
def journal_path(tmp_path: Path) -> Path:
    return tmp_path / "journal.json"


@pytest.fixture()
def settings(journal_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with the CLI and bootstrap.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep tests isolated and deterministic.
    """
    return SimpleNamespace(
        app_name="task-journal",
        log_level="WARNING",
        log_file=None,
        journal_file=journal_path,
        default_sort_order="asc",
    )


@pytest.fixture()
def store(journal_path: Path) -> TaskStore:
    return TaskStore(journal_path)


@pytest.fixture(autouse=True)
def _drop_cli_log_handlers():
    """setup_logging() replaces root handlers; undo that after each test."""
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        ours = type(h) is logging.FileHandler or any(
            isinstance(f, _ConsoleNoiseFilter) for f in h.filters
        )
        if ours:
            root.removeHandler(h)
            h.close()
    logging.captureWarnings(False)
