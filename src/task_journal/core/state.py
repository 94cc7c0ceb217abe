# src/task_journal/core/state.py

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_store import TaskStore


@dataclass
class AppState:
    # Settings object (config.Settings or a test stand-in).
    settings: object

    task_store: TaskStore

    # Console I/O; swapped out by tests.
    read: Callable[[str], str] = input
    emit: Callable[[str], None] = print
