# src/task_journal/tasks/task_errors.py

from __future__ import annotations


class TaskStoreError(Exception):
    """Base class for every failure reported by the task store."""


class JournalIOError(TaskStoreError):
    """The journal file could not be opened, read or written."""


class ParseError(TaskStoreError):
    """The journal file has content, but it is not a JSON array of task records."""


class InvalidInput(TaskStoreError):
    """A caller-supplied value violates a constraint (due date, position, priority...)."""
