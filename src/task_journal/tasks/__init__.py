# src/task_journal/tasks/__init__.py

from .task_errors import InvalidInput, JournalIOError, ParseError, TaskStoreError
from .task_models import Priority, SortOrder, Task
from .task_store import TaskStore

__all__ = [
    "InvalidInput",
    "JournalIOError",
    "ParseError",
    "Priority",
    "SortOrder",
    "Task",
    "TaskStore",
    "TaskStoreError",
]
