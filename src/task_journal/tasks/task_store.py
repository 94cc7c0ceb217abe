# src/task_journal/tasks/task_store.py

from __future__ import annotations

import contextlib
import json
import logging
import os
from pathlib import Path

from .task_errors import InvalidInput, JournalIOError, ParseError
from .task_models import Priority, SortOrder, Task, sort_tasks

logger = logging.getLogger(__name__)


class TaskStore:
    """
    JSON-file task store (the "journal").

    The file holds a single JSON array of task records, kept in ascending
    priority-rank order. Every mutation is read-modify-write of the whole file:
    - load the current array
    - apply exactly one change
    - re-sort and rewrite the full array (tmp file + os.replace)

    Validation always happens before the write, so a failed call leaves
    the previous contents untouched.

    Concurrency:
    - the file is not locked; concurrent writers are not supported
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def _read_text(self) -> str:
        try:
            return self._path.read_text("utf-8")
        except FileNotFoundError:
            return ""
        except UnicodeDecodeError as e:
            raise ParseError(f"Journal file {self._path} is not UTF-8 text: {e}") from e
        except OSError as e:
            raise JournalIOError(f"Failed to read journal file {self._path}: {e}") from e

    def _write(self, tasks: list[Task]) -> None:
        payload = json.dumps([t.to_dict() for t in tasks], ensure_ascii=False, indent=2) + "\n"
        tmp = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, "utf-8")
            os.replace(tmp, self._path)
        except OSError as e:
            with contextlib.suppress(OSError):
                tmp.unlink(missing_ok=True)
            raise JournalIOError(f"Failed to write journal file {self._path}: {e}") from e
        logger.debug("Journal written path=%s tasks=%d", self._path, len(tasks))

    # ---- public API ----

    def load_tasks(self) -> list[Task]:
        """
        Return the stored tasks in file order.

        A missing or blank file is an empty journal, not an error.
        """
        content = self._read_text()
        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Journal file {self._path} is not valid JSON: {e}") from e

        if not isinstance(data, list):
            raise ParseError(
                f"Journal file {self._path} must contain a JSON array, got {type(data).__name__}"
            )

        tasks: list[Task] = []
        for i, raw in enumerate(data, start=1):
            try:
                tasks.append(Task.from_dict(raw))
            except ParseError as e:
                raise ParseError(f"Journal file {self._path}, record #{i}: {e}") from None

        logger.debug("Journal loaded path=%s tasks=%d", self._path, len(tasks))
        return tasks

    def count_tasks(self) -> int:
        return len(self.load_tasks())

    def add_task(
        self,
        text: str,
        due_date: str | None = None,
        priority: Priority | str | None = None,
        category: str | None = None,
    ) -> Task:
        task = Task.new(text, due_date, priority=priority, category=category)

        tasks = self.load_tasks()
        task.id = len(tasks) + 1
        tasks.append(task)
        self._write(sort_tasks(tasks))

        logger.info(
            "Task added id=%s priority=%s category=%s due_date=%s",
            task.id,
            task.priority,
            task.category,
            task.due_date,
        )
        return task

    def complete_task(self, position: int) -> Task:
        """
        Remove the task at 1-based `position` (in stored order) and return it.
        """
        tasks = self.load_tasks()
        if not tasks:
            logger.warning("Rejected completion position=%s: journal is empty", position)
            raise InvalidInput(f"Invalid task position {position}: the task list is empty.")
        if position < 1 or position > len(tasks):
            logger.warning("Rejected completion position=%s total=%d", position, len(tasks))
            raise InvalidInput(
                f"Invalid task position {position}: expected 1..{len(tasks)}."
            )

        removed = tasks.pop(position - 1)
        self._write(sort_tasks(tasks))

        logger.info("Task completed id=%s position=%s", removed.id, position)
        return removed

    def list_tasks(
        self,
        category: str | None = None,
        sort_order: SortOrder | str = SortOrder.ASC,
    ) -> list[Task]:
        """
        Tasks sorted by priority rank in `sort_order`, optionally narrowed to
        an exact `category` match. Read-only.
        """
        order = SortOrder.parse(sort_order)
        tasks = sort_tasks(self.load_tasks(), order)
        if category is not None:
            tasks = [t for t in tasks if t.category == category]
        return tasks

    def search_tasks(self, keyword: str) -> list[Task]:
        """Case-sensitive substring match on task text, in stored order."""
        return [t for t in self.load_tasks() if keyword in t.text]
