# src/task_journal/cli/render.py

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..tasks.task_models import DUE_DATE_FORMAT, Task

CREATED_AT_FORMAT = "%Y-%m-%d %H:%M"

# (header, width)
COLUMNS: tuple[tuple[str, int], ...] = (
    ("ID", 5),
    ("Task", 50),
    ("Created At", 20),
    ("Due Date", 12),
    ("Priority", 10),
    ("Category", 20),
)


def _row(cells: Sequence[str]) -> str:
    return " ".join(f"{cell:<{width}}" for cell, (_, width) in zip(cells, COLUMNS)).rstrip()


def format_header() -> str:
    return _row([header for header, _ in COLUMNS])


def format_task_row(label: str | int, task: Task) -> str:
    created_at = task.created_at.astimezone().strftime(CREATED_AT_FORMAT)
    due_date = task.due_date.strftime(DUE_DATE_FORMAT) if task.due_date else ""
    return _row(
        [
            str(label),
            task.text,
            created_at,
            due_date,
            task.priority.value if task.priority else "",
            task.category or "",
        ]
    )


def render_task_table(tasks: Iterable[Task], *, numbered: bool) -> str:
    """
    Render tasks as a fixed-width table.

    numbered=True labels rows with a running 1-based display index (the
    position `done` expects); otherwise rows carry the stored task id.
    """
    lines = [format_header()]
    for i, task in enumerate(tasks, start=1):
        lines.append(format_task_row(i if numbered else task.id, task))
    return "\n".join(lines)
