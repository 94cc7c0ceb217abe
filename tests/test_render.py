# tests/test_render.py

from __future__ import annotations

from datetime import date, datetime, timezone

from task_journal.cli.render import format_header, render_task_table
from task_journal.tasks.task_models import Priority, Task


def _tasks() -> list[Task]:
    created = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    return [
        Task(id=7, text="Ship release", created_at=created, priority=Priority.HIGH, category="work"),
        Task(id=3, text="Water plants", created_at=created, due_date=date(2022, 12, 31)),
    ]


def test_header_columns() -> None:
    assert format_header().split() == ["ID", "Task", "Created", "At", "Due", "Date", "Priority", "Category"]


def test_numbered_table_uses_display_index() -> None:
    lines = render_task_table(_tasks(), numbered=True).splitlines()

    assert len(lines) == 3
    assert lines[1].split()[0] == "1"
    assert lines[2].split()[0] == "2"
    assert "Ship release" in lines[1] and "high" in lines[1] and "work" in lines[1]
    assert "2022-12-31" in lines[2]


def test_unnumbered_table_uses_task_id() -> None:
    lines = render_task_table(_tasks(), numbered=False).splitlines()

    assert lines[1].split()[0] == "7"
    assert lines[2].split()[0] == "3"


def test_created_at_is_rendered_in_local_time() -> None:
    task = _tasks()[0]
    expected = task.created_at.astimezone().strftime("%Y-%m-%d %H:%M")
    assert expected in render_task_table([task], numbered=True)
