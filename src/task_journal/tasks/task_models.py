# src/task_journal/tasks/task_models.py

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from enum import StrEnum
from typing import Any

from .task_errors import InvalidInput, ParseError

DUE_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
DUE_DATE_FORMAT = "%Y-%m-%d"

UNSET_PRIORITY_RANK = 4


class Priority(StrEnum):
    """
    Task priority.

    Ordering never compares the strings: each member maps to a rank
    (high=1, medium=2, low=3) and a task without priority ranks last.
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return _PRIORITY_RANK[self]

    @classmethod
    def parse(cls, raw: str) -> Priority:
        """Case-insensitive lookup; unknown names raise InvalidInput."""
        try:
            return cls(raw.strip().lower())
        except (AttributeError, ValueError):
            raise InvalidInput(
                f"Invalid priority {raw!r}. Use one of: low, medium, high."
            ) from None


_PRIORITY_RANK: dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | SortOrder) -> SortOrder:
        if isinstance(raw, SortOrder):
            return raw
        try:
            return cls(str(raw).strip().lower())
        except ValueError:
            raise InvalidInput(f"Invalid sort order {raw!r}. Use 'asc' or 'desc'.") from None


def parse_due_date(raw: str | None) -> date | None:
    """
    Parse a YYYY-MM-DD string into a calendar date.

    None or an empty string means "no due date". Anything else must match
    the 4-2-2 digit pattern and name a real day.
    """
    if raw is None or raw.strip() == "":
        return None
    raw = raw.strip()
    if not DUE_DATE_RE.match(raw):
        raise InvalidInput(f"Invalid date format {raw!r}. Use YYYY-MM-DD format.")
    try:
        return datetime.strptime(raw, DUE_DATE_FORMAT).date()
    except ValueError as e:
        raise InvalidInput(f"Invalid due date {raw!r}: {e}.") from None


def require_text(text: str) -> str:
    if not text or not text.strip():
        raise InvalidInput("Task text must not be empty.")
    return text.strip()


def utc_now() -> datetime:
    # Whole seconds only: the journal stores integer epoch seconds.
    return datetime.now(timezone.utc).replace(microsecond=0)


def _date_to_epoch(d: date) -> int:
    return int(datetime.combine(d, time.min, tzinfo=timezone.utc).timestamp())


def _epoch_to_datetime(ts: int) -> datetime:
    try:
        return datetime.fromtimestamp(ts, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        raise ParseError(f"timestamp {ts} is out of range") from None


def _require_epoch(raw: dict[str, Any], key: str) -> int:
    val = raw[key]
    if isinstance(val, bool) or not isinstance(val, int):
        raise ParseError(f"field {key!r} must be integer epoch seconds, got {val!r}")
    return val


def _optional_str(raw: dict[str, Any], key: str) -> str | None:
    val = raw.get(key)
    if val is None or isinstance(val, str):
        return val
    raise ParseError(f"field {key!r} must be a string or null, got {val!r}")


@dataclass(slots=True)
class Task:
    id: int
    text: str
    created_at: datetime
    due_date: date | None = None

    priority: Priority | None = None
    category: str | None = None

    @classmethod
    def new(
        cls,
        text: str,
        due_date: str | None = None,
        *,
        priority: Priority | str | None = None,
        category: str | None = None,
    ) -> Task:
        """
        Build a not-yet-stored task (id=0) stamped with the current time.

        Validation happens here so a bad value never reaches the journal file.
        """
        if isinstance(priority, str) and not isinstance(priority, Priority):
            priority = Priority.parse(priority)
        if category is not None:
            category = category.strip() or None
        return cls(
            id=0,
            text=require_text(text),
            created_at=utc_now(),
            due_date=parse_due_date(due_date),
            priority=priority,
            category=category,
        )

    @property
    def priority_rank(self) -> int:
        return priority_rank(self)

    # ---- JSON record codec ----

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "text": self.text,
            "created_at": int(self.created_at.timestamp()),
            "due_date": _date_to_epoch(self.due_date) if self.due_date is not None else None,
            "priority": self.priority.value if self.priority is not None else None,
            "category": self.category,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ParseError(f"task record must be an object, got {type(raw).__name__}")

        text = raw.get("text")
        if not isinstance(text, str):
            raise ParseError(f"field 'text' must be a string, got {text!r}")
        if "created_at" not in raw:
            raise ParseError("missing field 'created_at'")

        task_id = raw.get("id", 0)
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            raise ParseError(f"field 'id' must be an integer, got {task_id!r}")

        due_date: date | None = None
        if raw.get("due_date") is not None:
            due_date = _epoch_to_datetime(_require_epoch(raw, "due_date")).date()

        priority: Priority | None = None
        raw_priority = _optional_str(raw, "priority")
        if raw_priority is not None:
            try:
                priority = Priority.parse(raw_priority)
            except InvalidInput as e:
                raise ParseError(str(e)) from None

        return cls(
            id=task_id,
            text=text,
            created_at=_epoch_to_datetime(_require_epoch(raw, "created_at")),
            due_date=due_date,
            priority=priority,
            category=_optional_str(raw, "category"),
        )


def priority_rank(task: Task) -> int:
    if task.priority is None:
        return UNSET_PRIORITY_RANK
    return task.priority.rank


def sort_tasks(tasks: Iterable[Task], order: SortOrder = SortOrder.ASC) -> list[Task]:
    """
    Stable sort by priority rank.

    DESC reverses the ascending comparison; tasks of equal rank keep their
    relative order in both directions.
    """
    return sorted(tasks, key=priority_rank, reverse=order is SortOrder.DESC)
