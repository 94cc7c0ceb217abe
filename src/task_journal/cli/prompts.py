# src/task_journal/cli/prompts.py

"""Blocking console prompts used by `add` when values are not given as flags."""

from __future__ import annotations

from collections.abc import Callable

from ..tasks.task_errors import InvalidInput
from ..tasks.task_models import Priority

ReadLine = Callable[[str], str]
Emitter = Callable[[str], None]

PRIORITY_PROMPT = "Enter the priority for the task (Low, Medium, High): "
INVALID_PRIORITY_MESSAGE = "Invalid priority. Please enter 'Low', 'Medium', or 'High'."
CATEGORY_PROMPT = "Enter the category for the task: "


def prompt_priority(read: ReadLine = input, emit: Emitter = print) -> Priority:
    """Ask until the answer is low/medium/high (any case)."""
    while True:
        answer = read(PRIORITY_PROMPT)
        try:
            return Priority.parse(answer)
        except InvalidInput:
            emit(INVALID_PRIORITY_MESSAGE)


def prompt_category(read: ReadLine = input) -> str | None:
    return read(CATEGORY_PROMPT).strip() or None
