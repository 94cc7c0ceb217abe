# src/task_journal/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable

from ..core.state import AppState
from ..tasks.task_models import Priority, parse_due_date, require_text
from .prompts import prompt_category, prompt_priority
from .render import render_task_table

CommandHandler = Callable[[AppState, argparse.Namespace], str]

logger = logging.getLogger(__name__)

EMPTY_LIST_MESSAGE = "Task list is empty!"


class CommandRegistry:
    """Subcommand registry used by the CLI entry point (add, done, list, search)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def names(self) -> list[str]:
        return list(self._help)

    def help_text(self, name: str) -> str:
        return self._help.get(name.lower(), "")

    def handle(self, state: AppState, name: str, args: argparse.Namespace) -> str:
        """
        Run one subcommand and return the text to print.
        Store errors propagate to the caller.
        """
        handler = self._handlers.get(name.lower())
        if not handler:
            return f"Unknown command: {name}. Available: {', '.join(self.names())}."
        logger.debug("Dispatching command %s", name)
        return handler(state, args)


registry = CommandRegistry()


def cmd_add(state: AppState, args: argparse.Namespace) -> str:
    # Fail on bad text/due date before asking anything interactively.
    require_text(args.text)
    parse_due_date(args.due_date)

    if args.priority is not None:
        priority = Priority.parse(args.priority)
    else:
        priority = prompt_priority(state.read, state.emit)

    category = args.category if args.category is not None else prompt_category(state.read)

    task = state.task_store.add_task(
        args.text,
        args.due_date,
        priority=priority,
        category=category,
    )
    return f"Added task #{task.id}: {task.text}"


def cmd_done(state: AppState, args: argparse.Namespace) -> str:
    task = state.task_store.complete_task(args.position)
    return f"Completed task: {task.text}"


def cmd_list(state: AppState, args: argparse.Namespace) -> str:
    sort_order = args.sort_order or getattr(state.settings, "default_sort_order", "asc")
    tasks = state.task_store.list_tasks(category=args.category, sort_order=sort_order)
    if tasks:
        return render_task_table(tasks, numbered=True)

    if args.category is not None and state.task_store.count_tasks() > 0:
        return f"No tasks found in category '{args.category}'"
    return EMPTY_LIST_MESSAGE


def cmd_search(state: AppState, args: argparse.Namespace) -> str:
    matches = state.task_store.search_tasks(args.keyword)
    if not matches:
        return f"No tasks found with the keyword '{args.keyword}'"
    return render_task_table(matches, numbered=False)


registry.register("add", cmd_add, help_text="Write a task to the journal file.")
registry.register("done", cmd_done, help_text="Remove a task from the journal file by position.")
registry.register("list", cmd_list, help_text="List tasks, optionally by category.", aliases=["ls"])
registry.register("search", cmd_search, help_text="Search tasks by keyword.")
