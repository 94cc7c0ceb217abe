# src/task_journal/cli/main.py

"""
CLI entrypoint.

Parses arguments, initializes logging, builds AppState, then runs exactly one
subcommand against the journal file and exits.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import get_settings
from ..logging_setup import setup_logging
from ..tasks.task_errors import TaskStoreError

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def build_parser(app_name: str = "task-journal") -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=app_name,
        description="A command line to-do app backed by a JSON journal file.",
    )
    parser.add_argument(
        "-j",
        "--journal-file",
        metavar="FILE",
        help="Use a different journal file.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Console log level (overrides TASK_JOURNAL_LOG_LEVEL).",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    add_p = sub.add_parser("add", help=registry.help_text("add"))
    add_p.add_argument("text", help="The task description text.")
    add_p.add_argument("-d", "--due-date", metavar="YYYY-MM-DD", help="Due date (optional).")
    add_p.add_argument("-p", "--priority", help="low, medium or high (prompted if omitted).")
    add_p.add_argument("-c", "--category", help="Category (prompted if omitted).")

    done_p = sub.add_parser("done", help=registry.help_text("done"))
    done_p.add_argument(
        "position",
        type=int,
        help="1-based position in stored (high -> low) order, as numbered by a plain `list`.",
    )

    list_p = sub.add_parser("list", aliases=["ls"], help=registry.help_text("list"))
    list_p.add_argument("-c", "--category", help="Only show tasks in this category.")
    list_p.add_argument(
        "-s",
        "--sort-order",
        type=str.lower,
        choices=("asc", "desc"),
        help="Priority order (default: asc, or TASK_JOURNAL_SORT_ORDER).",
    )

    search_p = sub.add_parser("search", help=registry.help_text("search"))
    search_p.add_argument("keyword", help="The keyword to search for (case-sensitive).")

    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    settings=None,
    read: Callable[[str], str] = input,
    emit: Callable[[str], None] = print,
) -> int:
    if settings is None:
        settings = get_settings()

    parser = build_parser(str(getattr(settings, "app_name", "task-journal")))
    args = parser.parse_args(argv)

    level_name = (args.log_level or str(getattr(settings, "log_level", "WARNING"))).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    try:
        setup_logging(console_level=console_level, log_file=getattr(settings, "log_file", None))
    except OSError as e:
        print(f"Error: cannot set up logging: {e}", file=sys.stderr)
        return 1

    state = create_initial_state(
        settings=settings,
        journal_file=args.journal_file,
        read=read,
        emit=emit,
    )

    try:
        output = registry.handle(state, args.command, args)
    except TaskStoreError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (EOFError, KeyboardInterrupt):
        print("\nAborted: no input received.", file=sys.stderr)
        return 1

    emit(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
