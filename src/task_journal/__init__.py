# src/task_journal/__init__.py

"""Personal task journal: a JSON-file backed to-do list for the command line."""

__version__ = "0.3.0"
