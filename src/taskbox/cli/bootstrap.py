# src/taskbox/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves the tasks file location from settings + CLI override,
- wires the terminal confirmation prompt into the TaskStore.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..config import Settings, get_settings, resolve_tasks_path
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def prompt_confirm(prompt: str) -> bool:
    """Print the question on stdout and read one line; only "y"/"Y" confirms."""
    print(prompt, flush=True)
    try:
        if sys.stdin is None:
            raise OSError("stdin is not available")
        answer = sys.stdin.readline()
    except (OSError, ValueError):
        # ValueError: stdin already closed.
        logger.debug("Confirmation input unavailable.", exc_info=True)
        print("Could not read user input", file=sys.stderr)
        return False
    return answer.strip().lower() == "y"


def create_store(settings: Settings | None = None, *, directory: str | Path | None = None) -> TaskStore:
    """
    Build the TaskStore for one invocation.

    Keeping settings injectable makes the CLI easy to test without touching
    the real home directory. Raises ConfigError when no location can be resolved.
    """
    if settings is None:
        settings = get_settings()

    path = resolve_tasks_path(settings, directory)
    logger.debug("Using tasks file %s", path)
    return TaskStore(path, confirm=prompt_confirm)
