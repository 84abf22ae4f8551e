# src/taskbox/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the CLI layer.

Commands depend on Protocols instead of the concrete JSON store, and the store
depends on a ConfirmPrompt instead of reading the terminal itself.
This keeps destructive flows testable without a real TTY.
"""

from typing import Protocol

from ..tasks.task_models import ResetOutcome, SwapOutcome, Task, TaskSummary


class ConfirmPrompt(Protocol):
    """Ask the operator a yes/no question. Returns True only on an explicit yes."""

    def __call__(self, prompt: str) -> bool: ...


class TaskRepo(Protocol):
    def add_task(self, description: str) -> Task: ...
    def list_tasks(self, include_done: bool = False) -> list[Task]: ...
    def update_task(self, task_id: int, description: str) -> bool: ...
    def mark_task(self, task_id: int, done: bool) -> bool: ...
    def delete_task(self, task_id: int) -> bool: ...
    def swap_tasks(self, id1: int, id2: int) -> SwapOutcome: ...
    def reset_tasks(self, force: bool = False) -> ResetOutcome: ...
    def infos(self) -> TaskSummary: ...
