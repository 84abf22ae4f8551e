# src/taskbox/tasks/task_models.py

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Any

from colorama import Style

CHECKED = "🗹"
UNCHECKED = "☐"


class SwapOutcome(StrEnum):
    """Result of swapping two task ids. Values double as operator messages."""

    SWAPPED = "swapped"
    FIRST_MISSING = "Task 1 not found"
    SECOND_MISSING = "Task 2 not found"


class ResetOutcome(StrEnum):
    EMPTY = "empty"
    CLEARED = "cleared"
    DECLINED = "declined"


@dataclass(slots=True)
class Task:
    id: int
    description: str
    done: bool = False

    @property
    def checkbox(self) -> str:
        return CHECKED if self.done else UNCHECKED

    def __str__(self) -> str:
        return f"{self.id} {self.checkbox} {self.description}"

    def as_row(self) -> tuple[str, str, str]:
        return str(self.id), self.checkbox, self.description

    def to_dict(self) -> dict[str, Any]:
        # "task" is the key used by files written by earlier versions.
        return {"id": self.id, "task": self.description, "done": self.done}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Task:
        """
        Build a Task from one on-disk record.

        Raises ValueError when the record is not a well-formed task:
        - id must be a positive int (bool is rejected)
        - task must be a string
        - done must be a bool
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"task record must be an object, got {type(raw).__name__}")

        tid = raw.get("id")
        if isinstance(tid, bool) or not isinstance(tid, int) or tid < 1:
            raise ValueError(f"invalid task id: {tid!r}")

        description = raw.get("task")
        if not isinstance(description, str):
            raise ValueError(f"invalid description for task {tid}")

        done = raw.get("done")
        if not isinstance(done, bool):
            raise ValueError(f"invalid done flag for task {tid}")

        return cls(id=tid, description=description, done=done)


@dataclass(frozen=True, slots=True)
class TaskSummary:
    path: Path
    done: int
    remaining: int
    total: int


def render_task(task: Task, *, color: bool = False) -> str:
    """Plain-text line; done tasks are dimmed when color is on."""
    line = str(task)
    if color and task.done:
        return f"{Style.DIM}{line}{Style.RESET_ALL}"
    return line


def render_table(tasks: Iterable[Task], *, color: bool = False) -> str:
    """Unlabeled columns: id (right-aligned), checkbox, description. Done rows dim with color."""
    tasks = list(tasks)
    if not tasks:
        return ""

    rows = [t.as_row() for t in tasks]
    id_width = max(len(r[0]) for r in rows)
    box_width = max(len(r[1]) for r in rows)

    lines: list[str] = []
    for task, (tid, box, desc) in zip(tasks, rows):
        line = f"{tid:>{id_width}}  {box:<{box_width}}  {desc}"
        if color and task.done:
            line = f"{Style.DIM}{line}{Style.RESET_ALL}"
        lines.append(line)
    return "\n".join(lines)


def pluralize(count: int, singular: str, plural: str) -> str:
    word = singular if count in (0, 1) else plural
    return f"{count} {word}"
