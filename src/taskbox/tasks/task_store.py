# src/taskbox/tasks/task_store.py

from __future__ import annotations

import json
import logging
from pathlib import Path

from ..core.ports import ConfirmPrompt
from .task_models import ResetOutcome, SwapOutcome, Task, TaskSummary, pluralize

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Base error for the backing tasks file."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class StorageReadError(StorageError):
    def __init__(self, path: Path, reason: str = "") -> None:
        msg = f"Could not read {path}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(path, msg)


class StorageWriteError(StorageError):
    def __init__(self, path: Path) -> None:
        super().__init__(path, f"Could not write to {path}")


class TaskStore:
    """
    JSON-file task store.

    Every operation is a full read-modify-write of one file:
    - load the whole collection (missing/corrupt file -> empty collection)
    - apply one mutation in memory
    - rewrite the whole file (mutating operations only)

    Ids are unique at rest and assigned monotonically (max id + 1).
    Storage order is insertion order; list_tasks() sorts by id for display.

    Not-found is a normal outcome (False / SwapOutcome), never an exception,
    and never causes a write.
    """

    def __init__(self, path: str | Path, *, confirm: ConfirmPrompt | None = None) -> None:
        self._path = Path(path)
        self._confirm = confirm

    @property
    def path(self) -> Path:
        return self._path

    # ---- low-level helpers ----

    def read_tasks(self) -> list[Task]:
        try:
            raw = json.loads(self._path.read_text("utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise StorageReadError(self._path, str(e)) from e

        if not isinstance(raw, list):
            raise StorageReadError(self._path, "expected a JSON array of tasks")

        tasks: list[Task] = []
        seen: set[int] = set()
        for item in raw:
            try:
                task = Task.from_dict(item)
            except ValueError as e:
                raise StorageReadError(self._path, str(e)) from e
            if task.id in seen:
                raise StorageReadError(self._path, f"duplicate task id {task.id}")
            seen.add(task.id)
            tasks.append(task)
        return tasks

    def load_tasks(self) -> list[Task]:
        """Return the stored collection, or [] when the file is missing or unreadable."""
        try:
            tasks = self.read_tasks()
        except StorageReadError as e:
            logger.debug("Treating tasks file as empty: %s", e)
            return []
        logger.debug("Loaded %d tasks from %s", len(tasks), self._path)
        return tasks

    def save_tasks(self, tasks: list[Task]) -> None:
        """
        Truncate and rewrite the whole file. Raises StorageWriteError.

        The payload is fully encoded before the file is opened, so a
        serialization failure leaves the previous content intact.
        Non-ASCII text is stored as JSON escapes; any str round-trips,
        including undecodable command-line bytes (lone surrogates).
        """
        try:
            data = (json.dumps([t.to_dict() for t in tasks], indent=2) + "\n").encode("utf-8")
        except (TypeError, ValueError) as e:
            # ValueError covers UnicodeEncodeError.
            raise StorageWriteError(self._path) from e
        try:
            with open(self._path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise StorageWriteError(self._path) from e
        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    @staticmethod
    def _find(tasks: list[Task], task_id: int) -> int | None:
        for index, task in enumerate(tasks):
            if task.id == task_id:
                return index
        return None

    # ---- public API ----

    def add_task(self, description: str) -> Task:
        tasks = self.load_tasks()
        max_id = max((t.id for t in tasks), default=0)
        task = Task(id=max_id + 1, description=description)

        tasks.append(task)
        self.save_tasks(tasks)
        logger.info("Task added id=%s", task.id)
        return task

    def list_tasks(self, include_done: bool = False) -> list[Task]:
        tasks = sorted(self.load_tasks(), key=lambda t: t.id)
        return [t for t in tasks if include_done or not t.done]

    def update_task(self, task_id: int, description: str) -> bool:
        tasks = self.load_tasks()
        index = self._find(tasks, task_id)
        if index is None:
            return False

        tasks[index].description = description
        self.save_tasks(tasks)
        logger.info("Task updated id=%s", task_id)
        return True

    def mark_task(self, task_id: int, done: bool) -> bool:
        tasks = self.load_tasks()
        index = self._find(tasks, task_id)
        if index is None:
            return False

        tasks[index].done = done
        self.save_tasks(tasks)
        logger.info("Task marked id=%s done=%s", task_id, done)
        return True

    def delete_task(self, task_id: int) -> bool:
        tasks = self.load_tasks()
        index = self._find(tasks, task_id)
        if index is None:
            return False

        del tasks[index]
        self.save_tasks(tasks)
        logger.info("Task deleted id=%s", task_id)
        return True

    def swap_tasks(self, id1: int, id2: int) -> SwapOutcome:
        """
        Exchange the ids of two tasks.

        Positions in the file stay the same; only the id labels move, so the
        description/done of the task formerly known as id1 is now shown as id2.
        """
        tasks = self.load_tasks()
        index1 = self._find(tasks, id1)
        if index1 is None:
            return SwapOutcome.FIRST_MISSING
        index2 = self._find(tasks, id2)
        if index2 is None:
            return SwapOutcome.SECOND_MISSING

        tasks[index1].id = id2
        tasks[index2].id = id1
        self.save_tasks(tasks)
        logger.info("Tasks swapped id1=%s id2=%s", id1, id2)
        return SwapOutcome.SWAPPED

    def reset_tasks(self, force: bool = False) -> ResetOutcome:
        """
        Remove every task.

        Without force, the operator must answer "y" to the confirmation prompt.
        A declined prompt writes nothing.
        """
        tasks = self.load_tasks()
        if not tasks:
            return ResetOutcome.EMPTY

        if not force:
            prompt = (
                "Are you sure you want to permanently delete "
                f"{pluralize(len(tasks), 'task', 'tasks')} (y/N)?"
            )
            if self._confirm is None or not self._confirm(prompt):
                logger.debug("Reset declined, %d tasks kept", len(tasks))
                return ResetOutcome.DECLINED

        self.save_tasks([])
        logger.info("Tasks reset count=%d", len(tasks))
        return ResetOutcome.CLEARED

    def infos(self) -> TaskSummary:
        tasks = self.load_tasks()
        done = sum(1 for t in tasks if t.done)
        return TaskSummary(path=self._path, done=done, remaining=len(tasks) - done, total=len(tasks))
