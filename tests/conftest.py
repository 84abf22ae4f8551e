# tests/conftest.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from taskbox.config import Settings
from taskbox.tasks.task_store import TaskStore

from .fakes import ScriptedConfirm


@pytest.fixture()
def settings() -> Settings:
    """
    Settings built directly rather than from the environment,
    so a developer's TASKBOX_* variables or .env never leak into tests.
    """
    return Settings(
        data_dir=None,
        tasks_file_name="tasks.json",
        log_level="WARNING",
        log_file=None,
        color=False,
    )


@pytest.fixture()
def tasks_path(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def confirm() -> ScriptedConfirm:
    return ScriptedConfirm()


@pytest.fixture()
def store(tasks_path: Path, confirm: ScriptedConfirm) -> TaskStore:
    return TaskStore(tasks_path, confirm=confirm)


@pytest.fixture(autouse=True)
def _reset_logging():
    """
    main() installs root handlers bound to the captured stderr of one test.
    Drop them afterwards so later tests never log into a closed stream.
    pytest's own capture handlers are subclasses and are left alone.
    """
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    logging.captureWarnings(False)
