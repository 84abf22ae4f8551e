# tests/test_config.py

from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from taskbox.config import ConfigError, Settings, color_enabled, resolve_tasks_path
from taskbox.logging_setup import _ConsoleNoiseFilter, level_from_name, setup_logging


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in (
        "TASKBOX_DATA_DIR",
        "TASKBOX_TASKS_FILE",
        "TASKBOX_LOG_LEVEL",
        "TASKBOX_LOG_FILE",
        "TASKBOX_COLOR",
        "NO_COLOR",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    s = Settings.from_env()
    assert s.data_dir is None
    assert s.tasks_file_name == "tasks.json"
    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.color is None


def test_settings_from_env(clean_env, tmp_path: Path) -> None:
    clean_env.setenv("TASKBOX_DATA_DIR", str(tmp_path))
    clean_env.setenv("TASKBOX_TASKS_FILE", "todo.json")
    clean_env.setenv("TASKBOX_LOG_LEVEL", "debug")
    clean_env.setenv("TASKBOX_LOG_FILE", str(tmp_path / "taskbox.log"))
    clean_env.setenv("TASKBOX_COLOR", "off")

    s = Settings.from_env()
    assert s.data_dir == tmp_path
    assert s.tasks_file_name == "todo.json"
    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "taskbox.log"
    assert s.color is False


def test_unrecognized_color_value_means_auto(clean_env) -> None:
    clean_env.setenv("TASKBOX_COLOR", "sometimes")
    assert Settings.from_env().color is None


def test_resolve_path_priority(settings: Settings, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    home = tmp_path / "home"
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))

    assert resolve_tasks_path(settings) == home / "tasks.json"

    configured = Settings(
        data_dir=tmp_path / "configured",
        tasks_file_name="todo.json",
        log_level="WARNING",
        log_file=None,
        color=None,
    )
    assert resolve_tasks_path(configured) == tmp_path / "configured" / "todo.json"
    assert resolve_tasks_path(configured, tmp_path / "cli") == tmp_path / "cli" / "todo.json"


def test_resolve_path_without_home_is_config_error(settings: Settings, monkeypatch: pytest.MonkeyPatch) -> None:
    def no_home(cls):
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(Path, "home", classmethod(no_home))

    with pytest.raises(ConfigError):
        resolve_tasks_path(settings)


def test_color_enabled(settings: Settings, clean_env) -> None:
    class Tty(io.StringIO):
        def isatty(self) -> bool:
            return True

    auto = Settings(data_dir=None, tasks_file_name="tasks.json", log_level="WARNING", log_file=None, color=None)

    assert color_enabled(settings, Tty()) is False  # explicit off
    assert color_enabled(auto, io.StringIO()) is False
    assert color_enabled(auto, Tty()) is True

    clean_env.setenv("NO_COLOR", "1")
    assert color_enabled(auto, Tty()) is False


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name("ERROR") == logging.ERROR
    assert level_from_name("bogus") == logging.WARNING


def test_console_filter_keeps_app_logs_and_quiets_others() -> None:
    f = _ConsoleNoiseFilter()

    def rec(name: str, level: int) -> logging.LogRecord:
        return logging.LogRecord(name, level, __file__, 1, "msg", None, None)

    assert f.filter(rec("taskbox.tasks.task_store", logging.DEBUG))
    assert not f.filter(rec("urllib3", logging.WARNING))
    assert f.filter(rec("urllib3", logging.ERROR))
    assert not f.filter(rec("py.warnings", logging.WARNING))


def test_setup_logging_writes_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "taskbox.log"

    setup_logging(console_level=logging.ERROR, log_file=log_file)
    logging.getLogger("taskbox.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in log_file.read_text("utf-8")
