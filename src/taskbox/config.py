# src/taskbox/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Reading settings never touches the filesystem beyond .env and never fails;
  bad values fall back to defaults.
- The tasks file location is resolved separately, once the CLI knows
  whether a directory override was given.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from dotenv import load_dotenv

ENV_PREFIX = "TASKBOX"
DEFAULT_TASKS_FILE = "tasks.json"


class ConfigError(RuntimeError):
    """Startup configuration cannot be resolved (e.g. no home directory)."""


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_opt_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "y", "on", "always"}:
        return True
    if value in {"0", "false", "no", "n", "off", "never"}:
        return False
    return None


def _env_opt_path(name: str) -> Path | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- Storage ----
    data_dir: Path | None
    tasks_file_name: str

    # ---- Logging ----
    log_level: str
    log_file: Path | None

    # ---- Output ----
    color: bool | None

    @staticmethod
    def from_env() -> "Settings":
        tasks_file_name = _env(_k("TASKS_FILE"), DEFAULT_TASKS_FILE).strip() or DEFAULT_TASKS_FILE

        return Settings(
            data_dir=_env_opt_path(_k("DATA_DIR")),
            tasks_file_name=tasks_file_name,
            log_level=_env(_k("LOG_LEVEL"), "WARNING").strip().upper() or "WARNING",
            log_file=_env_opt_path(_k("LOG_FILE")),
            color=_env_opt_bool(_k("COLOR")),
        )


SETTINGS = Settings.from_env()


def get_settings() -> Settings:
    return SETTINGS


def resolve_tasks_path(settings: Settings, directory: str | Path | None = None) -> Path:
    """
    Pick the tasks file location.

    Priority: explicit directory (CLI) > settings.data_dir > home directory.
    """
    if directory is not None:
        base = Path(directory).expanduser()
    elif settings.data_dir is not None:
        base = settings.data_dir
    else:
        try:
            base = Path.home()
        except (RuntimeError, KeyError) as e:
            raise ConfigError("Could not determine the home directory") from e
    return base / settings.tasks_file_name


def color_enabled(settings: Settings, stream: TextIO) -> bool:
    """Explicit TASKBOX_COLOR wins; otherwise color only on a TTY without NO_COLOR."""
    if settings.color is not None:
        return settings.color
    if os.getenv("NO_COLOR") is not None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError):
        return False
