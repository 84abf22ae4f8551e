# src/taskbox/cli/main.py

"""
CLI entrypoint.

Parses arguments, initializes logging, builds the TaskStore for the
resolved tasks file, runs exactly one command and returns its exit status.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from colorama import just_fix_windows_console

from ..config import ConfigError, Settings, color_enabled, get_settings
from ..logging_setup import level_from_name, setup_logging
from ..tasks.task_store import StorageWriteError
from .bootstrap import create_store
from .commands import CommandContext, registry

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if settings is None:
        settings = get_settings()

    parser = registry.build_parser()
    args = parser.parse_args(argv)

    console_level = logging.DEBUG if args.verbose else level_from_name(settings.log_level)
    try:
        setup_logging(console_level=console_level, log_file=settings.log_file)
    except OSError as e:
        print(f"Could not open log file {settings.log_file}: {e}", file=sys.stderr)
        return 2

    if args.command is None:
        parser.print_help()
        return 0

    try:
        store = create_store(settings, directory=args.dir)
    except ConfigError as e:
        logger.debug("Startup failed.", exc_info=True)
        print(e, file=sys.stderr)
        return 2

    just_fix_windows_console()
    ctx = CommandContext(store=store, color=color_enabled(settings, sys.stdout))

    try:
        return registry.handle(ctx, args)
    except StorageWriteError as e:
        logger.debug("Write failed for %s", e.path, exc_info=True)
        print(e, file=sys.stderr)
        return 1


def run() -> None:
    try:
        code = main()
    except KeyboardInterrupt:
        print(file=sys.stderr)
        code = 130
    sys.exit(code)


if __name__ == "__main__":
    run()
