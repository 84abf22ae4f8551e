# src/taskbox/cli/commands.py

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass

from .. import __version__
from ..core.ports import TaskRepo
from ..tasks.task_models import SwapOutcome, render_table, render_task

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CommandContext:
    store: TaskRepo
    color: bool = False


CommandHandler = Callable[[CommandContext, argparse.Namespace], int]
ArgsConfigurator = Callable[[argparse.ArgumentParser], None]


class CommandRegistry:
    """Subcommand registry: each entry becomes one argparse subparser."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._configure: dict[str, ArgsConfigurator | None] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        configure: ArgsConfigurator | None = None,
    ) -> None:
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        self._configure[key] = configure

    def names(self) -> list[str]:
        return list(self._handlers)

    def build_parser(self, prog: str = "taskbox") -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog=prog, description="A simple command line to-do manager")
        parser.add_argument(
            "-d",
            "--dir",
            metavar="DIR",
            default=None,
            help="Directory holding the tasks file (default: home directory)",
        )
        parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logs on stderr")
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        sub = parser.add_subparsers(dest="command", metavar="COMMAND")
        for name, help_text in self._help.items():
            cmd_parser = sub.add_parser(name, help=help_text, description=help_text)
            configure = self._configure[name]
            if configure is not None:
                configure(cmd_parser)
        return parser

    def handle(self, ctx: CommandContext, args: argparse.Namespace) -> int:
        # argparse has already rejected unknown subcommands.
        handler = self._handlers[args.command]
        logger.debug("Running command %s", args.command)
        return handler(ctx, args)


registry = CommandRegistry()


def task_id(raw: str) -> int:
    """argparse type for task ids: positive integers only."""
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"task id must be positive: {value}")
    return value


def _not_found(message: str = "Task not found") -> int:
    print(message, file=sys.stderr)
    return 0


def cmd_add(ctx: CommandContext, args: argparse.Namespace) -> int:
    ctx.store.add_task(args.task)
    return 0


def cmd_list(ctx: CommandContext, args: argparse.Namespace) -> int:
    tasks = ctx.store.list_tasks(include_done=args.all)
    if args.table:
        if tasks:
            print(render_table(tasks, color=ctx.color))
        return 0

    for task in tasks:
        print(render_task(task, color=ctx.color))
    return 0


def cmd_update(ctx: CommandContext, args: argparse.Namespace) -> int:
    if not ctx.store.update_task(args.id, args.task):
        return _not_found()
    return 0


def cmd_done(ctx: CommandContext, args: argparse.Namespace) -> int:
    if not ctx.store.mark_task(args.id, True):
        return _not_found()
    return 0


def cmd_undone(ctx: CommandContext, args: argparse.Namespace) -> int:
    if not ctx.store.mark_task(args.id, False):
        return _not_found()
    return 0


def cmd_delete(ctx: CommandContext, args: argparse.Namespace) -> int:
    if not ctx.store.delete_task(args.id):
        return _not_found()
    return 0


def cmd_swap(ctx: CommandContext, args: argparse.Namespace) -> int:
    outcome = ctx.store.swap_tasks(args.id1, args.id2)
    if outcome is not SwapOutcome.SWAPPED:
        return _not_found(outcome.value)
    return 0


def cmd_reset(ctx: CommandContext, args: argparse.Namespace) -> int:
    outcome = ctx.store.reset_tasks(force=args.force)
    logger.debug("Reset outcome: %s", outcome.value)
    return 0


def cmd_infos(ctx: CommandContext, args: argparse.Namespace) -> int:
    summary = ctx.store.infos()
    print(f"File location: {summary.path}")
    print(f"Done tasks: {summary.done}")
    print(f"Remaining tasks: {summary.remaining}")
    print(f"Total tasks: {summary.total}")
    return 0


def _args_task(p: argparse.ArgumentParser) -> None:
    p.add_argument("task", help="Task description")


def _args_list(p: argparse.ArgumentParser) -> None:
    p.add_argument("-a", "--all", action="store_true", help="Include done tasks")
    p.add_argument("-t", "--table", action="store_true", help="Render as aligned columns")


def _args_id(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=task_id, help="Task id")


def _args_update(p: argparse.ArgumentParser) -> None:
    _args_id(p)
    _args_task(p)


def _args_swap(p: argparse.ArgumentParser) -> None:
    p.add_argument("id1", type=task_id, help="First task id")
    p.add_argument("id2", type=task_id, help="Second task id")


def _args_reset(p: argparse.ArgumentParser) -> None:
    p.add_argument("-f", "--force", action="store_true", help="Don't prompt for confirmation")


registry.register("add", cmd_add, help_text="Add a task", configure=_args_task)
registry.register("list", cmd_list, help_text="List tasks", configure=_args_list)
registry.register("update", cmd_update, help_text="Update a task", configure=_args_update)
registry.register("done", cmd_done, help_text="Mark a task as done", configure=_args_id)
registry.register("undone", cmd_undone, help_text="Mark a task as undone", configure=_args_id)
registry.register("delete", cmd_delete, help_text="Delete a task", configure=_args_id)
registry.register("swap", cmd_swap, help_text="Swap tasks", configure=_args_swap)
registry.register("reset", cmd_reset, help_text="Empty the task list", configure=_args_reset)
registry.register("infos", cmd_infos, help_text="Get information about your tasks")
