# src/taskpal/cli/commands.py

"""
Command handlers and their registry.

Each handler takes the session state and parsed arguments, mutates the task
list, syncs storage, and returns the reply text. Additions append one line to
the data file; every other change rewrites it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core.errors import UnrecognizedCommandError, WrongTaskKindError
from ..core.state import SessionState
from ..tasks.task_models import Deadline, Event, Task, TaskKind, Todo
from .parser import Command, ParsedArgs

CommandHandler = Callable[[SessionState, ParsedArgs], str]

logger = logging.getLogger(__name__)

FAREWELL = "Bye. Hope to see you again soon!"
EMPTY_LIST = "Your task list is empty."
NO_MATCHES = "I couldn't find any matching tasks."


class CommandRegistry:
    """Maps each Command to its handler and a one-line usage string."""

    def __init__(self) -> None:
        self._handlers: dict[Command, CommandHandler] = {}
        self._help: dict[Command, str] = {}

    def register(self, command: Command, handler: CommandHandler, help_text: str) -> None:
        self._handlers[command] = handler
        self._help[command] = help_text

    def dispatch(self, state: SessionState, command: Command, args: ParsedArgs, line: str = "") -> str:
        handler = self._handlers.get(command)
        if handler is None:
            raise UnrecognizedCommandError(line)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for help_text in self._help.values():
            lines.append(f"  {help_text}")
        return "\n".join(lines)


def format_tasks(entries: list[tuple[int, Task]]) -> str:
    return "\n".join(f"{i}. {t}" for i, t in entries)


def _task_count(n: int) -> str:
    return f"Now you have {n} {'task' if n == 1 else 'tasks'} in the list."


def _added(state: SessionState, task: Task) -> str:
    size = state.tasks.add(task)
    state.store.append_task(task)
    logger.debug("Added %s task, size=%d", task.kind.value, size)
    return f"Got it. I've added this task:\n  {task}\n{_task_count(size)}"


def cmd_bye(state: SessionState, args: ParsedArgs) -> str:
    state.running = False
    return FAREWELL


def cmd_list(state: SessionState, args: ParsedArgs) -> str:
    if state.tasks.size() == 0:
        return EMPTY_LIST
    return "Here are the tasks in your list:\n" + format_tasks(list(enumerate(state.tasks)))


def cmd_mark(state: SessionState, args: ParsedArgs) -> str:
    task = state.tasks.get(args.index)
    task.mark_done()
    state.store.rewrite(state.tasks)
    return f"Nice! I've marked this task as done:\n  {task}"


def cmd_unmark(state: SessionState, args: ParsedArgs) -> str:
    task = state.tasks.get(args.index)
    task.mark_not_done()
    state.store.rewrite(state.tasks)
    return f"OK, I've marked this task as not done yet:\n  {task}"


def cmd_delete(state: SessionState, args: ParsedArgs) -> str:
    removed, size = state.tasks.remove(args.index)
    state.store.rewrite(state.tasks)
    return f"Noted. I've removed this task:\n  {removed}\n{_task_count(size)}"


def cmd_todo(state: SessionState, args: ParsedArgs) -> str:
    return _added(state, Todo(args.description))


def cmd_deadline(state: SessionState, args: ParsedArgs) -> str:
    return _added(state, Deadline(args.description, args.by))


def cmd_event(state: SessionState, args: ParsedArgs) -> str:
    return _added(state, Event(args.description, args.start, args.end))


def cmd_find(state: SessionState, args: ParsedArgs) -> str:
    found = state.tasks.find(args.keyword)
    if not found:
        return NO_MATCHES
    return "Here are the matching tasks in your list:\n" + format_tasks(found)


def cmd_update(state: SessionState, args: ParsedArgs) -> str:
    task = state.tasks.get(args.index)
    match task:
        case Event():
            task.update_range(args.start, args.end)
        case _:
            raise WrongTaskKindError(args.index, TaskKind.EVENT.value, task.kind.value)
    state.store.rewrite(state.tasks)
    return f"Got it. I've updated this event:\n  {task}"


registry = CommandRegistry()

registry.register(Command.TODO, cmd_todo, "todo <description>")
registry.register(Command.DEADLINE, cmd_deadline, "deadline <description> /by <yyyy-mm-dd>")
registry.register(Command.EVENT, cmd_event, "event <description> /from <from> /to <to>")
registry.register(Command.LIST, cmd_list, "list")
registry.register(Command.MARK, cmd_mark, "mark <index>")
registry.register(Command.UNMARK, cmd_unmark, "unmark <index>")
registry.register(Command.DELETE, cmd_delete, "delete <index>")
registry.register(Command.FIND, cmd_find, "find <keyword>")
registry.register(Command.UPDATE, cmd_update, "update <index> <from> <to>   (events only)")
registry.register(Command.BYE, cmd_bye, "bye")
