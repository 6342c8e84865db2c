# src/duke/cli/commands.py

"""
Command parser & interpreter.

One input line -> Command (or a DukeCommandError) -> CommandResult.
The keyword is the text before the first space; the argument is everything
after that space, or None when the line has no space at all.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..core.errors import (
    DukeCommandError,
    InvalidTaskIdError,
    MissingDeadlineError,
    MissingDescriptionAndTimeError,
    MissingDescriptionError,
    MissingEventTimeError,
    MissingTaskIdError,
    MultiLineDescriptionError,
    TooManyArgumentsError,
    UnknownCommandError,
    ValidationError,
    WrongDateFormatError,
)
from ..core.state import AppState
from ..tasks.task_list import TaskList
from ..tasks.task_models import Task, parse_when

logger = logging.getLogger(__name__)

MESSAGE_ADD = "Got it. I've added this task:\n  {task}\nNow you have {count} in the list."
MESSAGE_LIST = "Here are the tasks in your list:"
MESSAGE_NO_TASKS = "You have no tasks in your list yet!"
MESSAGE_DONE = "Nice! I've marked this task as done:\n  {task}"
MESSAGE_DELETE = "Noted. I've removed this task:\n  {task}\nNow you have {count} in the list."

_TASK_ID_RE = re.compile(r"[+-]?\d+", re.ASCII)


class CommandKind(StrEnum):
    TODO = "todo"
    DEADLINE = "deadline"
    EVENT = "event"
    LIST = "list"
    DONE = "done"
    DELETE = "delete"
    BYE = "bye"


@dataclass(frozen=True, slots=True)
class Command:
    """
    A validated request.

    - add commands carry the new `task`
    - done/delete carry a 1-based `index` already checked against the list
    """

    kind: CommandKind
    task: Task | None = None
    index: int | None = None


@dataclass(frozen=True, slots=True)
class CommandResult:
    text: str | None = None
    mutated: bool = False
    exit: bool = False


CommandParser = Callable[[str | None, TaskList], Command]


class CommandRegistry:
    """Keyword -> parser registry used by the console loop."""

    def __init__(self) -> None:
        self._parsers: dict[str, CommandParser] = {}

    def register(self, name: str, parser: CommandParser) -> None:
        self._parsers[name] = parser

    def parse(self, line: str, tasks: TaskList) -> Command:
        keyword, space, rest = line.partition(" ")
        arg = rest if space else None

        parser = self._parsers.get(keyword)
        if parser is None:
            raise UnknownCommandError()
        return parser(arg, tasks)

    def handle(self, state: AppState, line: str) -> CommandResult:
        """
        Parse and execute one line against state.tasks.
        Raises DukeCommandError on invalid input; the list is untouched then.
        """
        command = self.parse(line, state.tasks)
        result = execute_command(command, state.tasks)
        logger.debug("Executed %s (size=%d)", command.kind, state.tasks.size())
        return result


# ---- parsers ----


def _no_arguments(kind: CommandKind) -> CommandParser:
    def parse(arg: str | None, tasks: TaskList) -> Command:
        if arg is not None:
            raise TooManyArgumentsError()
        return Command(kind)

    return parse


def _task_id(kind: CommandKind) -> CommandParser:
    def parse(arg: str | None, tasks: TaskList) -> Command:
        if arg is None:
            raise MissingTaskIdError()
        if not _TASK_ID_RE.fullmatch(arg):
            raise InvalidTaskIdError()
        index = int(arg)
        if index < 1 or index > tasks.size():
            raise InvalidTaskIdError()
        return Command(kind, index=index)

    return parse


def _new_task(build: Callable[..., Task], description: str, *args: object) -> Task:
    try:
        return build(description, *args)
    except ValidationError:
        if not description.strip():
            raise MissingDescriptionError() from None
        raise MultiLineDescriptionError() from None


def parse_todo(arg: str | None, tasks: TaskList) -> Command:
    if arg is None or not arg.strip():
        raise MissingDescriptionError()
    return Command(CommandKind.TODO, task=_new_task(Task.todo, arg))


@dataclass(frozen=True, slots=True)
class _TimedGrammar:
    separator: str
    missing_time: type[DukeCommandError]
    build: Callable[[str, datetime], Task]
    complete: re.Pattern[str]
    bare: re.Pattern[str]
    leading: re.Pattern[str]
    trailing: re.Pattern[str]


def _timed_grammar(
    separator: str,
    missing_time: type[DukeCommandError],
    build: Callable[[str, datetime], Task],
) -> _TimedGrammar:
    sep = re.escape(separator)
    return _TimedGrammar(
        separator=separator,
        missing_time=missing_time,
        build=build,
        complete=re.compile(rf".*\S.*\s{sep}\s.*\S.*"),
        bare=re.compile(rf"\s*{sep}\s*"),
        leading=re.compile(rf"\s*{sep}"),
        trailing=re.compile(rf".*{sep}\s*"),
    )


def _timed(kind: CommandKind, grammar: _TimedGrammar) -> CommandParser:
    def parse(arg: str | None, tasks: TaskList) -> Command:
        # Sub-conditions are checked in order; each maps to its own message.
        if arg is None or not grammar.complete.fullmatch(arg):
            if not arg or grammar.bare.fullmatch(arg):
                raise MissingDescriptionAndTimeError()
            if grammar.leading.match(arg):
                raise MissingDescriptionError()
            if grammar.separator not in arg or grammar.trailing.fullmatch(arg):
                raise grammar.missing_time()

        description, found, raw_time = arg.partition(f" {grammar.separator} ")
        if not found:
            # e.g. "report/by 3/12/2018 18:00": the separator is not a standalone token
            raise grammar.missing_time()

        try:
            when = parse_when(raw_time)
        except ValueError:
            raise WrongDateFormatError() from None

        return Command(kind, task=_new_task(grammar.build, description, when))

    return parse


DEADLINE_GRAMMAR = _timed_grammar("/by", MissingDeadlineError, Task.deadline)
EVENT_GRAMMAR = _timed_grammar("/at", MissingEventTimeError, Task.event)


# ---- execution ----


def _count_phrase(n: int) -> str:
    return f"{n} {'task' if n == 1 else 'tasks'}"


def _exec_add(command: Command, tasks: TaskList) -> CommandResult:
    assert command.task is not None
    size = tasks.add(command.task)
    text = MESSAGE_ADD.format(task=command.task.render(), count=_count_phrase(size))
    return CommandResult(text, mutated=True)


def _exec_list(command: Command, tasks: TaskList) -> CommandResult:
    if tasks.is_empty():
        return CommandResult(MESSAGE_NO_TASKS)
    lines = [MESSAGE_LIST]
    for i, task in enumerate(tasks, start=1):
        lines.append(f"{i}. {task.render()}")
    return CommandResult("\n".join(lines))


def _exec_done(command: Command, tasks: TaskList) -> CommandResult:
    assert command.index is not None
    task = tasks.get(command.index)
    task.mark_done()
    return CommandResult(MESSAGE_DONE.format(task=task.render()), mutated=True)


def _exec_delete(command: Command, tasks: TaskList) -> CommandResult:
    assert command.index is not None
    task = tasks.remove(command.index)
    text = MESSAGE_DELETE.format(task=task.render(), count=_count_phrase(tasks.size()))
    return CommandResult(text, mutated=True)


def _exec_bye(command: Command, tasks: TaskList) -> CommandResult:
    return CommandResult(exit=True)


_EXECUTORS: dict[CommandKind, Callable[[Command, TaskList], CommandResult]] = {
    CommandKind.TODO: _exec_add,
    CommandKind.DEADLINE: _exec_add,
    CommandKind.EVENT: _exec_add,
    CommandKind.LIST: _exec_list,
    CommandKind.DONE: _exec_done,
    CommandKind.DELETE: _exec_delete,
    CommandKind.BYE: _exec_bye,
}


def execute_command(command: Command, tasks: TaskList) -> CommandResult:
    return _EXECUTORS[command.kind](command, tasks)


registry = CommandRegistry()

registry.register(CommandKind.TODO, parse_todo)
registry.register(CommandKind.DEADLINE, _timed(CommandKind.DEADLINE, DEADLINE_GRAMMAR))
registry.register(CommandKind.EVENT, _timed(CommandKind.EVENT, EVENT_GRAMMAR))
registry.register(CommandKind.LIST, _no_arguments(CommandKind.LIST))
registry.register(CommandKind.DONE, _task_id(CommandKind.DONE))
registry.register(CommandKind.DELETE, _task_id(CommandKind.DELETE))
registry.register(CommandKind.BYE, _no_arguments(CommandKind.BYE))
