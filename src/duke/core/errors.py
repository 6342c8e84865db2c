# src/duke/core/errors.py

"""
Exception hierarchy.

- DukeCommandError subclasses are user-facing: the session loop prints their
  message and keeps running.
- ValidationError / OutOfRangeError / CorruptRecordError guard the model, the
  task list and the record codec; the interpreter normally pre-empts them.
- StorageError subclasses describe persistence faults.
"""

from __future__ import annotations

from pathlib import Path


class DukeError(Exception):
    """Base exception for all Duke errors."""

    default_message = "Something went wrong."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# ---- command errors (shown to the user as-is) ----


class DukeCommandError(DukeError):
    pass


class UnknownCommandError(DukeCommandError):
    default_message = "I'm sorry, but I don't know what that means :-("


class TooManyArgumentsError(DukeCommandError):
    default_message = "There are too many arguments for this command."


class MissingTaskIdError(DukeCommandError):
    default_message = "The id of the task must be provided."


class InvalidTaskIdError(DukeCommandError):
    # Non-numeric and out-of-range ids share this message.
    default_message = "The id of the task must be a number. e.g. done 1"


class MissingDescriptionError(DukeCommandError):
    default_message = "The description cannot be empty."


class MultiLineDescriptionError(DukeCommandError):
    default_message = "The description must be a single line."


class MissingDescriptionAndTimeError(DukeCommandError):
    default_message = "The description and time cannot be empty."


class MissingDeadlineError(DukeCommandError):
    default_message = "The deadline must be present. e.g. report /by 3/12/2018 18:00"


class MissingEventTimeError(DukeCommandError):
    default_message = "The event time must be present. e.g. meeting /at 3/12/2018 18:00"


class WrongDateFormatError(DukeCommandError):
    default_message = "The date time provided is in the wrong format. Expected d/m/yyyy hh:mm."


# ---- model / list / codec ----


class ValidationError(DukeError):
    default_message = "Invalid task."


class OutOfRangeError(DukeError):
    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Task index {index} is out of range (list has {size}).")


class CorruptRecordError(DukeError):
    def __init__(self, line: str, reason: str) -> None:
        self.line = line
        self.reason = reason
        super().__init__(f"Corrupt task record ({reason}): {line!r}")


# ---- storage ----


class StorageError(DukeError):
    def __init__(self, message: str, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(message)


class StorageCorruptError(StorageError):
    def __init__(self, path: str | Path, line_no: int | None = None, reason: str = "") -> None:
        self.line_no = line_no
        where = f" (line {line_no})" if line_no is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(
            f"Could not load tasks from {path}{where}{detail}. Starting with an empty list.",
            path,
        )


class StorageWriteError(StorageError):
    def __init__(self, path: str | Path, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Could not save tasks to {path}{detail}.", path)
