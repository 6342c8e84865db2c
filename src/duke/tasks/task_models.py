# src/duke/tasks/task_models.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from ..core.errors import CorruptRecordError, ValidationError

FIELD_SEP = " | "

ICON_DONE = "✓"
ICON_NOT_DONE = "✘"

# d/M/uuuu HH:mm (day and month may be unpadded, hour and minute may not)
_WHEN_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4}) (\d{2}):(\d{2})", re.ASCII)

# English names regardless of the process locale.
_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

_DONE_FLAGS = {"1": True, "0": False}


class TaskKind(StrEnum):
    """
    Closed set of task variants. The value is the storage type tag.
    """

    TODO = "T"
    DEADLINE = "D"
    EVENT = "E"

    @property
    def has_time(self) -> bool:
        return self is not TaskKind.TODO


# Render label for the time-bound variants: "(by: ...)" / "(at: ...)".
_TIME_LABELS: dict[TaskKind, str] = {
    TaskKind.DEADLINE: "by",
    TaskKind.EVENT: "at",
}


def parse_when(text: str) -> datetime:
    """Parse a user/storage time in d/M/uuuu HH:mm. Raises ValueError."""
    m = _WHEN_RE.fullmatch(text)
    if not m:
        raise ValueError(f"not a d/M/uuuu HH:mm time: {text!r}")
    day, month, year, hour, minute = (int(g) for g in m.groups())
    return datetime(year, month, day, hour, minute)


def serialize_when(when: datetime) -> str:
    """Inverse of parse_when (minute precision)."""
    return f"{when.day}/{when.month}/{when.year:04d} {when.hour:02d}:{when.minute:02d}"


def format_when(when: datetime) -> str:
    """Display form, e.g. 'Mon, 3 Dec 2018, 06.00PM'."""
    hour12 = when.hour % 12 or 12
    meridiem = "AM" if when.hour < 12 else "PM"
    return (
        f"{_WEEKDAYS[when.weekday()]}, {when.day} {_MONTHS[when.month - 1]} {when.year:04d}, "
        f"{hour12:02d}.{when.minute:02d}{meridiem}"
    )


@dataclass(slots=True)
class Task:
    """
    A single tracked item.

    `when` is required for DEADLINE/EVENT and must be None for TODO.
    `done` is the only field that can change after construction; assigning
    any other field on a built task raises AttributeError.
    """

    kind: TaskKind
    description: str
    when: datetime | None = None
    done: bool = False

    def __post_init__(self) -> None:
        if not self.description or not self.description.strip():
            raise ValidationError("The description cannot be empty.")
        if self.description.splitlines() != [self.description]:
            raise ValidationError("The description must be a single line.")
        if self.kind.has_time and self.when is None:
            raise ValidationError(f"A {self.kind.name.lower()} task needs a time.")
        if not self.kind.has_time and self.when is not None:
            raise ValidationError("A todo task does not take a time.")

    def __setattr__(self, name: str, value: object) -> None:
        if name != "done" and hasattr(self, name):
            raise AttributeError(f"Task.{name} is read-only")
        object.__setattr__(self, name, value)

    # ---- constructors ----

    @classmethod
    def todo(cls, description: str) -> Task:
        return cls(TaskKind.TODO, description)

    @classmethod
    def deadline(cls, description: str, by: datetime) -> Task:
        return cls(TaskKind.DEADLINE, description, when=by)

    @classmethod
    def event(cls, description: str, at: datetime) -> Task:
        return cls(TaskKind.EVENT, description, when=at)

    # ---- state ----

    @property
    def is_done(self) -> bool:
        return self.done

    def mark_done(self) -> None:
        self.done = True

    def mark_not_done(self) -> None:
        self.done = False

    @property
    def status_icon(self) -> str:
        return ICON_DONE if self.done else ICON_NOT_DONE

    # ---- rendering / storage ----

    def render(self) -> str:
        text = f"[{self.status_icon}] {self.description}"
        label = _TIME_LABELS.get(self.kind)
        if label and self.when is not None:
            text += f" ({label}: {format_when(self.when)})"
        return text

    def encode(self) -> str:
        fields = [self.kind.value, "1" if self.done else "0", self.description]
        if self.kind.has_time and self.when is not None:
            fields.append(serialize_when(self.when))
        return FIELD_SEP.join(fields)

    @classmethod
    def decode(cls, line: str) -> Task:
        """
        Parse one storage record.

        Tag and flag are split off the front and the time off the back, so a
        description may itself contain the field separator.
        """
        parts = line.split(FIELD_SEP, 2)
        if len(parts) != 3:
            raise CorruptRecordError(line, "wrong field count")
        tag, flag, rest = parts

        try:
            kind = TaskKind(tag)
        except ValueError:
            raise CorruptRecordError(line, f"unknown type tag {tag!r}") from None

        if flag not in _DONE_FLAGS:
            raise CorruptRecordError(line, f"bad done flag {flag!r}")

        when: datetime | None = None
        if kind.has_time:
            description, sep, raw_when = rest.rpartition(FIELD_SEP)
            if not sep:
                raise CorruptRecordError(line, "wrong field count")
            try:
                when = parse_when(raw_when)
            except ValueError:
                raise CorruptRecordError(line, "unparseable time") from None
        else:
            description = rest

        try:
            return cls(kind, description, when=when, done=_DONE_FLAGS[flag])
        except ValidationError as e:
            raise CorruptRecordError(line, e.message) from e

    def __str__(self) -> str:
        return self.render()
