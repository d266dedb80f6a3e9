"""Task models."""

from __future__ import annotations

from enum import Enum

from core.calendar import CalendarKey
from core.errors import InvalidTransition
from entities.records import StoredRecord


class TaskStatus(str, Enum):
    """Persisted task status, stored as a single character."""

    TODO = "T"
    DONE = "D"
    SNOOZED = "S"
    DISCARDED = "X"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def terminal(self) -> bool:
        return self in (TaskStatus.DONE, TaskStatus.DISCARDED)


_LABELS = {
    TaskStatus.TODO: "ToDo",
    TaskStatus.DONE: "Done",
    TaskStatus.SNOOZED: "Snoozed",
    TaskStatus.DISCARDED: "Discarded",
}


class Disposition(str, Enum):
    """Answer to the daily reconciliation question for one unfinished task."""

    MOVE_TO_TODAY = "move-to-today"
    DISCARD = "discard"
    SNOOZE = "snooze"


class Task(StoredRecord):
    """A unit of work that lives across days until resolved."""

    id: int | None = None
    status: TaskStatus = TaskStatus.TODO
    day_of_year: int | None = None
    year: int | None = None

    @classmethod
    def new(cls, text: str, today: CalendarKey | None = None) -> Task:
        if today is None:
            return cls(text=text)
        return cls(text=text, day_of_year=today.day_of_year, year=today.year)

    def revise(
        self,
        status: TaskStatus | None = None,
        day: CalendarKey | None = None,
        clear_day: bool = False,
    ) -> Task:
        """Return a DRAFT revision with the same identity.

        Terminal tasks cannot change status. A revision is a fresh instance so
        a persisted task is never flipped back to DRAFT.
        """
        target = status or self.status
        if self.status.terminal and target is not self.status:
            raise InvalidTransition(self.status.label, target.label)
        day_of_year, year = self.day_of_year, self.year
        if clear_day:
            day_of_year, year = None, None
        if day is not None:
            day_of_year, year = day.day_of_year, day.year
        return Task(id=self.id, text=self.text, status=target, day_of_year=day_of_year, year=year)

    def is_for(self, day: CalendarKey) -> bool:
        return (self.day_of_year, self.year) == day.day_key
