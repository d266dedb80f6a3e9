"""Weekly goal and daily objective models."""

from __future__ import annotations

from abc import abstractmethod

from pydantic import Field

from core.calendar import CalendarKey
from entities.records import StoredRecord


class PeriodRecord(StoredRecord):
    """Record that is unique per calendar period."""

    @property
    @abstractmethod
    def natural_key(self) -> tuple[int, int]:
        """Key the record is unique under."""


class WeeklyGoal(PeriodRecord):
    """What the user wants to achieve this ISO week."""

    week: int = Field(ge=1, le=53)
    year: int

    @classmethod
    def for_period(cls, key: CalendarKey, text: str) -> WeeklyGoal:
        week, year = key.week_key
        return cls(text=text, week=week, year=year)

    @property
    def natural_key(self) -> tuple[int, int]:
        return (self.week, self.year)


class DailyObjective(PeriodRecord):
    """Today's step towards the weekly goal. Linked to it by period only."""

    day_of_year: int = Field(ge=1, le=366)
    year: int

    @classmethod
    def for_period(cls, key: CalendarKey, text: str) -> DailyObjective:
        return cls(text=text, day_of_year=key.day_of_year, year=key.year)

    @property
    def natural_key(self) -> tuple[int, int]:
        return (self.day_of_year, self.year)
