"""Calendar resolution for period-scoped records."""

from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field


class CalendarKey(BaseModel):
    """Day, ISO week and year used to partition time-scoped records.

    ``year`` is the calendar year and goes with ``day_of_year``. ``week_year``
    is the ISO week-year and goes with ``iso_week``; it differs from ``year``
    in the few days around New Year that ISO assigns to a neighbouring year.
    """

    model_config = ConfigDict(frozen=True)

    day_of_year: int = Field(ge=1, le=366)
    iso_week: int = Field(ge=1, le=53)
    year: int
    week_year: int | None = None

    @classmethod
    def from_date(cls, value: date) -> CalendarKey:
        """Build the key for a given calendar date."""
        iso = value.isocalendar()
        return cls(
            day_of_year=value.timetuple().tm_yday,
            iso_week=iso[1],
            year=value.year,
            week_year=iso[0],
        )

    @property
    def week_key(self) -> tuple[int, int]:
        return (self.iso_week, self.year if self.week_year is None else self.week_year)

    @property
    def day_key(self) -> tuple[int, int]:
        return (self.day_of_year, self.year)


def resolve_now() -> CalendarKey:
    """Resolve the key for the local wall-clock date."""
    return CalendarKey.from_date(datetime.now().date())
