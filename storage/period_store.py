"""Get-or-create and idempotent upsert for period-scoped records.

A period-scoped record is unique per natural key derived from the calendar:
``(week, year)`` for weekly goals and ``(day_of_year, year)`` for daily
objectives. Looking a record up never writes; saving is the only mutating
operation and is guarded by the entity's own DRAFT/PERSISTED state, so calling
``save`` again after a successful write performs no storage work at all.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from core.calendar import CalendarKey
from entities.goals import DailyObjective, PeriodRecord, WeeklyGoal
from storage.schemas import Base, DailyObjectiveRecord, WeeklyGoalRecord
from storage.stores.sql_store import SQLStore
from storage.write_journal import WriteJournal

logger = logging.getLogger("gw.storage")

E = TypeVar("E", bound=PeriodRecord)

PeriodKey = CalendarKey | tuple[int, int]
PromptFn = Callable[[str | None], str]


class PeriodStore(ABC, Generic[E]):
    """Store for one kind of period-scoped record."""

    record_cls: ClassVar[type[Base]]
    entity_cls: ClassVar[type[PeriodRecord]]
    key_columns: ClassVar[tuple[str, str]]

    def __init__(self, sql_store: SQLStore, journal: WriteJournal | None = None) -> None:
        self.sql_store = sql_store
        self.journal = journal or WriteJournal(None)
        self.ensure_schema()

    @property
    def table_name(self) -> str:
        return self.record_cls.__tablename__

    @abstractmethod
    def calendar_key(self, key: CalendarKey) -> tuple[int, int]:
        """Project a calendar key onto this record kind's natural key."""

    def _natural_key(self, key: PeriodKey) -> tuple[int, int]:
        if isinstance(key, CalendarKey):
            return self.calendar_key(key)
        return (int(key[0]), int(key[1]))

    def _key_fields(self, key: PeriodKey) -> dict[str, int]:
        return dict(zip(self.key_columns, self._natural_key(key)))

    def ensure_schema(self) -> None:
        """Create the backing table if it does not exist yet."""
        self.sql_store.create_table(self.record_cls.__table__)

    def draft(self, key: PeriodKey, text: str) -> E:
        """Build an unsaved entity for the given period."""
        return self.entity_cls(text=text, **self._key_fields(key))  # type: ignore[return-value]

    def find_by_key(self, key: PeriodKey) -> E | None:
        """Return the stored record for the period, or None."""
        fields = self._key_fields(key)
        with self.sql_store.session() as sess:
            row = sess.query(self.record_cls).filter_by(**fields).first()
            if row is None:
                return None
            entity = self.entity_cls(text=row.text, **fields)
        entity.mark_persisted()
        return entity  # type: ignore[return-value]

    def get_or_prompt(self, key: PeriodKey, prompt_fn: PromptFn, default: str | None = None) -> E:
        """Return the stored record for the period or a draft built from user input.

        ``prompt_fn`` is only invoked when nothing is on record. Nothing is written.
        """
        existing = self.find_by_key(key)
        if existing is not None:
            logger.debug("Found %s for %s", self.table_name, self._natural_key(key))
            return existing
        logger.debug("No %s for %s, asking for input", self.table_name, self._natural_key(key))
        return self.draft(key, prompt_fn(default))

    def save(self, entity: E) -> None:
        """Upsert a draft by natural key, then mark it persisted.

        Persisted entities are skipped, so edits made after the first save are
        not written. Re-entering a record for the same period goes through a new
        draft, which overwrites the stored row.
        """
        if entity.persisted:
            return
        fields = dict(zip(self.key_columns, entity.natural_key))
        values: dict[str, Any] = {"text": entity.text, **fields}
        stmt = (
            sqlite_insert(self.record_cls.__table__)
            .values(**values)
            .on_conflict_do_update(index_elements=list(self.key_columns), set_={"text": entity.text})
        )
        with self.sql_store.session() as sess:
            sess.execute(stmt)
        entity.mark_persisted()
        self.journal.record(self.table_name, "upsert", fields, entity.text)
        logger.info("Saved %s for %s", self.table_name, entity.natural_key)

    def count(self, key: PeriodKey) -> int:
        """Number of stored rows for a period (0 or 1 while the key is unique)."""
        fields = self._key_fields(key)
        with self.sql_store.session() as sess:
            return sess.query(self.record_cls).filter_by(**fields).count()


class WeeklyGoalStore(PeriodStore[WeeklyGoal]):
    """Weekly goals keyed by ``(week, year)``."""

    record_cls = WeeklyGoalRecord
    entity_cls = WeeklyGoal
    key_columns = ("week", "year")

    def calendar_key(self, key: CalendarKey) -> tuple[int, int]:
        return key.week_key


class DailyObjectiveStore(PeriodStore[DailyObjective]):
    """Daily objectives keyed by ``(day_of_year, year)``."""

    record_cls = DailyObjectiveRecord
    entity_cls = DailyObjective
    key_columns = ("day_of_year", "year")

    def calendar_key(self, key: CalendarKey) -> tuple[int, int]:
        return key.day_key
