"""Shared fixtures: temporary SQLite stores and a write-statement counter."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from sqlalchemy import event

from core.calendar import CalendarKey
from storage.period_store import DailyObjectiveStore, WeeklyGoalStore
from storage.stores.sql_store import SQLStore
from storage.task_store import TaskStore
from storage.write_journal import WriteJournal

WRITE_PREFIXES = ("INSERT", "UPDATE", "DELETE", "REPLACE")


@pytest.fixture
def sql_store(tmp_path: Path) -> Iterator[SQLStore]:
    store = SQLStore(db_path=tmp_path / "goals.db")
    yield store
    store.dispose()


@pytest.fixture
def journal(tmp_path: Path) -> WriteJournal:
    return WriteJournal(tmp_path / "logs" / "writes.jsonl")


@pytest.fixture
def goal_store(sql_store: SQLStore, journal: WriteJournal) -> WeeklyGoalStore:
    return WeeklyGoalStore(sql_store, journal)


@pytest.fixture
def objective_store(sql_store: SQLStore, journal: WriteJournal) -> DailyObjectiveStore:
    return DailyObjectiveStore(sql_store, journal)


@pytest.fixture
def task_store(sql_store: SQLStore, journal: WriteJournal) -> TaskStore:
    return TaskStore(sql_store, journal)


@pytest.fixture
def writes(sql_store: SQLStore) -> Iterator[list[str]]:
    """Collects every data-modifying SQL statement sent to the database."""
    statements: list[str] = []

    def _record(conn: Any, cursor: Any, statement: str, *args: Any) -> None:
        if statement.lstrip().upper().startswith(WRITE_PREFIXES):
            statements.append(statement)

    event.listen(sql_store.engine, "before_cursor_execute", _record)
    yield statements
    event.remove(sql_store.engine, "before_cursor_execute", _record)


@pytest.fixture
def feb_14_2025() -> CalendarKey:
    return CalendarKey(day_of_year=45, iso_week=7, year=2025)
