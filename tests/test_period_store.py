"""Period-scoped store tests: get-or-prompt and idempotent save."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from core.calendar import CalendarKey
from core.errors import SchemaViolation, StorageUnavailable
from entities.goals import DailyObjective, PeriodRecord, WeeklyGoal
from entities.records import RecordState
from storage.period_store import DailyObjectiveStore, PeriodStore, WeeklyGoalStore
from storage.schemas import WeeklyGoalRecord
from storage.stores.sql_store import SQLStore
from storage.write_journal import WriteJournal


def never_prompt(default: str | None) -> str:
    raise AssertionError("prompt should not be called when a record exists")


def test_double_save_writes_one_row_once(goal_store: WeeklyGoalStore, writes: list[str]) -> None:
    goal = WeeklyGoal(text="Ship v1", week=10, year=2024)

    goal_store.save(goal)
    goal_store.save(goal)

    assert len(writes) == 1
    assert goal_store.count((10, 2024)) == 1
    assert goal.state is RecordState.PERSISTED


def test_round_trip_by_natural_key(goal_store: WeeklyGoalStore) -> None:
    goal_store.save(WeeklyGoal(text="Ship v1", week=10, year=2024))

    found = goal_store.find_by_key((10, 2024))

    assert found is not None
    assert found.text == "Ship v1"
    assert found.persisted
    assert goal_store.find_by_key((11, 2024)) is None


def test_get_or_prompt_skips_prompt_when_record_exists(
    goal_store: WeeklyGoalStore, feb_14_2025: CalendarKey
) -> None:
    goal_store.save(WeeklyGoal.for_period(feb_14_2025, "Already decided"))

    goal = goal_store.get_or_prompt(feb_14_2025, never_prompt)

    assert goal.text == "Already decided"
    assert goal.persisted


def test_get_or_prompt_never_writes(goal_store: WeeklyGoalStore, writes: list[str], feb_14_2025: CalendarKey) -> None:
    goal = goal_store.get_or_prompt(feb_14_2025, lambda default: "Draft only")

    assert not goal.persisted
    assert writes == []
    assert goal_store.find_by_key(feb_14_2025) is None


def test_prompt_receives_default(goal_store: WeeklyGoalStore, feb_14_2025: CalendarKey) -> None:
    seen: list[str | None] = []

    def prompt(default: str | None) -> str:
        seen.append(default)
        return default or ""

    goal = goal_store.get_or_prompt(feb_14_2025, prompt, default="Carry on")

    assert seen == ["Carry on"]
    assert goal.text == "Carry on"


def test_edits_after_first_save_are_not_written(goal_store: WeeklyGoalStore, writes: list[str]) -> None:
    goal = WeeklyGoal(text="Ship v1", week=10, year=2024)
    goal_store.save(goal)

    goal.text = "Something else"
    goal_store.save(goal)

    assert len(writes) == 1
    stored = goal_store.find_by_key((10, 2024))
    assert stored is not None
    assert stored.text == "Ship v1"


def test_new_draft_for_same_period_overwrites(goal_store: WeeklyGoalStore) -> None:
    goal_store.save(WeeklyGoal(text="First idea", week=3, year=2025))
    goal_store.save(goal_store.draft((3, 2025), "Better idea"))

    stored = goal_store.find_by_key((3, 2025))
    assert stored is not None
    assert stored.text == "Better idea"
    assert goal_store.count((3, 2025)) == 1


def test_objectives_for_same_day_in_different_years_are_distinct(
    objective_store: DailyObjectiveStore,
) -> None:
    objective_store.save(DailyObjective(text="New year run", day_of_year=1, year=2024))
    objective_store.save(DailyObjective(text="New year swim", day_of_year=1, year=2025))

    first = objective_store.find_by_key((1, 2024))
    second = objective_store.find_by_key((1, 2025))
    assert first is not None and first.text == "New year run"
    assert second is not None and second.text == "New year swim"


def test_scenario_prompt_then_save(goal_store: WeeklyGoalStore, feb_14_2025: CalendarKey) -> None:
    prompts: list[str | None] = []

    def prompt(default: str | None) -> str:
        prompts.append(default)
        return "Finish report"

    goal = goal_store.get_or_prompt(feb_14_2025, prompt)
    assert len(prompts) == 1
    assert goal.persisted is False
    assert goal.natural_key == (7, 2025)

    goal_store.save(goal)

    assert goal.persisted is True
    stored = goal_store.find_by_key((7, 2025))
    assert stored is not None
    assert stored.text == "Finish report"


def test_ensure_schema_is_idempotent(goal_store: WeeklyGoalStore) -> None:
    goal_store.save(WeeklyGoal(text="Keep me", week=1, year=2025))

    goal_store.ensure_schema()
    goal_store.ensure_schema()

    assert goal_store.count((1, 2025)) == 1


def test_failed_save_leaves_draft_for_retry(goal_store: WeeklyGoalStore, sql_store: SQLStore) -> None:
    WeeklyGoalRecord.__table__.drop(sql_store.engine)
    goal = WeeklyGoal(text="Retry me", week=8, year=2025)

    with pytest.raises(StorageUnavailable):
        goal_store.save(goal)
    assert goal.state is RecordState.DRAFT

    goal_store.ensure_schema()
    goal_store.save(goal)
    assert goal.persisted
    assert goal_store.count((8, 2025)) == 1


def test_unopenable_database_reports_unavailable(tmp_path: Path) -> None:
    db_dir = tmp_path / "not-a-file"
    db_dir.mkdir()
    store = SQLStore(db_path=db_dir)

    with pytest.raises(StorageUnavailable):
        WeeklyGoalStore(store)


def test_duplicate_key_insert_is_a_schema_violation(goal_store: WeeklyGoalStore, sql_store: SQLStore) -> None:
    with pytest.raises(SchemaViolation):
        with sql_store.session() as sess:
            sess.add(WeeklyGoalRecord(text="one", week=5, year=2025))
            sess.add(WeeklyGoalRecord(text="two", week=5, year=2025))


def test_saves_are_journaled(goal_store: WeeklyGoalStore, journal: WriteJournal) -> None:
    goal = WeeklyGoal(text="Ship v1", week=10, year=2024)
    goal_store.save(goal)
    goal_store.save(goal)

    entries = journal.entries()
    assert len(entries) == 1
    assert entries[0]["table"] == "weekly_goals"
    assert entries[0]["key"] == {"week": 10, "year": 2024}


def test_journal_failure_does_not_undo_the_write(goal_store: WeeklyGoalStore, journal: WriteJournal) -> None:
    assert journal.log_path is not None
    journal.log_path.mkdir(parents=True)
    goal = WeeklyGoal(text="Ship v1", week=10, year=2024)

    goal_store.save(goal)

    assert goal.persisted
    assert goal_store.count((10, 2024)) == 1


def test_late_december_does_not_reuse_january_goal(goal_store: WeeklyGoalStore) -> None:
    goal_store.save(WeeklyGoal(text="January goal", week=1, year=2024))
    december_30 = CalendarKey.from_date(date(2024, 12, 30))

    assert goal_store.find_by_key(december_30) is None

    goal_store.save(WeeklyGoal.for_period(december_30, "New year prep"))
    january_2 = goal_store.find_by_key(CalendarKey.from_date(date(2025, 1, 2)))
    assert january_2 is not None and january_2.text == "New year prep"


def test_key_hooks_must_be_provided(sql_store: SQLStore) -> None:
    with pytest.raises(TypeError):
        PeriodRecord(text="no period")
    with pytest.raises(TypeError):
        PeriodStore(sql_store)
