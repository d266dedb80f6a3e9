"""Persistence for tasks, keyed by storage-assigned identity."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from core.errors import StorageError
from entities.tasks import Task, TaskStatus
from storage.schemas import TaskRecord
from storage.stores.sql_store import SQLStore
from storage.write_journal import WriteJournal

logger = logging.getLogger("gw.storage")


@dataclass
class PersistReport:
    """Outcome of a batch write; failures are reported per task."""

    saved: list[Task] = field(default_factory=list)
    skipped: list[Task] = field(default_factory=list)
    failed: list[tuple[Task, StorageError]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed


class TaskStore:
    """Reads and writes task rows."""

    def __init__(self, sql_store: SQLStore, journal: WriteJournal | None = None) -> None:
        self.sql_store = sql_store
        self.journal = journal or WriteJournal(None)
        self.ensure_schema()

    def ensure_schema(self) -> None:
        """Create the tasks table if it does not exist yet."""
        self.sql_store.create_table(TaskRecord.__table__)

    @staticmethod
    def _to_task(row: TaskRecord) -> Task:
        task = Task(
            id=row.id,
            text=row.text or "",
            status=TaskStatus(row.status or TaskStatus.TODO.value),
            day_of_year=row.day_of_year,
            year=row.year,
        )
        task.mark_persisted()
        return task

    def get(self, task_id: int) -> Task | None:
        """Fetch one task by id."""
        with self.sql_store.session() as sess:
            row = sess.get(TaskRecord, task_id)
            return self._to_task(row) if row is not None else None

    def list_by_status(self, *statuses: TaskStatus) -> list[Task]:
        """List tasks in insertion order, optionally filtered by status."""
        with self.sql_store.session() as sess:
            query = sess.query(TaskRecord)
            if statuses:
                query = query.filter(TaskRecord.status.in_([s.value for s in statuses]))
            rows = query.order_by(TaskRecord.id.asc()).all()
            return [self._to_task(row) for row in rows]

    def list_unfinished(self) -> list[Task]:
        """All ToDo tasks, oldest first. Empty when there is nothing pending."""
        return self.list_by_status(TaskStatus.TODO)

    def save(self, task: Task) -> Task:
        """Write a draft task and mark it persisted.

        New tasks are inserted and receive an id; revisions of stored tasks
        replace the row with the same id. Persisted tasks are not written.
        """
        if task.persisted:
            return task
        values = {
            "text": task.text,
            "status": task.status.value,
            "day_of_year": task.day_of_year,
            "year": task.year,
        }
        with self.sql_store.session() as sess:
            if task.id is None:
                row = TaskRecord(**values)
                sess.add(row)
                sess.flush()
                task_id = row.id
                operation = "insert"
            else:
                stmt = (
                    sqlite_insert(TaskRecord.__table__)
                    .values(id=task.id, **values)
                    .on_conflict_do_update(index_elements=["id"], set_=values)
                )
                sess.execute(stmt)
                task_id = task.id
                operation = "upsert"
        task.id = task_id
        task.mark_persisted()
        self.journal.record("tasks", operation, {"id": task_id}, task.text)
        logger.debug("Task %s %s as %s", task_id, operation, task.status.label)
        return task

    def persist_all(self, tasks: list[Task]) -> PersistReport:
        """Write every draft in the batch.

        A failing task is recorded and the batch continues; rows already
        written are kept.
        """
        report = PersistReport()
        for task in tasks:
            if task.persisted:
                report.skipped.append(task)
                continue
            try:
                report.saved.append(self.save(task))
            except StorageError as exc:
                logger.error("Could not save task %r: %s", task.text, exc)
                report.failed.append((task, exc))
        return report
