"""Daily task lifecycle: reconciliation of carry-over tasks and new task entry.

States are ToDo, Done, Snoozed and Discarded. Done and Discarded are terminal.
Each day the unfinished ToDo tasks are reviewed one by one:

- move-to-today keeps the task ToDo and associates it with today;
- discard resolves it as Discarded;
- snooze leaves it ToDo without a day, so it comes back tomorrow.

Tasks already associated with today are not asked about again.
Discard and snooze answers are written straight away. Tasks moved to today and
newly entered tasks are drafts written together by ``persist_all``.
"""

from __future__ import annotations

import logging

from core.calendar import CalendarKey
from entities.tasks import Disposition, Task, TaskStatus
from storage.task_store import PersistReport, TaskStore
from ui.prompts.base_prompter import Prompter

logger = logging.getLogger("gw.tasks")

DISPOSITION_CHOICES = [d.value for d in Disposition]


class TaskLifecycle:
    """Applies user dispositions and status transitions to tasks."""

    def __init__(self, task_store: TaskStore, prompter: Prompter) -> None:
        self.task_store = task_store
        self.prompter = prompter

    def list_unfinished(self) -> list[Task]:
        return self.task_store.list_unfinished()

    def list_tasks(self, include_resolved: bool = False) -> list[Task]:
        if include_resolved:
            return self.task_store.list_by_status()
        return self.task_store.list_unfinished()

    @staticmethod
    def apply(task: Task, disposition: Disposition, today: CalendarKey) -> Task:
        """Return the revision of ``task`` for a reconciliation answer."""
        if disposition is Disposition.MOVE_TO_TODAY:
            return task.revise(status=TaskStatus.TODO, day=today)
        if disposition is Disposition.DISCARD:
            return task.revise(status=TaskStatus.DISCARDED)
        return task.revise(status=TaskStatus.TODO, clear_day=True)

    def reconcile(self, unfinished: list[Task], today: CalendarKey) -> list[Task]:
        """Ask for a disposition per unfinished task and apply it.

        Discarded and snoozed tasks are written straight away. Tasks moved to
        today come back, in input order, as drafts for ``persist_all`` together
        with the new tasks entered afterwards. Tasks already on record for
        ``today`` join the active list without a question.
        """
        active: list[Task] = []
        for task in unfinished:
            if task.is_for(today):
                active.append(task)
                continue
            answer = self.prompter.choose(
                f"What about '{task.text}'?",
                DISPOSITION_CHOICES,
                default=Disposition.MOVE_TO_TODAY.value,
            )
            disposition = Disposition(answer)
            revised = self.apply(task, disposition, today)
            logger.debug("Task %s -> %s", task.id, disposition.value)
            if disposition is Disposition.MOVE_TO_TODAY:
                active.append(revised if _changed(task, revised) else task)
            elif _changed(task, revised):
                self.task_store.save(revised)
        return active

    def collect_new(self, today: CalendarKey, working: list[Task]) -> list[Task]:
        """Prompt for new tasks until an empty answer; append them to ``working``."""
        added: list[Task] = []
        while True:
            text = self.prompter.prompt_text(
                "New task (leave empty to finish):",
                help="What else needs doing today?",
                allow_empty=True,
            )
            if not text:
                break
            task = Task.new(text, today)
            working.append(task)
            added.append(task)
        logger.debug("Collected %d new tasks", len(added))
        return added

    def persist_all(self, tasks: list[Task]) -> PersistReport:
        return self.task_store.persist_all(tasks)

    def transition(self, task: Task, status: TaskStatus) -> Task:
        """Move a task to ``status`` and write it."""
        revised = task.revise(status=status)
        if revised.status is task.status and task.persisted:
            return task
        return self.task_store.save(revised)

    def mark_done(self, task_id: int) -> Task:
        """Resolve a stored task as Done."""
        task = self.task_store.get(task_id)
        if task is None:
            raise LookupError(f"No task with id {task_id}")
        return self.transition(task, TaskStatus.DONE)


def _changed(before: Task, after: Task) -> bool:
    return (before.status, before.day_of_year, before.year) != (
        after.status,
        after.day_of_year,
        after.year,
    )
