"""Interactive session: weekly goal, daily objective, then today's tasks.

The calendar key is resolved once by the caller and threaded through every
step, so all records of one session agree on which week and day it is.
Storage errors propagate to the caller. A closed input stream abandons the
current step and the ones after it; whatever was saved earlier stays saved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from core.calendar import CalendarKey
from core.errors import InputClosed
from entities.goals import DailyObjective, WeeklyGoal
from entities.tasks import Task
from planner.task_lifecycle import TaskLifecycle
from storage.period_store import DailyObjectiveStore, WeeklyGoalStore
from storage.task_store import PersistReport
from ui.presenter import Presenter
from ui.prompts.base_prompter import Prompter

logger = logging.getLogger("gw.wizard")

GOAL_QUESTION = "What is your goal for this week?"
GOAL_HELP = "What do you want to achieve?"
OBJECTIVE_QUESTION = "Today's objective:"
OBJECTIVE_HELP = "What do you want to do to get closer to this week's goal?"


@dataclass
class WizardResult:
    """What a wizard session ended up with."""

    goal: WeeklyGoal | None = None
    objective: DailyObjective | None = None
    today_tasks: list[Task] = field(default_factory=list)
    report: PersistReport | None = None
    abandoned_at: str | None = None

    @property
    def completed(self) -> bool:
        return self.abandoned_at is None


class GoalsWizard:
    """Runs the get-or-prompt flows against the stores."""

    def __init__(
        self,
        goals: WeeklyGoalStore,
        objectives: DailyObjectiveStore,
        tasks: TaskLifecycle,
        prompter: Prompter,
        presenter: Presenter,
        confirm_default: bool = False,
    ) -> None:
        self.goals = goals
        self.objectives = objectives
        self.tasks = tasks
        self.prompter = prompter
        self.presenter = presenter
        self.confirm_default = confirm_default

    def _ask_goal(self, default: str | None) -> str:
        return self.prompter.prompt_text(GOAL_QUESTION, help=GOAL_HELP, default=default)

    def _ask_objective(self, default: str | None) -> str:
        return self.prompter.prompt_text(OBJECTIVE_QUESTION, help=OBJECTIVE_HELP, default=default)

    def _confirmed(self, help: str) -> bool:
        try:
            return self.prompter.confirm("Is this correct?", default=self.confirm_default, help=help)
        except InputClosed:
            logger.info("Confirmation unreadable, treating as cancelled")
            return False

    def run(self, today: CalendarKey) -> WizardResult:
        """Run the full sequence for ``today``."""
        result = WizardResult()
        step = "weekly"
        try:
            result.goal = self.weekly_step(today)
            step = "daily"
            result.objective = self.daily_step(today)
            step = "tasks"
            result.today_tasks, result.report = self.tasks_step(today)
        except InputClosed as exc:
            logger.warning("Input closed during %s step: %s", step, exc)
            result.abandoned_at = step
            self.presenter.notice("Error reading answer, try again later")
        return result

    def weekly_step(self, today: CalendarKey) -> WeeklyGoal:
        goal = self.goals.get_or_prompt(today, self._ask_goal)
        self.goals.save(goal)
        self.presenter.present(goal)
        return goal

    def daily_step(self, today: CalendarKey) -> DailyObjective:
        objective = self.objectives.get_or_prompt(today, self._ask_objective)
        self.objectives.save(objective)
        self.presenter.present(objective)
        return objective

    def tasks_step(self, today: CalendarKey) -> tuple[list[Task], PersistReport]:
        unfinished = self.tasks.list_unfinished()
        self.presenter.present_tasks(
            "You have the following unfinished tasks:",
            unfinished,
            empty_message="No unfinished tasks.",
        )
        working = self.tasks.reconcile(unfinished, today)
        self.tasks.collect_new(today, working)
        report = self.tasks.persist_all(working)
        for task, exc in report.failed:
            self.presenter.notice(f"Could not save task '{task.text}': {exc}", error=True)
        self.presenter.present_tasks("Today's tasks:", working, empty_message="No tasks for today.")
        return working, report

    def enter_weekly(self, today: CalendarKey) -> WeeklyGoal | None:
        """Re-enter this week's goal, pre-filled with the stored one, and save on confirmation."""
        current = self.goals.find_by_key(today)
        goal = self.goals.draft(today, self._ask_goal(current.text if current else None))
        self.presenter.present(goal)
        if not self._confirmed("Confirm to store your goal for this week"):
            self.presenter.notice("Cancelled")
            return None
        if current is not None and current.text == goal.text:
            return current
        self.goals.save(goal)
        return goal

    def enter_daily(self, today: CalendarKey) -> DailyObjective | None:
        """Re-enter today's objective after showing (or asking for) this week's goal."""
        self.weekly_step(today)
        current = self.objectives.find_by_key(today)
        objective = self.objectives.draft(
            today, self._ask_objective(current.text if current else None)
        )
        self.presenter.present(objective)
        if not self._confirmed("Confirm to store today's objective"):
            self.presenter.notice("Cancelled")
            return None
        if current is not None and current.text == objective.text:
            return current
        self.objectives.save(objective)
        return objective
