"""Top-level application orchestrator."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from core.policy_runtime import ensure_runtime_dirs, load_effective_config, resolve_root
from core.wizard import GoalsWizard
from planner.task_lifecycle import TaskLifecycle
from storage.period_store import DailyObjectiveStore, WeeklyGoalStore
from storage.stores.sql_store import SQLStore
from storage.task_store import TaskStore
from storage.write_journal import WriteJournal
from ui.presenter import Presenter
from ui.prompts.base_prompter import Prompter
from ui.prompts.console_prompter import ConsolePrompter


@dataclass
class RuntimeBundle:
    """Holds initialized runtime components."""

    root: Path
    config: dict[str, Any]
    paths: dict[str, Path]
    sql_store: SQLStore
    journal: WriteJournal
    goals: WeeklyGoalStore
    objectives: DailyObjectiveStore
    tasks: TaskLifecycle
    wizard: GoalsWizard


class Orchestrator:
    """Creates and wires runtime components for CLI use."""

    def __init__(
        self,
        root: Path | None = None,
        prompter: Prompter | None = None,
        presenter: Presenter | None = None,
    ) -> None:
        self.root = resolve_root(root)
        self.prompter = prompter or ConsolePrompter()
        self.presenter = presenter or Presenter()

    def build(self) -> RuntimeBundle:
        config = load_effective_config(self.root)
        paths = ensure_runtime_dirs(self.root, config)

        sql_store = SQLStore(paths["db_path"])
        journal = WriteJournal(paths["journal_path"])
        goals = WeeklyGoalStore(sql_store, journal)
        objectives = DailyObjectiveStore(sql_store, journal)
        tasks = TaskLifecycle(TaskStore(sql_store, journal), self.prompter)
        wizard = GoalsWizard(
            goals=goals,
            objectives=objectives,
            tasks=tasks,
            prompter=self.prompter,
            presenter=self.presenter,
            confirm_default=bool(config.get("prompts", {}).get("confirm_default", False)),
        )

        return RuntimeBundle(
            root=self.root,
            config=config,
            paths=paths,
            sql_store=sql_store,
            journal=journal,
            goals=goals,
            objectives=objectives,
            tasks=tasks,
            wizard=wizard,
        )
