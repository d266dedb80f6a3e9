"""Entity models for goals, objectives and tasks."""

from entities.goals import DailyObjective, PeriodRecord, WeeklyGoal
from entities.records import RecordState, StoredRecord
from entities.tasks import Disposition, Task, TaskStatus

__all__ = [
    "DailyObjective",
    "Disposition",
    "PeriodRecord",
    "RecordState",
    "StoredRecord",
    "Task",
    "TaskStatus",
    "WeeklyGoal",
]
