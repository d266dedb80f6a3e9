"""Terminal display of goals, objectives and tasks."""

from __future__ import annotations

import typer

from entities.goals import DailyObjective, WeeklyGoal
from entities.records import StoredRecord
from entities.tasks import Task


def describe(entity: StoredRecord) -> str:
    """Plain display label for an entity."""
    if isinstance(entity, WeeklyGoal):
        return f"Your Goal this week (#{entity.week}) is: {entity.text}"
    if isinstance(entity, DailyObjective):
        return f"Your Objective today (#{entity.day_of_year}) is: {entity.text}"
    if isinstance(entity, Task):
        ref = f"#{entity.id}" if entity.id is not None else "new"
        return f"[{ref}] {entity.text} ({entity.status.label})"
    return entity.text


class Presenter:
    """Prints entities with coloured labels."""

    def present(self, entity: StoredRecord) -> None:
        if isinstance(entity, WeeklyGoal):
            typer.echo(
                "Your "
                + typer.style("Goal", fg=typer.colors.BLUE, bold=True)
                + f" this week (#{typer.style(str(entity.week), bold=True)}) is: "
                + typer.style(entity.text, fg=typer.colors.MAGENTA, bold=True)
            )
        elif isinstance(entity, DailyObjective):
            typer.echo(
                "Your "
                + typer.style("Objective", fg=typer.colors.BLUE, bold=True)
                + f" today (#{typer.style(str(entity.day_of_year), bold=True)}) is: "
                + typer.style(entity.text, fg=typer.colors.RED, bold=True)
            )
        else:
            typer.echo(describe(entity))

    def present_tasks(self, heading: str, tasks: list[Task], empty_message: str = "No tasks.") -> None:
        if not tasks:
            typer.echo(empty_message)
            return
        typer.secho(heading, bold=True)
        for task in tasks:
            typer.echo(f" - {describe(task)}")

    def notice(self, message: str, error: bool = False) -> None:
        typer.secho(message, fg=typer.colors.RED if error else typer.colors.YELLOW, err=error)
