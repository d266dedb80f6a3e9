"""CLI entrypoint for goals-wizard."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(help="Weekly goals, daily objectives and tasks")
config_app = typer.Typer(help="Configuration commands")


def _day(ctx: typer.Context) -> date | None:
    value = ctx.obj.get("date") if ctx.obj else None
    return value.date() if isinstance(value, datetime) else None


def _root(ctx: typer.Context) -> Path | None:
    return ctx.obj.get("root") if ctx.obj else None


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    root: Path | None = typer.Option(None, "--root", help="Directory holding config/ and data"),
    day: datetime | None = typer.Option(
        None, "--date", formats=["%Y-%m-%d"], help="Act as if today were this date"
    ),
) -> None:
    """Without a subcommand, run the full wizard."""
    ctx.obj = {"root": root, "date": day}
    if ctx.invoked_subcommand is None:
        commands.wizard(root=_root(ctx), day=_day(ctx))


@app.command("weekly")
def weekly_cmd(ctx: typer.Context) -> None:
    """Enter this week's goal."""
    commands.weekly(root=_root(ctx), day=_day(ctx))


@app.command("daily")
def daily_cmd(ctx: typer.Context) -> None:
    """Enter today's objective."""
    commands.daily(root=_root(ctx), day=_day(ctx))


@app.command("list-tasks")
def list_tasks_cmd(
    ctx: typer.Context,
    include_all: bool = typer.Option(False, "--all", help="Include done, snoozed and discarded tasks"),
) -> None:
    """List unfinished tasks."""
    commands.list_tasks(root=_root(ctx), include_all=include_all)


@app.command("done")
def done_cmd(ctx: typer.Context, task_id: int = typer.Argument(..., help="Task id")) -> None:
    """Mark a task as done."""
    commands.done(root=_root(ctx), task_id=task_id)


@config_app.command("show")
def config_show_cmd(ctx: typer.Context) -> None:
    """Show effective configuration."""
    commands.config_show(root=_root(ctx))


app.add_typer(config_app, name="config")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
