"""Typer command handlers."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import date
from pathlib import Path

import typer

from core.calendar import CalendarKey, resolve_now
from core.errors import InputClosed, InvalidTransition, SchemaViolation, StorageError
from core.orchestrator import Orchestrator, RuntimeBundle
from core.policy_runtime import configure_logging

logger = logging.getLogger("gw.cli")


def _runtime(root: Path | None = None) -> RuntimeBundle:
    bundle = Orchestrator(root=root).build()
    configure_logging(bundle.config)
    return bundle


def _today(day: date | None) -> CalendarKey:
    return CalendarKey.from_date(day) if day is not None else resolve_now()


@contextmanager
def _handle_errors() -> Iterator[None]:
    """Map wizard errors onto exit codes."""
    try:
        yield
    except InputClosed:
        typer.secho("Error reading answer, try again later", fg=typer.colors.YELLOW)
    except SchemaViolation as exc:
        logger.error("Schema violation: %s", exc)
        typer.secho(f"Storage conflict: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except StorageError as exc:
        typer.secho(f"Storage unavailable: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


def wizard(root: Path | None, day: date | None) -> None:
    """Run the full interactive sequence."""
    with _handle_errors():
        bundle = _runtime(root)
        typer.secho("Goals Wizard", bold=True)
        result = bundle.wizard.run(_today(day))
        if result.report is not None and not result.report.ok:
            raise typer.Exit(code=1)


def weekly(root: Path | None, day: date | None) -> None:
    """Enter or replace this week's goal."""
    with _handle_errors():
        bundle = _runtime(root)
        bundle.wizard.enter_weekly(_today(day))


def daily(root: Path | None, day: date | None) -> None:
    """Enter or replace today's objective."""
    with _handle_errors():
        bundle = _runtime(root)
        bundle.wizard.enter_daily(_today(day))


def list_tasks(root: Path | None, include_all: bool) -> None:
    """List unfinished tasks, or all of them."""
    with _handle_errors():
        bundle = _runtime(root)
        tasks = bundle.tasks.list_tasks(include_resolved=include_all)
        heading = "All tasks:" if include_all else "Unfinished tasks:"
        empty = "No tasks." if include_all else "No unfinished tasks."
        bundle.wizard.presenter.present_tasks(heading, tasks, empty_message=empty)


def done(root: Path | None, task_id: int) -> None:
    """Mark a task as done."""
    with _handle_errors():
        bundle = _runtime(root)
        try:
            task = bundle.tasks.mark_done(task_id)
        except LookupError as exc:
            typer.secho(str(exc), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc
        except InvalidTransition as exc:
            typer.secho(str(exc), fg=typer.colors.RED, err=True)
            raise typer.Exit(code=2) from exc
        typer.echo(f"Done: {task.text}")


def config_show(root: Path | None) -> None:
    """Show effective runtime config."""
    with _handle_errors():
        bundle = _runtime(root)
        payload = {
            "root": str(bundle.root),
            "paths": {name: str(path) for name, path in bundle.paths.items()},
            "config": bundle.config,
        }
        typer.echo(json.dumps(payload, indent=2))
