"""Interactive terminal prompter built on typer prompts."""

from __future__ import annotations

from collections.abc import Sequence

import click
import typer

from core.errors import InputClosed
from ui.prompts.base_prompter import Prompter


class ConsolePrompter(Prompter):
    """Reads answers from the terminal. End of input or Ctrl-C closes the flow."""

    @staticmethod
    def _help(help: str | None) -> None:
        if help:
            typer.secho(help, dim=True)

    def prompt_text(
        self,
        message: str,
        help: str | None = None,
        default: str | None = None,
        allow_empty: bool = False,
    ) -> str:
        self._help(help)
        if default is None and allow_empty:
            default = ""
        try:
            answer = typer.prompt(message, default=default, show_default=bool(default))
        except typer.Abort as exc:
            raise InputClosed(f"No answer for: {message}") from exc
        return str(answer).strip()

    def confirm(self, message: str, default: bool = False, help: str | None = None) -> bool:
        self._help(help)
        try:
            return bool(typer.confirm(message, default=default))
        except typer.Abort as exc:
            raise InputClosed(f"No answer for: {message}") from exc

    def choose(self, message: str, choices: Sequence[str], default: str) -> str:
        try:
            answer = typer.prompt(
                message,
                default=default,
                type=click.Choice(list(choices), case_sensitive=False),
                show_choices=True,
            )
        except typer.Abort as exc:
            raise InputClosed(f"No answer for: {message}") from exc
        return str(answer).lower()
