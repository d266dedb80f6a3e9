"""Base input collaborator interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence


class Prompter(ABC):
    """Supplies text answers and confirmations to the wizard core.

    Implementations raise ``InputClosed`` when no answer can be obtained.
    """

    @abstractmethod
    def prompt_text(
        self,
        message: str,
        help: str | None = None,
        default: str | None = None,
        allow_empty: bool = False,
    ) -> str:
        """Ask for free text, optionally pre-filled with a default."""

    @abstractmethod
    def confirm(self, message: str, default: bool = False, help: str | None = None) -> bool:
        """Ask a yes/no question."""

    @abstractmethod
    def choose(self, message: str, choices: Sequence[str], default: str) -> str:
        """Ask for one of a fixed set of answers."""
