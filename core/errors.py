"""Error kinds surfaced by the goals wizard core."""

from __future__ import annotations


class GoalsWizardError(Exception):
    """Base class for all wizard errors."""


class StorageError(GoalsWizardError):
    """A storage operation failed."""


class StorageUnavailable(StorageError):
    """The persistent store cannot be opened or queried."""


class SchemaViolation(StorageError):
    """A uniqueness constraint was violated, which points at a key derivation bug."""


class InputClosed(GoalsWizardError):
    """The input collaborator could not supply an answer."""


class InvalidTransition(GoalsWizardError):
    """A task status change that leaves a terminal state was requested."""

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(f"Cannot move task from {current} to {requested}")
        self.current = current
        self.requested = requested
