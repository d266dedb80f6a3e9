"""Draft/persisted lifecycle shared by all stored entities."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, PrivateAttr, field_validator


class RecordState(str, Enum):
    """Whether an entity instance has been written to the store."""

    DRAFT = "draft"
    PERSISTED = "persisted"


class StoredRecord(BaseModel):
    """Base model carrying the one-way DRAFT -> PERSISTED state."""

    text: str
    _state: RecordState = PrivateAttr(default=RecordState.DRAFT)

    @field_validator("text")
    @classmethod
    def _strip_text(cls, value: str) -> str:
        return value.strip()

    @property
    def state(self) -> RecordState:
        return self._state

    @property
    def persisted(self) -> bool:
        return self._state is RecordState.PERSISTED

    def mark_persisted(self) -> None:
        """Record a successful write. There is no way back to DRAFT."""
        self._state = RecordState.PERSISTED

    def __str__(self) -> str:
        return self.text
