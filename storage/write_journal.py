"""Structured JSONL journal of storage writes."""

from __future__ import annotations

import hashlib
import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any


class WriteJournal:
    """Appends one JSON line per row written to the store."""

    def __init__(self, log_path: Path | None) -> None:
        self.log_path = log_path
        if self.log_path is not None:
            self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self.logger = logging.getLogger("gw.journal")

    @staticmethod
    def _hash_text(text: str) -> str:
        return hashlib.sha256(text.encode("utf-8")).hexdigest()

    def record(self, table: str, operation: str, key: dict[str, Any], text: str) -> None:
        """Append one JSONL write event."""
        event = {
            "timestamp": datetime.now(UTC).isoformat(),
            "table": table,
            "operation": operation,
            "key": key,
            "text_hash": self._hash_text(text),
        }
        line = json.dumps(event, ensure_ascii=True, sort_keys=True)
        self.logger.info(line)
        if self.log_path is None:
            return
        try:
            with self.log_path.open("a", encoding="utf-8") as fh:
                fh.write(line + "\n")
        except OSError as exc:
            # The row is already committed.
            self.logger.error("Cannot append to write journal %s: %s", self.log_path, exc)

    def entries(self) -> list[dict[str, Any]]:
        """Read back all journaled events."""
        if self.log_path is None or not self.log_path.exists():
            return []
        lines = self.log_path.read_text(encoding="utf-8").splitlines()
        return [json.loads(line) for line in lines if line.strip()]
