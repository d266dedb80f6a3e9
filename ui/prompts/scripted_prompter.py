"""Deterministic prompter that replays a fixed list of answers."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence

from core.errors import InputClosed
from ui.prompts.base_prompter import Prompter

Answer = str | bool


class ScriptedPrompter(Prompter):
    """Answers questions from a queue and records what was asked.

    ``None`` in the queue accepts the question's default. Running out of
    answers behaves like a closed input stream.
    """

    def __init__(self, answers: Iterable[Answer | None] = ()) -> None:
        self.answers: deque[Answer | None] = deque(answers)
        self.asked: list[str] = []

    def _next(self, message: str) -> Answer | None:
        self.asked.append(message)
        if not self.answers:
            raise InputClosed(f"No scripted answer for: {message}")
        return self.answers.popleft()

    def prompt_text(
        self,
        message: str,
        help: str | None = None,
        default: str | None = None,
        allow_empty: bool = False,
    ) -> str:
        _ = help, allow_empty
        answer = self._next(message)
        if answer is None:
            return (default or "").strip()
        return str(answer).strip()

    def confirm(self, message: str, default: bool = False, help: str | None = None) -> bool:
        _ = help
        answer = self._next(message)
        if answer is None:
            return default
        if isinstance(answer, bool):
            return answer
        return answer.strip().lower() in {"y", "yes", "true"}

    def choose(self, message: str, choices: Sequence[str], default: str) -> str:
        answer = self._next(message)
        if answer is None:
            return default
        value = str(answer).strip().lower()
        if value not in choices:
            raise ValueError(f"Scripted answer {value!r} is not one of {list(choices)}")
        return value
