"""Typing engine: applies input events to a session and scores it."""

from __future__ import annotations

import logging
from typing import NoReturn, assert_never

from pydantic import BaseModel, Field

from .errors import SessionInterrupted
from .events import Backspace, InputEvent, Interrupt, Other, PrintableChar
from .session import Correctness, TypedEntry, TypingSession

logger = logging.getLogger(__name__)


class SessionResult(BaseModel):
    """Final accuracy of a completed session."""

    score: float = Field(ge=0.0, le=100.0, description="Accuracy percentage")
    correct: int = Field(ge=0, description="Characters typed correctly")
    total: int = Field(gt=0, description="Characters in the target text")

    def format(self) -> str:
        """Render the user-facing score line."""
        return f"Score: {self.score:.0f}%"


def accuracy(right: int, total: int) -> float:
    """Return right/total as a percentage."""
    return right / total * 100.0


def recount(typed: str, target: str) -> int:
    """
    Count matching characters by walking both sequences from the end.

    Correctness is derived from the raw characters only; stored flags are
    not consulted. Pairs are consumed from the last index down to the first
    until the target is exhausted.
    """
    typed_chars = list(typed)
    target_chars = list(target)
    right = 0
    while target_chars:
        expected = target_chars.pop()
        actual = typed_chars.pop() if typed_chars else None
        if actual == expected:
            right += 1
    return right


class TypingEngine:
    """
    Apply input events to a TypingSession.

    Usage:
        engine = TypingEngine(TypingSession("cat"))
        engine.handle(PrintableChar("c"))
        ...
        if engine.session.is_complete():
            result = engine.result()
    """

    def __init__(self, session: TypingSession):
        """Initialize engine around an exclusively owned session."""
        self.session = session

    def handle(self, event: InputEvent) -> bool:
        """
        Apply a single input event.

        Returns:
            True if the typed buffer changed

        Raises:
            SessionInterrupted: On an interrupt event
        """
        if isinstance(event, PrintableChar):
            self.type_char(event.char)
            return True
        elif isinstance(event, Backspace):
            return self.backspace() is not None
        elif isinstance(event, Interrupt):
            self.interrupt()
        elif isinstance(event, Other):
            return False
        else:
            assert_never(event)

    def type_char(self, char: str) -> TypedEntry:
        """Classify a character against the next target position and record it."""
        expected = self.session.expected_char()
        if expected is None:
            raise RuntimeError("Character delivered to a completed session")
        correctness = (
            Correctness.CORRECT if char == expected else Correctness.INCORRECT
        )
        entry = TypedEntry(char, correctness)
        self.session.append(entry)
        return entry

    def backspace(self) -> TypedEntry | None:
        """
        Remove the last typed character.

        A trailing space is never removed, so a completed word stays put while
        the next one is being corrected.
        """
        last = self.session.last_entry()
        if last is None or last.char == " ":
            return None
        return self.session.remove_last()

    def interrupt(self) -> NoReturn:
        """Abort the session without a result."""
        logger.info(
            "Session interrupted",
            extra={
                "typed": self.session.current_length(),
                "total": len(self.session.target),
            },
        )
        raise SessionInterrupted(
            typed=self.session.current_length(), total=len(self.session.target)
        )

    def result(self) -> SessionResult:
        """Score a completed session from the per-entry correctness flags."""
        if not self.session.is_complete():
            raise RuntimeError("Cannot score an incomplete session")
        total = len(self.session.target)
        right = sum(1 for entry in self.session.entries if entry.is_correct)
        return SessionResult(score=accuracy(right, total), correct=right, total=total)
