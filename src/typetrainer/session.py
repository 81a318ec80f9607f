"""Typing session state."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import EmptyPromptError


class Correctness(Enum):
    """Whether a typed character matched the target when it was entered."""

    CORRECT = "correct"
    INCORRECT = "incorrect"


@dataclass(frozen=True, slots=True)
class TypedEntry:
    """One character produced by the user."""

    char: str
    correctness: Correctness

    @property
    def is_correct(self) -> bool:
        return self.correctness is Correctness.CORRECT


class TypingSession:
    """
    Target text plus the buffer of characters typed so far.

    The target is fixed for the lifetime of the session. The buffer only grows
    by appending and only shrinks by dropping its last entry, and never holds
    more entries than the target has characters.
    """

    def __init__(self, target: str):
        """
        Initialize session.

        Args:
            target: Text the user has to reproduce

        Raises:
            EmptyPromptError: If target is empty
        """
        if not target:
            raise EmptyPromptError()
        self._target = target
        self._buffer: list[TypedEntry] = []

    @property
    def target(self) -> str:
        """Text the user has to reproduce."""
        return self._target

    @property
    def entries(self) -> tuple[TypedEntry, ...]:
        """Snapshot of the typed buffer, left to right."""
        return tuple(self._buffer)

    def current_length(self) -> int:
        """Return the number of typed entries."""
        return len(self._buffer)

    def is_complete(self) -> bool:
        """Return True once as many characters were typed as the target holds."""
        return len(self._buffer) == len(self._target)

    def expected_char(self) -> Optional[str]:
        """Return the next target character, or None when complete."""
        if self.is_complete():
            return None
        return self._target[len(self._buffer)]

    def last_entry(self) -> Optional[TypedEntry]:
        """Return the most recent entry without removing it."""
        return self._buffer[-1] if self._buffer else None

    def append(self, entry: TypedEntry) -> None:
        """Append an entry to the buffer."""
        if self.is_complete():
            raise RuntimeError("Cannot append to a completed session")
        self._buffer.append(entry)

    def remove_last(self) -> Optional[TypedEntry]:
        """Remove and return the last entry, or None if the buffer is empty."""
        if not self._buffer:
            return None
        return self._buffer.pop()

    def __repr__(self) -> str:
        return (
            f"TypingSession(typed={len(self._buffer)}, total={len(self._target)})"
        )
