"""Input events delivered to the typing engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class PrintableChar:
    """A single typed character, optionally shift-modified."""

    char: str
    shift: bool = False

    def __post_init__(self) -> None:
        if len(self.char) != 1:
            raise ValueError(f"Expected a single character, got {self.char!r}")


@dataclass(frozen=True, slots=True)
class Backspace:
    """Unmodified backspace key."""


@dataclass(frozen=True, slots=True)
class Interrupt:
    """Cancel request (Ctrl+C)."""


@dataclass(frozen=True, slots=True)
class Other:
    """Any event the engine does not act on."""

    key: str = ""


InputEvent = Union[PrintableChar, Backspace, Interrupt, Other]
