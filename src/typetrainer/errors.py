"""Typing session errors and process exit statuses."""

from __future__ import annotations

EXIT_OK = 0
EXIT_INTERRUPTED = 1
EXIT_FAILURE = 2


class TypingError(Exception):
    """Base exception for typing session errors."""


class EmptyPromptError(TypingError, ValueError):
    """Raised when a session is started with an empty target text."""

    def __init__(self, message: str = "Target text must not be empty"):
        """Initialize empty prompt error."""
        super().__init__(message)


class SessionInterrupted(TypingError):
    """Raised when the user cancels a running session."""

    exit_code = EXIT_INTERRUPTED

    def __init__(self, typed: int, total: int):
        """Initialize interrupt with the progress made so far."""
        super().__init__(f"Session interrupted after {typed}/{total} characters")
        self.typed = typed
        self.total = total
