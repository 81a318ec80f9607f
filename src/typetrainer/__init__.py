"""typetrainer - Terminal typing accuracy trainer."""

from .engine import SessionResult, TypingEngine
from .errors import EmptyPromptError, SessionInterrupted, TypingError
from .events import Backspace, InputEvent, Interrupt, Other, PrintableChar
from .loop import EventSource, QueueEventSource, run_session
from .session import Correctness, TypedEntry, TypingSession
from .__version__ import __version__

__all__ = [
    "TypingSession",
    "TypedEntry",
    "Correctness",
    "TypingEngine",
    "SessionResult",
    "InputEvent",
    "PrintableChar",
    "Backspace",
    "Interrupt",
    "Other",
    "EventSource",
    "QueueEventSource",
    "run_session",
    "TypingError",
    "EmptyPromptError",
    "SessionInterrupted",
    "__version__",
]
