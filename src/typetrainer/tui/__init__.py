"""Textual front end for typing sessions."""

from .app import PromptView, TypingTrainerApp
from .formatting import format_session
from .input import key_to_event, to_input_event

__all__ = [
    "TypingTrainerApp",
    "PromptView",
    "format_session",
    "key_to_event",
    "to_input_event",
]
