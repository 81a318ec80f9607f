"""Rich text rendering of a typing session."""

from __future__ import annotations

from itertools import groupby

from rich.style import Style
from rich.text import Text

from ..session import TypingSession

CORRECT_STYLE = Style(color="white")
INCORRECT_STYLE = Style(color="red")
CURSOR_STYLE = Style(color="bright_black", underline=True)
REMAINING_STYLE = Style(color="bright_black")


def format_session(session: TypingSession) -> Text:
    """
    Build the prompt display for the current session state.

    Typed characters are colored by the correctness recorded when they were
    entered, the next expected character is underlined, and the rest of the
    target is dimmed.
    """
    text = Text()
    for is_correct, run in groupby(session.entries, key=lambda entry: entry.is_correct):
        text.append(
            "".join(entry.char for entry in run),
            style=CORRECT_STYLE if is_correct else INCORRECT_STYLE,
        )

    remaining = session.target[session.current_length() :]
    if remaining:
        text.append(remaining[0], style=CURSOR_STYLE)
        text.append(remaining[1:], style=REMAINING_STYLE)
    return text
