"""Target text bundled with the package."""

from __future__ import annotations

from importlib import resources

from .errors import EmptyPromptError

PROMPT_RESOURCE = "prompt.txt"


def load_prompt() -> str:
    """
    Read the bundled target text.

    Trailing line breaks are dropped since they cannot be typed; everything
    else, including inner newlines and punctuation, is kept as is.

    Raises:
        EmptyPromptError: If the bundled text is empty
    """
    text = (
        resources.files("typetrainer")
        .joinpath(PROMPT_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return clean_prompt(text)


def clean_prompt(text: str) -> str:
    """Strip trailing line breaks and reject empty text."""
    text = text.rstrip("\r\n")
    if not text:
        raise EmptyPromptError()
    return text
