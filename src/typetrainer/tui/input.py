"""Translate terminal key presses into engine input events."""

from __future__ import annotations

from textual import events

from ..events import Backspace, InputEvent, Interrupt, Other, PrintableChar

CHAR_MODIFIERS = frozenset({"shift"})


def split_key(key: str) -> tuple[frozenset[str], str]:
    """Split a Textual key name such as 'ctrl+shift+a' into modifiers and base key."""
    *modifiers, base = key.split("+")
    return frozenset(modifiers), base


def to_input_event(key: str, character: str | None) -> InputEvent:
    """
    Map a key name and its character to an input event.

    Only unmodified or shift-modified printable characters are typed, only a
    bare backspace edits, and Ctrl+C interrupts. Everything else is Other.
    """
    modifiers, base = split_key(key)

    if modifiers == {"ctrl"} and base == "c":
        return Interrupt()
    if base == "backspace":
        return Other(key) if modifiers else Backspace()
    if modifiers - CHAR_MODIFIERS:
        return Other(key)
    if character is not None and len(character) == 1 and character.isprintable():
        return PrintableChar(character, shift="shift" in modifiers)
    return Other(key)


def key_to_event(event: events.Key) -> InputEvent:
    """Map a Textual key event to an input event."""
    return to_input_event(event.key, event.character)
