"""Keystroke helpers."""

from __future__ import annotations

from textual import events

from finput.models import KeyInfo


def is_printable(key_info: KeyInfo) -> bool:
    """Whether the key would type a character into the field."""
    return len(key_info.name) == 1 and not key_info.has_control


def key_info_from_event(event: events.Key) -> KeyInfo:
    """Build a KeyInfo from a Textual key event.

    Textual names some printable keys (``full_stop`` for ``.``, ``minus``
    for ``-``), so the typed character is used when there is one.
    """
    key_info = KeyInfo.parse(event.key)
    if event.is_printable and event.character:
        return KeyInfo(name=event.character.lower(), modifiers=key_info.modifiers)
    return key_info
