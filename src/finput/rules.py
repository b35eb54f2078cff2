"""Edit rules: one function per action type.

Every rule takes the current state, the keystroke, the options and the
history, and returns a new EditState.  A rejected keystroke is a state with
``valid=False``; rules never raise.
"""

from __future__ import annotations

import math
from dataclasses import replace

from finput.formatter import allowed_decimal, allowed_zero, edit_string, from_number, to_raw
from finput.history import ValueHistory
from finput.keys import is_printable
from finput.models import EditState, KeyInfo, Options, Range


def _accept(text: str, caret: int) -> EditState:
    return EditState(text=text, caret_start=caret, caret_end=caret)


def _reject(state: EditState) -> EditState:
    return replace(state, valid=False)


def on_number(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Insert a digit, enforcing the sign, leading-zero and scale limits."""
    without_selection = edit_string(state.text, "", state.caret_start, state.caret_end)
    candidate = edit_string(state.text, key_info.name, state.caret_start, state.caret_end)

    in_front_of_sign = (
        state.text.startswith("-") and state.caret_start == 0 and state.caret_end == 0
    )
    if (
        in_front_of_sign
        or not allowed_zero(without_selection, state.caret_start, options)
        or not allowed_decimal(candidate, options)
    ):
        return _reject(state)
    return _accept(candidate, state.caret_start + 1)


def on_minus(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Insert a sign at the start, unless one is already there and unselected."""
    sign_free = not state.text.startswith("-") or state.caret_end > 0
    if state.caret_start != 0 or not sign_free or options.range == Range.POSITIVE:
        return _reject(state)
    return _accept(edit_string(state.text, "-", state.caret_start, state.caret_end), 1)


def on_decimal(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Insert the decimal separator if there is none or it is being replaced."""
    index = state.text.find(options.decimal)
    replaces_existing = state.caret_start <= index < state.caret_end
    if options.scale == 0 or (index != -1 and not replaces_existing):
        return _reject(state)
    text = edit_string(state.text, options.decimal, state.caret_start, state.caret_end)
    return _accept(text, state.caret_start + 1)


def on_thousands(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Typing the group separator is never allowed."""
    return _reject(state)


def on_shortcut(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Multiply the value (or 1 when there is none) by the shortcut's multiplier."""
    multiplier = options.shortcuts.get(key_info.name)
    if multiplier is None:
        return replace(state)

    remaining = edit_string(state.text, "", state.caret_start, state.caret_end)
    base = to_raw(remaining, options)
    # nan, empty and zero all start from one
    if math.isnan(base) or base == 0:
        base = 1.0

    text = from_number(base * multiplier, options) or state.text
    return _accept(text, len(text))


def on_backspace(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Delete the selection, the character before the caret, or everything before it."""
    text, start, end = state.text, state.caret_start, state.caret_end
    if start != end:
        return _accept(text[:start] + text[end:], start)
    if key_info.has_control:
        return _accept(text[start:], 0)
    step = 1 if start > 0 else 0
    return _accept(text[: start - step] + text[start:], start - step)


def on_delete(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Delete the selection, the character after the caret, or everything after it.

    A thousands separator right after the caret is skipped over so that the
    digit behind it is deleted instead.
    """
    text, start, end = state.text, state.caret_start, state.caret_end
    if start != end:
        return _accept(text[:start] + text[end:], start)
    if key_info.has_control:
        return _accept(text[:start], start)
    if text[start : start + 1] == options.thousands:
        start += 1
    return _accept(text[:start] + text[start + 1 :], start)


def on_undo(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    text = history.undo()
    return _accept(text, len(text))


def on_redo(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    text = history.redo()
    return _accept(text, len(text))


def on_unknown(
    state: EditState, key_info: KeyInfo, options: Options, history: ValueHistory
) -> EditState:
    """Let navigation and control keys through; reject stray characters."""
    return replace(state, valid=not is_printable(key_info))
