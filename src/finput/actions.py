"""Classify keystrokes into actions and dispatch them to their edit rule."""

from __future__ import annotations

import string

from finput import rules
from finput.history import ValueHistory
from finput.models import ActionType, EditState, KeyInfo, Modifier, Options


def get_action_type(key_info: KeyInfo, options: Options) -> ActionType:
    """Map a keystroke to the action it requests.

    Undo and redo need the control-group modifier, so they are recognised
    before the plain character actions.  Other characters typed with that
    modifier are left to the host field.

    Args:
        key_info: The keystroke.
        options: Current options (decimal, thousands and shortcut characters).

    Returns:
        The ActionType; ``UNKNOWN`` for everything not recognised.
    """
    name = key_info.name

    if key_info.has_control:
        if name == "z":
            return ActionType.REDO if Modifier.SHIFT in key_info.modifiers else ActionType.UNDO
        if name == "y":
            return ActionType.REDO
        if len(name) == 1:
            # ctrl+c, ctrl+v, ctrl+a ... belong to the host field
            return ActionType.UNKNOWN

    if len(name) == 1 and name in string.digits:
        return ActionType.NUMBER
    if name == "-":
        return ActionType.MINUS
    if name == options.decimal:
        return ActionType.DECIMAL
    if name == options.thousands:
        return ActionType.THOUSANDS
    if name in options.shortcuts:
        return ActionType.SHORTCUT
    if name == "backspace":
        return ActionType.BACKSPACE
    if name == "delete":
        return ActionType.DELETE
    return ActionType.UNKNOWN


def evaluate(
    action: ActionType,
    state: EditState,
    key_info: KeyInfo,
    options: Options,
    history: ValueHistory,
) -> EditState:
    """Apply the edit rule for *action* to *state*."""
    match action:
        case ActionType.NUMBER:
            rule = rules.on_number
        case ActionType.MINUS:
            rule = rules.on_minus
        case ActionType.DECIMAL:
            rule = rules.on_decimal
        case ActionType.THOUSANDS:
            rule = rules.on_thousands
        case ActionType.SHORTCUT:
            rule = rules.on_shortcut
        case ActionType.BACKSPACE:
            rule = rules.on_backspace
        case ActionType.DELETE:
            rule = rules.on_delete
        case ActionType.UNDO:
            rule = rules.on_undo
        case ActionType.REDO:
            rule = rules.on_redo
        case ActionType.UNKNOWN:
            rule = rules.on_unknown
    return rule(state, key_info, options, history)
