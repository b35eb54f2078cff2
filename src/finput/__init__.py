"""Masked numeric text editing: formatting, edit rules, caret tracking and undo."""

from __future__ import annotations

from finput.actions import evaluate, get_action_type
from finput.caret import compute_offset
from finput.controller import Finput, KeyOutcome
from finput.errors import FinputClosedError, FinputError, OptionsError
from finput.formatter import format_partial, from_number, parse_free_text, to_display, to_raw
from finput.history import ValueHistory
from finput.models import (
    DEFAULT_OPTIONS,
    ActionType,
    EditState,
    KeyInfo,
    Modifier,
    Options,
    Range,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "ActionType",
    "EditState",
    "Finput",
    "FinputClosedError",
    "FinputError",
    "KeyInfo",
    "KeyOutcome",
    "Modifier",
    "Options",
    "OptionsError",
    "Range",
    "ValueHistory",
    "compute_offset",
    "evaluate",
    "format_partial",
    "from_number",
    "get_action_type",
    "parse_free_text",
    "to_display",
    "to_raw",
]
