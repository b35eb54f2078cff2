"""Toolkit-neutral binding between a text field and the editing engine.

A :class:`Finput` owns the options and the undo history of exactly one
field.  The host widget feeds it the field's text and selection on every
keystroke and applies the returned :class:`KeyOutcome`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from finput.actions import evaluate, get_action_type
from finput.caret import clamp_caret, compute_offset
from finput.errors import FinputClosedError
from finput.formatter import format_partial, from_number, parse_free_text, to_display, to_raw
from finput.history import ValueHistory
from finput.models import DEFAULT_OPTIONS, ActionType, EditState, KeyInfo, Options

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyOutcome:
    """What the host field should do with a keystroke.

    Attributes:
        action: The classified action.
        valid: False when the keystroke was rejected.
        handled: True when the host must suppress its own handling of the
            key.  Rejected keys are handled; navigation keys are not.
        text: The new field text (unchanged when rejected or passed through).
        caret: The new caret position.
    """

    action: ActionType
    valid: bool
    handled: bool
    text: str
    caret: int


class Finput:
    """Numeric editing state for one field.

    Args:
        options: Base options; defaults to :data:`DEFAULT_OPTIONS`.
        history: An existing history to reuse; a new one is created otherwise.
        **changes: Option overrides merged over *options*.
    """

    def __init__(
        self,
        options: Options | None = None,
        history: ValueHistory | None = None,
        **changes,
    ) -> None:
        base = options or DEFAULT_OPTIONS
        self._options = base.merge(**changes) if changes else base
        self._history = history if history is not None else ValueHistory()
        self._closed = False

    def __enter__(self) -> Finput:
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def options(self) -> Options:
        return self._options

    @property
    def history(self) -> ValueHistory:
        self._check_open()
        return self._history

    def _check_open(self) -> None:
        if self._closed:
            raise FinputClosedError("this field binding has been destroyed")

    def set_options(self, **changes) -> Options:
        """Update options between edits and return the new options."""
        self._check_open()
        self._options = self._options.merge(**changes)
        return self._options

    def handle_key(self, text: str, caret_start: int, caret_end: int, key_info: KeyInfo) -> KeyOutcome:
        """Run a keystroke through classification, the edit rule and reformatting.

        Args:
            text: The field text before the keystroke.
            caret_start: Selection start (may be after *caret_end*).
            caret_end: Selection end.
            key_info: The keystroke.

        Returns:
            The outcome to apply to the field.
        """
        self._check_open()
        options = self._options
        start, end = sorted((caret_start, caret_end))
        state = EditState(text=text, caret_start=start, caret_end=end)

        action = get_action_type(key_info, options)
        new_state = evaluate(action, state, key_info, options, self._history)

        if not new_state.valid:
            logger.debug("Rejected key %r (%s) at %d:%d in %r", key_info.name, action.value, start, end, text)
            options.on_invalid_key(key_info)
            return KeyOutcome(action, valid=False, handled=True, text=text, caret=caret_end)

        if action == ActionType.UNKNOWN:
            return KeyOutcome(action, valid=True, handled=False, text=text, caret=caret_end)

        display, caret = self._regroup(new_state.text, new_state.caret_start)

        if action not in (ActionType.UNDO, ActionType.REDO):
            self._history.add_value(display)

        return KeyOutcome(action, valid=True, handled=True, text=display, caret=caret)

    def commit_edit(self, text: str, caret: int) -> tuple[str, int]:
        """Regroup and record an edit the host field made on its own.

        Word and line deletions, cut and similar editing commands of the
        host change the text without a keystroke passing through
        :meth:`handle_key`.  Their result is regrouped the same way and
        becomes the newest undo entry.

        Returns:
            The display string and the caret position to apply.
        """
        self._check_open()
        display, new_caret = self._regroup(text, caret)
        if display != text:
            logger.debug("Regrouped host edit %r -> %r", text, display)
        self._history.add_value(display)
        return display, new_caret

    def _regroup(self, text: str, caret: int) -> tuple[str, int]:
        display = format_partial(text, self._options)
        offset = compute_offset(text, display, caret, self._options)
        return display, clamp_caret(caret + offset, display)

    def set_value(self, value: str, not_null: bool = False) -> str | None:
        """Fully format *value* and commit it to the history.

        Args:
            value: Field text or raw numeric string.
            not_null: Ignore *value* when it is empty.

        Returns:
            The display string to put in the field, or None when ignored.
        """
        self._check_open()
        if not_null and not value:
            return None
        display = to_display(value, self._options)
        self._history.add_value(display)
        return display

    def raw_value(self, text: str) -> float:
        """The numeric value of the field text (``nan`` when empty)."""
        self._check_open()
        return to_raw(text, self._options)

    def set_raw_value(self, value: float | str | None) -> str | None:
        """Set the field from a number, free text, or None to clear it.

        Returns:
            The display string, or None when *value* has an unsupported type.
        """
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            text = from_number(value, self._options)
        elif isinstance(value, str):
            text = value
        elif value is None:
            text = ""
        else:
            logger.debug("Ignoring raw value of type %s", type(value).__name__)
            return None
        return self.set_value(parse_free_text(text, self._options))

    def paste(self, text: str) -> str | None:
        """Parse pasted text; returns None when it holds no number."""
        return self.set_value(parse_free_text(text, self._options), not_null=True)

    def blur(self, text: str) -> str:
        """Commit the field text when focus leaves it."""
        return self.set_value(text)

    def focus(self) -> tuple[int, int] | None:
        """Ask the focus hook which selection to apply, if any."""
        self._check_open()
        return self._options.on_focus()

    def destroy(self) -> None:
        """Release the history; the binding cannot be used afterwards."""
        if self._closed:
            return
        self._history.clear()
        self._closed = True
        logger.debug("Field binding destroyed")
