"""Numeric input widget with live thousands grouping, shortcuts and undo."""

from __future__ import annotations

from textual import events
from textual.widgets import Input
from textual.widgets.input import Selection

from finput.controller import Finput
from finput.keys import key_info_from_event
from finput.models import Options


class FinputInput(Input):
    """An Input that edits a formatted number.

    Every keystroke goes through a :class:`~finput.controller.Finput`:
    digits, sign, decimal separator, shortcut letters (``k``, ``m``, ``b``),
    backspace/delete and undo/redo are applied by the engine and the value is
    regrouped as you type.  Navigation keys pass through to the default Input
    handler; any other printable key is rejected.  Input's deletion and
    clipboard bindings are regrouped and recorded too.  On blur the value
    is fully formatted (e.g. ``1,234.50``).
    """

    def __init__(
        self,
        value: str | None = None,
        *,
        options: Options | None = None,
        **kwargs,
    ) -> None:
        """Initialize with *options* (defaults: ``.`` decimal, ``,`` thousands, scale 2)."""
        finput = Finput(options)
        kwargs.setdefault("placeholder", _placeholder_for(finput.options))
        initial = finput.set_value(value, not_null=True) if value else None
        super().__init__(value=initial or "", **kwargs)
        self._finput = finput

    @property
    def finput(self) -> Finput:
        """The editing binding behind this field."""
        return self._finput

    @property
    def options(self) -> Options:
        return self._finput.options

    def set_options(self, **changes) -> Options:
        """Update options and reformat the current value with them."""
        options = self._finput.set_options(**changes)
        self.value = self._finput.set_value(self.value)
        return options

    @property
    def raw_value(self) -> float:
        """The numeric value; ``nan`` when the field is empty."""
        return self._finput.raw_value(self.value)

    @raw_value.setter
    def raw_value(self, value: float | str | None) -> None:
        display = self._finput.set_raw_value(value)
        if display is not None:
            self.value = display
            self.cursor_position = len(display)

    async def _on_key(self, event: events.Key) -> None:
        """Route the key through the editing engine."""
        selection = self.selection
        outcome = self._finput.handle_key(
            self.value, selection.start, selection.end, key_info_from_event(event)
        )

        if not outcome.handled:
            await super()._on_key(event)
            return

        event.prevent_default()
        event.stop()
        if not outcome.valid:
            self.app.bell()
            return

        self.value = outcome.text
        self.cursor_position = outcome.caret

    def _on_paste(self, event: events.Paste) -> None:
        """Replace the value with the number found in the pasted text."""
        event.prevent_default()
        event.stop()
        display = self._finput.paste(event.text)
        if display is not None:
            self.value = display
            self.cursor_position = len(display)

    def action_paste(self) -> None:
        """Paste the number found in the app clipboard, as a terminal paste would."""
        display = self._finput.paste(self.app.clipboard)
        if display is not None:
            self.value = display
            self.cursor_position = len(display)

    # Input's own editing bindings (ctrl+w, ctrl+u, ctrl+f, ctrl+k, ctrl+d,
    # ctrl+x) only ever remove text; regroup and record what they leave.

    def action_delete_left(self) -> None:
        super().action_delete_left()
        self._commit_host_edit()

    def action_delete_right(self) -> None:
        super().action_delete_right()
        self._commit_host_edit()

    def action_delete_left_word(self) -> None:
        super().action_delete_left_word()
        self._commit_host_edit()

    def action_delete_right_word(self) -> None:
        super().action_delete_right_word()
        self._commit_host_edit()

    def action_delete_left_all(self) -> None:
        super().action_delete_left_all()
        self._commit_host_edit()

    def action_delete_right_all(self) -> None:
        super().action_delete_right_all()
        self._commit_host_edit()

    def action_cut(self) -> None:
        super().action_cut()
        self._commit_host_edit()

    def _commit_host_edit(self) -> None:
        display, caret = self._finput.commit_edit(self.value, self.cursor_position)
        if display != self.value:
            self.value = display
        self.cursor_position = caret

    def _on_focus(self, event: events.Focus) -> None:
        """Apply the selection requested by the ``on_focus`` hook."""
        if self._finput.closed:
            return
        selection = self._finput.focus()
        if selection is not None:
            # Input's own focus handler runs after this one and moves the cursor.
            self.call_next(self._select, *selection)

    def _select(self, start: int, end: int) -> None:
        length = len(self.value)
        self.selection = Selection(min(start, length), min(end, length))

    def _on_blur(self, event: events.Blur) -> None:
        """Fully format the value when the field loses focus."""
        if self._finput.closed:
            return
        formatted = self._finput.blur(self.value)
        if formatted != self.value:
            self.value = formatted

    def on_unmount(self) -> None:
        """Release the editing binding with the widget."""
        self._finput.destroy()


def _placeholder_for(options: Options) -> str:
    """Placeholder text showing the expected format, e.g. ``'0.00'``."""
    if options.scale == 0:
        return "0"
    return f"0{options.decimal}{'0' * options.scale}"
