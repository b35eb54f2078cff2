"""Demo Textual application for the finput numeric field."""

from __future__ import annotations

import math

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Input, Static

from finput.models import DEFAULT_OPTIONS, KeyInfo, Options
from finput.widgets.finput_input import FinputInput

_HELP = "Digits, - and the decimal separator edit the value.  k/m/b multiply.  ctrl+z/ctrl+y undo/redo.  Esc quits."


class FinputApp(App):
    """A single numeric field with a live readout of its raw value."""

    TITLE = "finput"
    CSS_PATH = "styles/app.tcss"

    BINDINGS = [
        Binding("escape", "quit", "Quit"),
    ]

    def __init__(self, options: Options = DEFAULT_OPTIONS, value: str | None = None) -> None:
        """Initialize the app.

        Args:
            options: Field options; the invalid-key hook is replaced by the app's.
            value: Initial field value.
        """
        super().__init__()
        self.options = options.merge(on_invalid_key=self._on_invalid_key)
        self.initial_value = value
        self.raw_text = ""
        self.status_text = ""

    def compose(self) -> ComposeResult:
        """Create the app layout."""
        yield Static(_HELP, id="help")
        yield FinputInput(self.initial_value, options=self.options, id="amount")
        yield Static("", id="raw")
        yield Static("", id="status")

    def on_mount(self) -> None:
        """Focus the field and show its initial value."""
        field = self.query_one("#amount", FinputInput)
        field.focus()
        self._show_raw(field)

    def on_input_changed(self, event: Input.Changed) -> None:
        """Refresh the raw value readout and clear the status line."""
        if isinstance(event.input, FinputInput):
            self._show_raw(event.input)
            self._set_status("")

    def _show_raw(self, field: FinputInput) -> None:
        raw = field.raw_value
        text = "(no value)" if math.isnan(raw) else repr(raw)
        self.raw_text = f"Raw value: {text}"
        self.query_one("#raw", Static).update(self.raw_text)

    def _set_status(self, text: str) -> None:
        self.status_text = text
        self.query_one("#status", Static).update(text)

    def _on_invalid_key(self, key_info: KeyInfo) -> None:
        self._set_status(f"Rejected key: {key_info.name}")
