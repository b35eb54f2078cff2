"""Textual widgets for numeric entry."""

from __future__ import annotations

from finput.widgets.finput_input import FinputInput

__all__ = ["FinputInput"]
