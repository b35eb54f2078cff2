"""Shared test fixtures."""

from __future__ import annotations

import pytest

from finput.history import ValueHistory
from finput.models import EditState, Options


@pytest.fixture
def options() -> Options:
    """Default options: '.' decimal, ',' thousands, scale 2, fixed."""
    return Options()


@pytest.fixture
def euro_options() -> Options:
    """Continental style: ',' decimal, '.' thousands."""
    return Options(decimal=",", thousands=".")


@pytest.fixture
def history() -> ValueHistory:
    """An empty value history."""
    return ValueHistory()


def make_state(text: str, start: int, end: int | None = None) -> EditState:
    """An EditState with a collapsed caret unless *end* is given."""
    return EditState(text=text, caret_start=start, caret_end=start if end is None else end)
