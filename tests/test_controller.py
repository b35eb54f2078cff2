"""Tests for the Finput field binding."""

import math

import pytest

from finput.controller import Finput
from finput.errors import FinputClosedError
from finput.models import ActionType, KeyInfo, Options


def _type(finput: Finput, text: str, caret: int, *keys: str) -> tuple[str, int]:
    """Feed keys one by one, applying handled outcomes like a host field would."""
    for key in keys:
        outcome = finput.handle_key(text, caret, caret, KeyInfo.parse(key))
        if outcome.handled and outcome.valid:
            text, caret = outcome.text, outcome.caret
    return text, caret


class TestHandleKey:
    """Tests for the keystroke pipeline."""

    def test_typing_groups_thousands(self):
        assert _type(Finput(), "", 0, "1", "2", "3", "4") == ("1,234", 5)

    def test_caret_follows_digit_after_regroup(self):
        assert _type(Finput(), "1,234", 1, "5") == ("15,234", 2)

    def test_delete_skips_separator(self):
        outcome = Finput().handle_key("1,234", 1, 1, KeyInfo("delete"))
        assert outcome.valid
        assert outcome.text == "134"
        assert outcome.caret == 1

    def test_backspace_over_separator(self):
        outcome = Finput().handle_key("1,234", 2, 2, KeyInfo("backspace"))
        assert outcome.text == "1,234"
        assert outcome.caret == 1

    def test_shortcut_moves_caret_to_end(self):
        outcome = Finput().handle_key("", 0, 0, KeyInfo("k"))
        assert outcome.action == ActionType.SHORTCUT
        assert outcome.text == "1,000"
        assert outcome.caret == 5

    def test_rejected_key_calls_hook(self):
        rejected = []
        finput = Finput(on_invalid_key=rejected.append)
        outcome = finput.handle_key("12", 2, 2, KeyInfo("x"))
        assert not outcome.valid
        assert outcome.handled
        assert outcome.text == "12"
        assert rejected == [KeyInfo("x")]

    def test_navigation_key_passes_through(self):
        outcome = Finput().handle_key("12", 2, 2, KeyInfo("left"))
        assert outcome.valid
        assert not outcome.handled
        assert outcome.action == ActionType.UNKNOWN

    def test_reversed_selection(self):
        outcome = Finput().handle_key("123", 3, 0, KeyInfo("5"))
        assert outcome.text == "5"

    def test_records_history(self):
        finput = Finput()
        _type(finput, "", 0, "1", "2")
        assert finput.history.current == "12"
        assert len(finput.history) == 3

    def test_rejected_key_not_recorded(self):
        finput = Finput()
        _type(finput, "", 0, "1", "x")
        assert len(finput.history) == 2

    def test_undo_redo(self):
        finput = Finput()
        text, caret = _type(finput, "", 0, "1", "2", "3")
        text, caret = _type(finput, text, caret, "ctrl+z", "ctrl+z")
        assert (text, caret) == ("1", 1)
        text, caret = _type(finput, text, caret, "ctrl+y")
        assert text == "12"

    def test_typing_after_undo_discards_redo(self):
        finput = Finput()
        text, caret = _type(finput, "", 0, "1", "2", "3", "ctrl+z", "ctrl+z", "5")
        assert text == "15"
        text, caret = _type(finput, text, caret, "ctrl+y")
        assert text == "15"
        text, caret = _type(finput, text, caret, "ctrl+z")
        assert text == "1"

    def test_undo_not_recorded(self):
        finput = Finput()
        text, caret = _type(finput, "", 0, "1", "2", "ctrl+z")
        assert len(finput.history) == 3
        assert finput.history.can_redo

    def test_live_options(self):
        finput = Finput()
        finput.set_options(decimal=",", thousands=".")
        assert _type(finput, "", 0, "1", "2", "3", "4", ",", "5") == ("1.234,5", 7)

    def test_fractional_shortcut_without_decimals(self):
        finput = Finput(scale=0, shortcuts={"h": 1.5})
        assert finput.handle_key("", 0, 0, KeyInfo("h")).text == "1"
        assert finput.handle_key("3", 1, 1, KeyInfo("h")).text == "4"


class TestCommitEdit:
    """Tests for edits made by the host field outside handle_key."""

    def test_dangling_separator_removed(self):
        finput = Finput()
        assert finput.commit_edit("1,234,", 6) == ("1,234", 5)
        assert finput.history.current == "1,234"

    def test_regroups_after_cut(self):
        finput = Finput()
        assert finput.commit_edit("1,23", 0) == ("123", 0)

    def test_leading_zeros_removed(self):
        assert Finput().commit_edit("0,005", 5) == ("5", 1)

    def test_recorded_for_undo(self):
        finput = Finput()
        text, caret = _type(finput, "", 0, "1", "2", "3", "4")
        text, caret = finput.commit_edit("", 0)
        assert _type(finput, text, caret, "ctrl+z") == ("1,234", 5)


class TestValues:
    """Tests for programmatic value access."""

    def test_set_value_formats_and_records(self):
        finput = Finput()
        assert finput.set_value("1234.5") == "1,234.50"
        assert finput.history.current == "1,234.50"

    def test_set_value_not_null_ignores_empty(self):
        assert Finput().set_value("", not_null=True) is None

    def test_set_value_empty_clears(self):
        assert Finput().set_value("") == ""

    def test_raw_value(self):
        assert Finput().raw_value("1,234.50") == 1234.5

    def test_raw_value_of_empty_field(self):
        assert math.isnan(Finput().raw_value(""))

    def test_set_raw_value_number(self):
        assert Finput().set_raw_value(1234.5) == "1,234.50"

    def test_set_raw_value_text(self):
        assert Finput().set_raw_value("12k") == "12,000.00"

    def test_set_raw_value_none_clears(self):
        assert Finput().set_raw_value(None) == ""

    def test_set_raw_value_non_finite_clears(self):
        assert Finput().set_raw_value(math.inf) == ""

    def test_set_raw_value_unsupported_type(self):
        assert Finput().set_raw_value([1]) is None

    def test_paste(self):
        assert Finput().paste("2.5m") == "2,500,000.00"

    def test_paste_without_number(self):
        assert Finput().paste("abc") is None

    def test_blur(self):
        assert Finput().blur("12") == "12.00"

    def test_focus_hook(self):
        finput = Finput(on_focus=lambda: (0, 3))
        assert finput.focus() == (0, 3)

    def test_focus_without_hook(self):
        assert Finput().focus() is None


class TestLifecycle:
    """Tests for destroying the binding."""

    def test_destroy_releases_history(self):
        finput = Finput()
        history = finput.history
        _type(finput, "", 0, "1")
        finput.destroy()
        assert finput.closed
        assert len(history) == 1

    def test_use_after_destroy(self):
        finput = Finput()
        finput.destroy()
        with pytest.raises(FinputClosedError):
            finput.handle_key("", 0, 0, KeyInfo("1"))
        with pytest.raises(FinputClosedError):
            finput.set_value("1")
        with pytest.raises(FinputClosedError):
            finput.raw_value("1")
        with pytest.raises(FinputClosedError):
            finput.commit_edit("1", 1)

    def test_destroy_twice(self):
        finput = Finput()
        finput.destroy()
        finput.destroy()
        assert finput.closed

    def test_context_manager(self):
        with Finput() as finput:
            _type(finput, "", 0, "1")
        assert finput.closed

    def test_context_manager_on_error(self):
        with pytest.raises(RuntimeError):
            with Finput() as finput:
                raise RuntimeError("boom")
        assert finput.closed

    def test_options_override(self):
        finput = Finput(Options(scale=3), fixed=False)
        assert finput.options.scale == 3
        assert finput.options.fixed is False
