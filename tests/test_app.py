"""Tests for the demo FinputApp."""

from __future__ import annotations

from finput.app import FinputApp
from finput.models import Options
from finput.widgets.finput_input import FinputInput


class TestFinputApp:
    """Tests for the demo app wiring."""

    async def test_field_is_focused(self):
        app = FinputApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.focused is app.query_one("#amount", FinputInput)

    async def test_initial_value_and_readout(self):
        app = FinputApp(value="1234.5")
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.query_one("#amount", FinputInput).value == "1,234.50"
            assert "1234.5" in app.raw_text

    async def test_empty_readout(self):
        app = FinputApp()
        async with app.run_test() as pilot:
            await pilot.pause()
            assert "no value" in app.raw_text

    async def test_readout_follows_typing(self):
        app = FinputApp()
        async with app.run_test() as pilot:
            await pilot.press("2", "k")
            await pilot.pause()
            assert "2000.0" in app.raw_text

    async def test_rejected_key_shown(self):
        app = FinputApp()
        async with app.run_test() as pilot:
            await pilot.press("x")
            await pilot.pause()
            assert "Rejected key: x" in app.status_text

    async def test_options_are_used(self):
        app = FinputApp(options=Options(scale=0))
        async with app.run_test() as pilot:
            await pilot.press("5", ".")
            await pilot.pause()
            assert app.query_one("#amount", FinputInput).value == "5"
