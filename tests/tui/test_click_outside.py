from unittest.mock import MagicMock

import pytest
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.widgets import Static

from namesearch.tui.click_outside import OutsideClickMixin, OutsideClickWatcher


class _ClickApp(OutsideClickMixin, App):
    def compose(self) -> ComposeResult:
        with Vertical(id="watched"):
            yield Static("inside", id="inside")
        yield Static("outside", id="outside")


@pytest.mark.asyncio
async def test_dispatch_skips_target_and_its_ancestors():
    app = _ClickApp()
    callback = MagicMock()

    async with app.run_test():
        watched = app.query_one("#watched")
        app.outside_clicks.watch(watched, callback)

        app.outside_clicks.dispatch(app.query_one("#inside"))
        app.outside_clicks.dispatch(watched)
        callback.assert_not_called()

        app.outside_clicks.dispatch(app.query_one("#outside"))
        app.outside_clicks.dispatch(None)
        assert callback.call_count == 2


@pytest.mark.asyncio
async def test_mouse_down_outside_triggers_callback():
    app = _ClickApp()
    callback = MagicMock()

    async with app.run_test() as pilot:
        app.outside_clicks.watch(app.query_one("#watched"), callback)

        await pilot.click("#inside")
        callback.assert_not_called()

        await pilot.click("#outside")
        callback.assert_called_once_with()


def test_unwatch_stops_notifications():
    watcher = OutsideClickWatcher()
    widget = Static("x")
    callback = MagicMock()

    watcher.watch(widget, callback)
    assert watcher.is_watching(widget)
    watcher.unwatch(widget)
    watcher.unwatch(widget)
    watcher.dispatch(None)

    assert not watcher.is_watching(widget)
    callback.assert_not_called()
