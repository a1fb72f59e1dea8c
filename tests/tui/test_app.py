import pytest

from namesearch.config import SearchConfig
from namesearch.tui.app import NameSearchApp
from namesearch.tui.widgets import NameSearch


@pytest.mark.asyncio
async def test_app_records_selected_name():
    app = NameSearchApp(names=["Alice", "Bob", "Bobby"], config=SearchConfig(debounce_ms=0, locale="en"))

    async with app.run_test() as pilot:
        search = app.query_one(NameSearch)
        await pilot.pause()
        assert search.input.has_focus

        await pilot.press("b", "o")
        await pilot.pause(0.05)
        assert [m.original for m in search.controller.matches] == ["Bob", "Bobby"]

        await pilot.press("up", "enter")
        await pilot.pause()

        assert app.selected == "Bobby"
        assert search.controller.query == "Bobby"


@pytest.mark.asyncio
async def test_app_forwards_highlight_class():
    app = NameSearchApp(names=["Alice", "Bob"], config=SearchConfig(debounce_ms=0, highlight_class="hit"))

    async with app.run_test() as pilot:
        search = app.query_one(NameSearch)
        await pilot.pause()

        await pilot.press("b")
        await pilot.pause(0.05)

        assert search.controller.highlight_class == "hit"
        assert [m.highlighted for m in search.controller.matches] == ['<mark class="hit">B</mark>o<mark class="hit">b</mark>']
