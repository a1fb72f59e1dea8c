"""
NameSearchApp - Textual application hosting a single NameSearch widget.
"""

from typing import Sequence, Union

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header, Static

from namesearch.config import SearchConfig
from namesearch.core.observable import Ref
from namesearch.logger import get_logger
from namesearch.tui.click_outside import OutsideClickMixin
from namesearch.tui.widgets import NameSearch

logger = get_logger("app")

SAMPLE_NAMES = ["Alice", "Bob", "Alex", "Алина", "Борис"]


class NameSearchApp(OutsideClickMixin, App):
    """
    Demo application: a name search box and the last selected name.

    Layout:
    ┌──────────────────────────────┐
    │            Header            │
    ├──────────────────────────────┤
    │ [ search input         ] [✕] │
    │ ┌ suggestions ─────────────┐ │
    │ └──────────────────────────┘ │
    │ Selected: ...                │
    ├──────────────────────────────┤
    │            Footer            │
    └──────────────────────────────┘
    """

    TITLE = "Name search"

    CSS = """
    #main {
        padding: 1 2;
    }
    #selected {
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        names: Union[Sequence[str], Ref[Sequence[str]]] = SAMPLE_NAMES,
        config: SearchConfig | None = None,
    ):
        super().__init__()
        self.config = config or SearchConfig()
        self.names = names if isinstance(names, Ref) else Ref(list(names))
        self.selected: str | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="main"):
            yield NameSearch(
                self.names,
                debounce_ms=self.config.debounce_ms,
                locale=self.config.locale,
                highlight_class=self.config.highlight_class,
                id="name-search",
            )
            yield Static("", id="selected")
        yield Footer()

    def on_mount(self) -> None:
        logger.info(f"Name search started with {len(self.names.value)} names")
        self.query_one(NameSearch).input.focus()

    def on_name_search_selected(self, event: NameSearch.Selected) -> None:
        self.selected = event.value
        self.query_one("#selected", Static).update(Text(f"Selected: {event.value}"))
