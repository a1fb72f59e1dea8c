"""
NameSearch - search box with a suggestion panel backed by NameSearchController.
"""

from __future__ import annotations

from typing import Any, Sequence, Union

from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Input, OptionList, Static
from textual.widgets.option_list import Option

from namesearch.config import DEFAULT_HIGHLIGHT_CLASS
from namesearch.core.announcer import get_announcement_strings
from namesearch.core.observable import Ref
from namesearch.core.search import NameSearchController
from namesearch.domain.events import Event
from namesearch.domain.types import Key, KeyPress
from namesearch.logger import get_logger
from namesearch.tui.click_outside import OutsideClickMixin
from namesearch.tui.formatters import match_to_text

logger = get_logger("name_search")

# Textual key names -> identifiers understood by the controller
TEXTUAL_KEYS = {
    "escape": Key.ESCAPE,
    "down": Key.ARROW_DOWN,
    "up": Key.ARROW_UP,
    "enter": Key.ENTER,
    "tab": Key.TAB,
}


class SuggestionList(OptionList, can_focus=False):
    """Suggestion list that never takes focus away from the search input."""


class NameSearch(Vertical):
    """
    Search input with a drop-down of matching names.

    Typing filters the names after the debounce delay; Up/Down move the
    highlight, Enter picks the highlighted name, Escape closes the panel and
    Tab closes it and moves focus on. Clicking a suggestion selects it and
    clicking anywhere outside the widget closes the panel (when the app uses
    OutsideClickMixin).
    """

    DEFAULT_CSS = """
    NameSearch {
        height: auto;
    }
    NameSearch #name-search-row {
        height: auto;
    }
    NameSearch #name-search-input {
        width: 1fr;
    }
    NameSearch #name-search-clear {
        min-width: 5;
        width: 5;
    }
    NameSearch #name-search-panel {
        height: auto;
        max-height: 12;
        border: round $accent;
    }
    NameSearch SuggestionList {
        height: auto;
        max-height: 10;
        border: none;
    }
    NameSearch #name-search-empty {
        color: $text-muted;
        padding: 0 1;
    }
    NameSearch #name-search-status {
        color: $text-muted;
        height: auto;
    }
    """

    class Selected(Message):
        """Posted after a name is selected."""

        def __init__(self, name_search: NameSearch, name: str) -> None:
            super().__init__()
            self.name_search = name_search
            self.value = name

        @property
        def control(self) -> NameSearch:
            return self.name_search

    def __init__(
        self,
        names: Union[Sequence[str], Ref[Sequence[str]]],
        debounce_ms: Union[int, Ref[int]] = 300,
        locale: str = "ru",
        placeholder: str = "Search by name",
        highlight_class: str = DEFAULT_HIGHLIGHT_CLASS,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._placeholder = placeholder
        self._announcements = get_announcement_strings(locale)
        self.controller = NameSearchController(
            names=names,
            debounce_ms=debounce_ms,
            on_select=self._on_name_selected,
            highlight_class=highlight_class,
            announcements=self._announcements,
        )
        self._rendered_matches: tuple = ()

    def compose(self) -> ComposeResult:
        with Horizontal(id="name-search-row"):
            yield Input(placeholder=self._placeholder, id="name-search-input")
            yield Button("✕", id="name-search-clear")
        with Vertical(id="name-search-panel"):
            yield SuggestionList(id="name-search-suggestions")
            yield Static(self._announcements.nothing_found, id="name-search-empty")
        yield Static("", id="name-search-status")

    def on_mount(self) -> None:
        self.controller.event_bus.subscribe(Event, self._on_controller_event)
        if isinstance(self.app, OutsideClickMixin):
            self.app.outside_clicks.watch(self, self.controller.hide_suggestions)
        self._refresh_view()

    def on_unmount(self) -> None:
        self.controller.event_bus.unsubscribe(Event, self._on_controller_event)
        if isinstance(self.app, OutsideClickMixin):
            self.app.outside_clicks.unwatch(self)
        self.controller.dispose()

    @property
    def input(self) -> Input:
        return self.query_one("#name-search-input", Input)

    @property
    def suggestions(self) -> SuggestionList:
        return self.query_one("#name-search-suggestions", SuggestionList)

    @on(Input.Changed, "#name-search-input")
    def _handle_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.controller.query = event.value
        self.controller.handle_input()

    def on_descendant_focus(self, event: events.DescendantFocus) -> None:
        if self.input.has_focus:
            self.controller.handle_focus()

    def on_key(self, event: events.Key) -> None:
        key = TEXTUAL_KEYS.get(event.key)
        if key is None or not self.input.has_focus:
            return
        press = KeyPress(key)
        self.controller.handle_keydown(press)
        if press.default_prevented:
            event.prevent_default()
            event.stop()

    @on(OptionList.OptionSelected, "#name-search-suggestions")
    def _handle_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        matches = self.controller.matches
        if 0 <= event.option_index < len(matches):
            self.controller.select_name(matches[event.option_index].original)
        self.input.focus()

    @on(Button.Pressed, "#name-search-clear")
    def _handle_clear_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.controller.clear_search()
        self.input.focus()

    def _on_name_selected(self, name: str) -> None:
        self.post_message(self.Selected(self, name))

    def _on_controller_event(self, event: Event) -> None:
        if self.is_mounted:
            self._refresh_view()

    def _refresh_view(self) -> None:
        controller = self.controller
        input_widget = self.input
        if input_widget.value != controller.query:
            # Programmatic writes (selection, clearing) must not re-trigger the debounce
            with input_widget.prevent(Input.Changed):
                input_widget.value = controller.query

        matches = controller.matches
        suggestions = self.suggestions
        if suggestions.option_count != len(matches) or self._rendered_matches != matches:
            suggestions.clear_options()
            suggestions.add_options(
                Option(match_to_text(match, controller.committed_query), id=f"match-{index}")
                for index, match in enumerate(matches)
            )
            self._rendered_matches = matches
        index = controller.highlighted_index
        suggestions.highlighted = index if index >= 0 else None

        self.query_one("#name-search-panel").display = controller.should_show_container
        suggestions.display = bool(matches)
        self.query_one("#name-search-empty", Static).display = controller.has_no_results
        self.query_one("#name-search-status", Static).update(controller.accessibility_text)