"""
NameSearchController - incremental name search with keyboard navigation.

The controller owns four pieces of state (the raw query, the committed query,
the visibility flag and the highlighted index) and derives everything else
from them on demand:

    raw query --debounce--> committed query --filter--> matches
                                                           |
                  visibility flag + matches ---------> should_show_container
                                                           |
                                                   accessibility_text

Selecting a name writes back into the raw query, and any change of the match
list resets the highlighted index to -1.
"""

from typing import Callable, Optional, Sequence, Union

from namesearch.config import DEFAULT_HIGHLIGHT_CLASS
from namesearch.core.announcer import ANNOUNCEMENTS, AnnouncementStrings, announce
from namesearch.core.debounce import Debouncer
from namesearch.core.highlight import filter_names, normalize_query
from namesearch.core.observable import Ref, to_ref
from namesearch.domain.events import (
    EventBus,
    HighlightChanged,
    MatchesChanged,
    NameSelected,
    QueryCommitted,
    SearchCleared,
    VisibilityChanged,
)
from namesearch.domain.types import Key, KeyEvent, NameMatch
from namesearch.errors import InvalidHighlightIndexError
from namesearch.logger import get_logger

logger = get_logger("search")

OnSelect = Callable[[str], None]


class NameSearchController:
    """
    Debounced, case-insensitive name search over a host-owned candidate list.

    All handlers are synchronous and must be called from the event loop
    thread; ``handle_input`` additionally requires a running event loop
    because it schedules the debounce task.

    Example:
        ```python
        names = Ref(["Alice", "Bob", "Alex"])
        search = NameSearchController(names, debounce_ms=150, on_select=print)

        search.query = "al"
        search.handle_input()
        await asyncio.sleep(0.2)
        [m.original for m in search.matches]  # ["Alice", "Alex"]
        ```
    """

    def __init__(
        self,
        names: Union[Sequence[str], Ref[Sequence[str]]],
        debounce_ms: Union[int, Ref[int]] = 300,
        on_select: Optional[OnSelect] = None,
        event_bus: Optional[EventBus] = None,
        highlight_class: str = DEFAULT_HIGHLIGHT_CLASS,
        announcements: AnnouncementStrings = ANNOUNCEMENTS["ru"],
    ):
        """
        Initialize the controller.

        Args:
            names: Candidate names, or a Ref the host can reassign at any time
            debounce_ms: Debounce delay in milliseconds, or a Ref read on every keystroke
            on_select: Called with the selected name after every successful selection
            event_bus: Bus to publish state changes on (a private one is created if omitted)
            highlight_class: Class attribute of the highlight spans
            announcements: Locale strings for the accessibility text
        """
        self._names: Ref[Sequence[str]] = to_ref(names)
        self._debounce_ms: Ref[int] = to_ref(debounce_ms)
        self._on_select = on_select
        self.event_bus = event_bus or EventBus()
        self.highlight_class = highlight_class
        self.announcements = announcements

        self._query = ""
        self._committed_query = ""
        self._visible = False
        self._highlighted_index = -1
        self._debouncer = Debouncer("name-search")

        self._matches: tuple[NameMatch, ...] = ()
        # Snapshot of the inputs the cached matches were computed from. The
        # candidate list is compared by content so in-place host edits are seen.
        self._matches_key: tuple[str, tuple[str, ...]] = ("", ())

        self._names.subscribe(self._on_names_changed)

    # ------------------------------------------------------------------
    # Owned state
    # ------------------------------------------------------------------

    @property
    def query(self) -> str:
        """The raw text currently in the input."""
        return self._query

    @query.setter
    def query(self, value: str) -> None:
        self._query = value

    @property
    def committed_query(self) -> str:
        """The query the match list is filtered by."""
        return self._committed_query

    @property
    def visible(self) -> bool:
        """True when the suggestion panel has been requested open."""
        return self._visible

    @property
    def highlighted_index(self) -> int:
        self._sync_matches()
        return self._highlighted_index

    @highlighted_index.setter
    def highlighted_index(self, index: int) -> None:
        count = len(self.matches)
        if not -1 <= index < count:
            raise InvalidHighlightIndexError(index, count)
        self._set_highlighted(index)

    @property
    def names(self) -> Ref[Sequence[str]]:
        """The observed candidate list."""
        return self._names

    @property
    def debounce_ms(self) -> Ref[int]:
        """The observed debounce delay."""
        return self._debounce_ms

    @property
    def pending_commit(self) -> bool:
        """True while a debounced commit is waiting to fire."""
        return self._debouncer.pending

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def matches(self) -> tuple[NameMatch, ...]:
        """Candidates containing the committed query, in candidate order."""
        self._sync_matches()
        return self._matches

    @property
    def highlighted_match(self) -> Optional[NameMatch]:
        matches = self.matches
        if self._highlighted_index < 0:
            return None
        return matches[self._highlighted_index]

    @property
    def has_no_results(self) -> bool:
        return bool(self._committed_query.strip()) and not self.matches

    @property
    def should_show_container(self) -> bool:
        return self._visible and (bool(self.matches) or self.has_no_results)

    @property
    def accessibility_text(self) -> str:
        return announce(
            match_count=len(self.matches),
            committed_query=self._committed_query,
            show_container=self.should_show_container,
            has_no_results=self.has_no_results,
            strings=self.announcements,
        )

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def handle_input(self) -> None:
        """Open the panel and (re)schedule committing the raw query."""
        self._set_visible(True)
        delay = self._debounce_ms.value
        logger.debug(f"Scheduling commit of {self._query!r} in {delay} ms")
        self._debouncer.schedule(delay, self._commit_current_query)

    def handle_focus(self) -> None:
        """Re-open suggestions for text already in the input, without waiting for the debounce."""
        if not self._query.strip():
            return
        self._set_committed(self._query)
        self._set_visible(True)

    def hide_suggestions(self) -> None:
        """Close the panel. Does nothing when it is already closed."""
        if not self._visible:
            return
        self._set_visible(False)
        self._set_highlighted(-1)

    def select_name(self, name: str) -> None:
        """
        Accept ``name`` as the search result.

        The name does not have to be one of the candidates. The input and
        committed query become ``name``, the panel closes, the pending
        debounce is cancelled and ``on_select`` is called once.
        """
        self._debouncer.cancel()
        self._query = name
        self._set_committed(name)
        self._set_visible(False)
        self._set_highlighted(-1)
        logger.info(f"Selected name {name!r}")
        self.event_bus.publish(NameSelected(name=name))
        if self._on_select is not None:
            self._on_select(name)

    def clear_search(self) -> None:
        """Reset to the empty, closed state. ``on_select`` is not called."""
        self._debouncer.cancel()
        self._query = ""
        self._set_committed("")
        self._set_visible(False)
        self._set_highlighted(-1)
        self.event_bus.publish(SearchCleared())

    def handle_keydown(self, event: KeyEvent) -> None:
        """
        Drive the suggestion panel from the keyboard.

        Escape closes an open panel. While the panel is open and has
        matches, the arrow keys move the highlight cyclically, Enter selects
        the highlighted match and Tab closes the panel without consuming the
        key. Every other key, and every key while closed or empty, is left
        unhandled.
        """
        key = event.key

        if key == Key.ESCAPE:
            if self._visible:
                self.hide_suggestions()
                event.prevent_default()
            return

        matches = self.matches
        count = len(matches)
        if not count or not self._visible:
            return

        if key == Key.ARROW_DOWN:
            event.prevent_default()
            self._set_highlighted((self._highlighted_index + 1) % count)
        elif key == Key.ARROW_UP:
            event.prevent_default()
            if self._highlighted_index < 0:
                self._set_highlighted(count - 1)
            else:
                self._set_highlighted((self._highlighted_index - 1) % count)
        elif key == Key.ENTER:
            event.prevent_default()
            if self._highlighted_index >= 0:
                self.select_name(matches[self._highlighted_index].original)
        elif key == Key.TAB:
            self.hide_suggestions()

    def dispose(self) -> None:
        """Cancel pending work and stop observing the candidate list."""
        self._debouncer.cancel()
        self._names.unsubscribe(self._on_names_changed)
        logger.debug("Name search controller disposed")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _commit_current_query(self) -> None:
        self._set_committed(self._query)

    def _on_names_changed(self, new_names: Sequence[str], old_names: Sequence[str]) -> None:
        logger.debug(f"Candidate list changed ({len(old_names)} -> {len(new_names)} names)")
        self._sync_matches()

    def _set_committed(self, query: str) -> None:
        if query == self._committed_query:
            return
        self._committed_query = query
        logger.debug(f"Committed query {query!r}")
        self.event_bus.publish(QueryCommitted(query=query))
        self._sync_matches()

    def _set_visible(self, visible: bool) -> None:
        if visible == self._visible:
            return
        self._visible = visible
        self.event_bus.publish(VisibilityChanged(visible=visible))

    def _set_highlighted(self, index: int) -> None:
        if index == self._highlighted_index:
            return
        self._highlighted_index = index
        self.event_bus.publish(HighlightChanged(index=index))

    def _sync_matches(self) -> None:
        """Recompute the matches if their inputs changed, resetting the highlight when they differ."""
        key = (self._committed_query, tuple(self._names.value))
        if key == self._matches_key:
            return
        self._matches_key = key
        matches = filter_names(key[1], self._committed_query, self.highlight_class)
        if matches == self._matches:
            return
        self._matches = matches
        logger.debug(f"Match list changed: {len(matches)} match(es) for {self._committed_query!r}")
        self._set_highlighted(-1)
        self.event_bus.publish(MatchesChanged(matches=matches))
