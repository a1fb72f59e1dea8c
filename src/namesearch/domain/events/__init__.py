"""Event system for observing name search state.

The controller publishes events whenever its owned state changes, and hosts
(the Textual widget, tests) subscribe to them instead of polling.

Example:
    ```python
    from namesearch.domain.events import EventBus, MatchesChanged

    event_bus = EventBus()

    def handle_matches(event: MatchesChanged):
        print([match.original for match in event.matches])

    event_bus.subscribe(MatchesChanged, handle_matches)
    ```
"""

from .bus import EventBus
from .types import (
    Event,
    HighlightChanged,
    MatchesChanged,
    NameSelected,
    QueryCommitted,
    SearchCleared,
    VisibilityChanged,
)

__all__ = [
    "EventBus",
    "Event",
    "HighlightChanged",
    "MatchesChanged",
    "NameSelected",
    "QueryCommitted",
    "SearchCleared",
    "VisibilityChanged",
]
