"""Event types published by the name search controller.

Hosts subscribe to these to re-render when controller state changes.
"""

import time
from dataclasses import dataclass, field

from namesearch.domain.types import NameMatch


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class QueryCommitted(Event):
    """Published when the committed query (the one used for filtering) changes."""

    query: str
    """The new committed query, untrimmed."""


@dataclass
class MatchesChanged(Event):
    """Published when the match list is recomputed to a different result."""

    matches: tuple[NameMatch, ...]
    """The new match list, in candidate order."""


@dataclass
class VisibilityChanged(Event):
    """Published when the suggestion panel is requested open or closed."""

    visible: bool


@dataclass
class HighlightChanged(Event):
    """Published when the keyboard-highlighted suggestion moves."""

    index: int
    """New highlighted index; -1 means nothing is highlighted."""


@dataclass
class NameSelected(Event):
    """Published after a name is selected, explicitly or with Enter."""

    name: str


@dataclass
class SearchCleared(Event):
    """Published after the search has been reset to its empty state."""
