"""Search engine: filtering, debouncing and the selection state machine."""

from .announcer import ANNOUNCEMENTS, AnnouncementStrings, announce, get_announcement_strings
from .debounce import Debouncer
from .highlight import filter_names, highlight_match, match_spans
from .observable import Ref, to_ref
from .plural import plural_form
from .search import NameSearchController

__all__ = [
    "ANNOUNCEMENTS",
    "AnnouncementStrings",
    "Debouncer",
    "NameSearchController",
    "Ref",
    "announce",
    "filter_names",
    "get_announcement_strings",
    "highlight_match",
    "match_spans",
    "plural_form",
    "to_ref",
]
