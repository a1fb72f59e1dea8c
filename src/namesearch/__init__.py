"""Incremental name search with debounced filtering and keyboard navigation."""

from namesearch.core import NameSearchController, Ref, plural_form
from namesearch.domain.types import Key, KeyPress, NameMatch

__version__ = "0.1.0"

__all__ = ["Key", "KeyPress", "NameMatch", "NameSearchController", "Ref", "plural_form"]
