"""Domain types and events for name search."""

from .types import Key, KeyEvent, KeyPress, NameMatch

__all__ = ["Key", "KeyEvent", "KeyPress", "NameMatch"]
