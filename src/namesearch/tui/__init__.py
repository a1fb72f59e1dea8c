"""Textual host for the name search controller."""

from .app import NameSearchApp
from .click_outside import OutsideClickMixin, OutsideClickWatcher
from .widgets import NameSearch

__all__ = ["NameSearch", "NameSearchApp", "OutsideClickMixin", "OutsideClickWatcher"]
