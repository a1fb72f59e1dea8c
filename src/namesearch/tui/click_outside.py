"""
Outside-click detection for Textual widgets.

Textual has no document-level pointer listener, so the host app forwards
every mouse-down to an OutsideClickWatcher, which calls back the watched
widgets that the press landed outside of.
"""

from typing import Callable, Optional

from textual import events
from textual.errors import NoWidget
from textual.widget import Widget

from namesearch.logger import get_logger

logger = get_logger("click_outside")


class OutsideClickWatcher:
    """Registry of widgets that want to know about presses outside their region."""

    def __init__(self):
        self._watched: dict[Widget, Callable[[], None]] = {}

    def watch(self, widget: Widget, callback: Callable[[], None]) -> None:
        """Call ``callback`` whenever a press lands outside ``widget``.

        Widgets must call ``unwatch`` when they are unmounted.
        """
        self._watched[widget] = callback
        logger.debug(f"Watching outside clicks for {widget!r}")

    def unwatch(self, widget: Widget) -> None:
        if self._watched.pop(widget, None) is not None:
            logger.debug(f"Stopped watching outside clicks for {widget!r}")

    def is_watching(self, widget: Widget) -> bool:
        return widget in self._watched

    def dispatch(self, target: Optional[Widget]) -> None:
        """Notify every watched widget that neither is nor contains ``target``."""
        for widget, callback in list(self._watched.items()):
            if target is not None and (target is widget or widget in target.ancestors):
                continue
            callback()


class OutsideClickMixin:
    """Mixin for App subclasses that routes mouse-down events to an OutsideClickWatcher."""

    outside_clicks: OutsideClickWatcher

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.outside_clicks = OutsideClickWatcher()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        # Presses reach the app after bubbling up from the widget under the pointer.
        try:
            target, _ = self.screen.get_widget_at(event.screen_x, event.screen_y)  # type: ignore[attr-defined]
        except NoWidget:
            target = None
        self.outside_clicks.dispatch(target)
