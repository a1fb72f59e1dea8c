"""Event bus used by the controller to expose its state changes.

Handler contract:
    Handlers MUST be synchronous. The controller publishes from inside key,
    input and timer handlers, and every subscriber runs before the publishing
    call returns, so a host always sees state that is consistent with the
    event it is handling. Hosts that need async work schedule it themselves
    with asyncio.create_task().
"""

import asyncio
from typing import Callable, Type, TypeVar

from namesearch.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

EventHandler = Callable[[Event], None]


class EventBus:
    """Publish/subscribe registry keyed by event type.

    Subscribing to a base class (``Event`` included) receives every subclass
    published after it, so a host can observe all state changes with one
    handler.

    Thread safety:
        Not thread-safe. All calls are expected on the event loop thread.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[EventHandler]] = {}

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Register ``handler`` for ``event_type`` and its subclasses.

        Subscribing the same handler twice is a no-op.

        Raises:
            TypeError: If handler is a coroutine function
        """
        if asyncio.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {handler.__name__} is a coroutine function; "
                f"schedule async work with asyncio.create_task() instead."
            )

        handlers = self._handlers.setdefault(event_type, [])
        if handler not in handlers:
            handlers.append(handler)  # type: ignore[arg-type]
            logger.debug(f"Subscribed handler for {event_type.__name__}")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """Remove ``handler``; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)  # type: ignore[arg-type]
            logger.debug(f"Unsubscribed handler for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Call every handler registered for the event's type or one of its bases.

        Handlers run in MRO order (most specific type first), then in
        subscription order. A failing handler is logged and does not prevent
        the remaining handlers from running.
        """
        event_name = type(event).__name__
        for event_type in type(event).__mro__:
            # Copy so handlers may unsubscribe themselves while being called
            for handler in list(self._handlers.get(event_type, ())):
                try:
                    handler(event)
                except Exception:
                    logger.exception(f"Error in event handler for {event_name}")
