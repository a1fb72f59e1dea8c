"""
Observable value cells for host-owned inputs.

The candidate list and the debounce delay belong to the host and can change
at any time. Wrapping them in a ``Ref`` lets the controller read the current
value when it needs it and react when the host assigns a new one.
"""

from typing import Callable, Generic, TypeVar, Union

from namesearch.logger import get_logger

logger = get_logger("observable")

T = TypeVar("T")

Listener = Callable[[T, T], None]


class Ref(Generic[T]):
    """A mutable cell that notifies listeners when a different value is assigned."""

    def __init__(self, value: T):
        self._value = value
        self._listeners: list[Listener] = []

    def __repr__(self) -> str:
        return f"Ref({self._value!r})"

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        old_value = self._value
        self._value = new_value
        if new_value is old_value or new_value == old_value:
            return
        for listener in list(self._listeners):
            listener(new_value, old_value)

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener(new, old)`` after every assignment of a different value."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)


def to_ref(value: Union[T, Ref[T]]) -> Ref[T]:
    """Return ``value`` unchanged if it is already a Ref, otherwise wrap it in one."""
    if isinstance(value, Ref):
        return value
    return Ref(value)
