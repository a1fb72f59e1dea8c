"""Value types shared by the search engine and its hosts."""

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True)
class NameMatch:
    """A candidate that matched the committed query.

    Attributes:
        original: The candidate exactly as supplied by the host
        highlighted: ``original`` with every occurrence of the query wrapped in a ``<mark>`` span
    """

    original: str
    highlighted: str


class Key:
    """Key identifiers understood by the keyboard state machine."""

    ESCAPE = "Escape"
    ARROW_DOWN = "ArrowDown"
    ARROW_UP = "ArrowUp"
    ENTER = "Enter"
    TAB = "Tab"


@runtime_checkable
class KeyEvent(Protocol):
    """Anything with a key identifier that can have its default action suppressed."""

    key: str

    def prevent_default(self) -> None: ...


@dataclass
class KeyPress:
    """Concrete key event used by hosts that have no event object of their own."""

    key: str
    default_prevented: bool = field(default=False, init=False)

    def prevent_default(self) -> None:
        self.default_prevented = True
