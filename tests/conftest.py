"""Shared fixtures for name search tests."""

import asyncio
from unittest.mock import MagicMock

import pytest

from namesearch.core.observable import Ref
from namesearch.core.search import NameSearchController
from namesearch.domain.events import Event, EventBus

NAMES = ["Alice", "Bob", "Alex", "Алина", "Борис"]


async def settle(delay_ms: int = 0) -> None:
    """Let a debounce of ``delay_ms`` elapse and its task run."""
    await asyncio.sleep(delay_ms / 1000 + 0.02)


@pytest.fixture
def names() -> Ref:
    return Ref(list(NAMES))


@pytest.fixture
def debounce_ms() -> Ref:
    return Ref(0)


@pytest.fixture
def on_select() -> MagicMock:
    return MagicMock()


@pytest.fixture
def event_log() -> list:
    return []


@pytest.fixture
def controller(names, debounce_ms, on_select, event_log) -> NameSearchController:
    bus = EventBus()
    bus.subscribe(Event, event_log.append)
    search = NameSearchController(names, debounce_ms=debounce_ms, on_select=on_select, event_bus=bus)
    return search


async def type_query(controller: NameSearchController, text: str, delay_ms: int = 0) -> None:
    """Simulate typing ``text`` and waiting out the debounce."""
    controller.query = text
    controller.handle_input()
    await settle(delay_ms)
