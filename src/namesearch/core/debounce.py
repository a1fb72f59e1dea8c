"""
Debouncer - a single cancelable deferred callback.

Used by the search controller to delay committing the typed query until the
user stops typing.
"""

import asyncio
from typing import Callable

from namesearch.logger import get_logger

logger = get_logger("debounce")


class Debouncer:
    """
    Owns at most one pending one-shot callback.

    Scheduling replaces (and cancels) whatever was pending, so only the most
    recently scheduled callback can ever run. Cancellation is immediate: a
    cancelled or superseded callback never runs, even when its delay has
    already elapsed but the task has not been resumed yet.
    """

    def __init__(self, name: str = "debounce"):
        self._name = name
        self._task: asyncio.Task | None = None
        self._generation = 0

    @property
    def pending(self) -> bool:
        """True while a scheduled callback has neither run nor been cancelled."""
        return self._task is not None and not self._task.done()

    def schedule(self, delay_ms: float, callback: Callable[[], None]) -> None:
        """
        Run ``callback`` after ``delay_ms`` milliseconds, cancelling any pending callback.

        A zero or negative delay runs the callback on the next event loop tick.
        Must be called from a running event loop.
        """
        loop = asyncio.get_running_loop()
        self.cancel()
        self._generation += 1
        self._task = loop.create_task(
            self._run(self._generation, max(delay_ms, 0) / 1000, callback),
            name=f"{self._name}-{self._generation}",
        )

    def cancel(self) -> None:
        """Cancel the pending callback, if any."""
        # Bumping the generation also invalidates a task whose sleep has
        # already finished but which has not been resumed yet.
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _run(self, generation: int, delay: float, callback: Callable[[], None]) -> None:
        try:
            await asyncio.sleep(delay)
        except asyncio.CancelledError:
            return
        if generation != self._generation:
            logger.debug(f"{self._name}: dropping superseded callback")
            return
        self._task = None
        try:
            callback()
        except Exception:
            logger.exception(f"{self._name}: deferred callback failed")
