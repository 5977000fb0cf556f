"""Per-section tracking of in-flight AI requests.

Each editor section that can trigger an AI request has a busy key
(``summary``, ``exp-<entry id>``, ``skills``, ``voice``).  Different keys
run concurrently; a second request for a key that is still in flight is
refused instead of running twice against the same field.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

__all__ = ["BusyTracker", "SectionBusyError", "experience_key"]

T = TypeVar("T")


class SectionBusyError(RuntimeError):
    """Raised when a request is started for a key that is already busy."""

    def __init__(self, key: str) -> None:
        super().__init__(f"Section {key!r} is already busy")
        self.key = key


def experience_key(entry_id: str) -> str:
    return f"exp-{entry_id}"


class BusyTracker:
    """Map of busy key to the task currently running for it."""

    def __init__(self) -> None:
        self._tasks: dict[str, asyncio.Task] = {}

    def is_busy(self, key: str) -> bool:
        task = self._tasks.get(key)
        return task is not None and not task.done()

    def busy_keys(self) -> list[str]:
        return sorted(key for key in self._tasks if self.is_busy(key))

    async def run(self, key: str, factory: Callable[[], Awaitable[T]]) -> T:
        """Run ``factory()`` as the task for *key* and return its result.

        Raises:
            SectionBusyError: If *key* already has a running task.  *factory*
                is not called in that case.
        """
        if self.is_busy(key):
            raise SectionBusyError(key)

        task = asyncio.ensure_future(factory())
        self._tasks[key] = task
        try:
            return await task
        finally:
            if self._tasks.get(key) is task:
                del self._tasks[key]

    def cancel(self, key: str) -> bool:
        task = self._tasks.get(key)
        if task is None or task.done():
            return False
        task.cancel()
        return True

    def cancel_all(self) -> None:
        for task in list(self._tasks.values()):
            if not task.done():
                task.cancel()
