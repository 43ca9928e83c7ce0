"""Task scope tying asynchronous work to the lifetime of one screen.

Screen controllers start every backend call through a ``ViewLifetime`` so
that tearing the page down cancels whatever is still pending. A cancelled
call never resumes, so its completion cannot touch a disposed screen.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import Any, Coroutine, Optional, Set, TypeVar

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class ViewLifetime:
    """Track tasks spawned for a screen and cancel them on ``close``."""

    def __init__(self, name: str = "screen") -> None:
        self.name = name
        self.closed = False
        self._tasks: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return sum(1 for task in self._tasks if not task.done())

    def spawn(self, coro: Coroutine[Any, Any, T]) -> Optional["asyncio.Task[T]"]:
        """Start ``coro`` as a task owned by this lifetime.

        Returns None (and closes the coroutine unstarted) once the lifetime
        has been closed.
        """
        if self.closed:
            coro.close()
            return None
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def run(self, coro: Coroutine[Any, Any, T]) -> Optional[T]:
        """Spawn ``coro`` and await it; returns None if the screen closed meanwhile."""
        task = self.spawn(coro)
        if task is None:
            return None
        try:
            return await task
        except asyncio.CancelledError:
            if self.closed:
                return None
            raise

    def close(self) -> None:
        """Cancel all pending tasks; later ``spawn`` calls are refused."""
        if self.closed:
            return
        self.closed = True
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        self._tasks.clear()
        if pending:
            LOGGER.debug("%s closed; cancelled %d pending task(s)", self.name, len(pending))


async def maybe_await(value: Any) -> Any:
    """Await ``value`` if it is awaitable, else return it unchanged."""
    if inspect.isawaitable(value):
        return await value
    return value


__all__ = ["ViewLifetime", "maybe_await"]
