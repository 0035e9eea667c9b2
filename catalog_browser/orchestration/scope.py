"""Task scope tied to a presenter's lifetime."""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine

from catalog_browser.utils.logger import get_logger

logger = get_logger()


class TaskScope:
    """
    Owns every task a presenter starts. cancel() runs once and cancels all of
    them; after that, launch() closes the coroutine without scheduling it.
    """

    def __init__(self, name: str = "scope") -> None:
        self.name = name
        self._tasks: set[asyncio.Task[Any]] = set()
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def launch(self, coro: Coroutine[Any, Any, Any]) -> asyncio.Task[Any] | None:
        """Schedule coro on the running loop. Must be called from the loop thread."""
        if self._cancelled:
            coro.close()
            logger.debug("%s: launch after cancel ignored", self.name)
            return None
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        pending = [t for t in self._tasks if not t.done()]
        for t in pending:
            t.cancel()
        logger.debug("%s: cancelled %d in-flight task(s)", self.name, len(pending))

    async def join(self) -> None:
        """Wait for the tasks currently in the scope; cancellations are not re-raised."""
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
