"""Background dispatcher — detached delivery tasks that outlive the response."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Coroutine, Optional

from visitorlog.core.exceptions import VisitorLogError

logger = logging.getLogger(__name__)


class BackgroundDispatcher:
    """Runs fire-and-forget coroutines on the event loop.

    Tasks are strongly referenced until they finish so the loop cannot
    garbage-collect them mid-flight, and :meth:`drain` gives in-flight
    deliveries a bounded grace period on shutdown.
    """

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def schedule(self, coro: Coroutine[Any, Any, Any], name: Optional[str] = None) -> asyncio.Task:
        """Start ``coro`` in the background and return immediately."""
        task = asyncio.create_task(self._run(coro), name=name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, coro: Coroutine[Any, Any, Any]) -> None:
        try:
            await coro
        except asyncio.CancelledError:
            raise
        except VisitorLogError as exc:
            logger.warning("Visitor logging failed: %s", exc)
        except Exception as exc:
            logger.error("Unexpected error in background delivery: %s", exc, exc_info=True)

    async def drain(self, timeout: float) -> int:
        """Wait up to ``timeout`` seconds for in-flight tasks, then cancel the rest.

        Returns the number of tasks that had to be cancelled.
        """
        if not self._tasks:
            return 0

        tasks = list(self._tasks)
        logger.info("Waiting for %d in-flight visitor deliveries...", len(tasks))
        _, still_pending = await asyncio.wait(tasks, timeout=timeout)

        for task in still_pending:
            task.cancel()
        if still_pending:
            await asyncio.gather(*still_pending, return_exceptions=True)
            logger.warning("Cancelled %d visitor deliveries on shutdown", len(still_pending))
        return len(still_pending)
