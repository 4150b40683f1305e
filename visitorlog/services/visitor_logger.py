"""Visitor logger — capture request metadata, ship it off, pass the request on."""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Optional

from visitorlog.core.constants import DEFAULT_DRAIN_TIMEOUT
from visitorlog.services.dispatcher import BackgroundDispatcher
from visitorlog.services.extractor import InboundRequest, build_visitor_record
from visitorlog.services.sink_client import SinkClient

logger = logging.getLogger(__name__)

Continuation = Callable[[], Awaitable[Any]]


class VisitorLogger:
    """Request hook that logs each visitor to an external sink.

    The sink URL is fixed at construction; ``None`` or ``""`` disables
    delivery. Delivery is scheduled on ``dispatcher`` and never awaited
    here, so the response never waits on the sink.
    """

    def __init__(
        self,
        sink_url: Optional[str],
        dispatcher: BackgroundDispatcher,
        sink_client: Optional[SinkClient] = None,
    ):
        self.sink_url = sink_url or None
        self.dispatcher = dispatcher
        self.sink = sink_client or SinkClient()

    async def handle(self, request: InboundRequest, continuation: Continuation) -> Any:
        """Log ``request`` and return exactly what ``continuation()`` returns."""
        record = build_visitor_record(request)
        logger.info("Visitor hook executed at %s for %s", record.timestamp, record.path)

        if self.sink_url:
            self.dispatcher.schedule(
                self.sink.send(self.sink_url, record),
                name=f"visitor-log:{record.timestamp}",
            )

        return await continuation()

    async def aclose(self, timeout: float = DEFAULT_DRAIN_TIMEOUT) -> None:
        """Let in-flight deliveries finish (up to ``timeout`` seconds), then close the sink client."""
        await self.dispatcher.drain(timeout)
        await self.sink.aclose()
