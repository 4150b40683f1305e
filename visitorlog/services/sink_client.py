"""Sink client — the single best-effort POST of a visitor record."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from visitorlog.core.constants import DEFAULT_SINK_TIMEOUT, SINK_CONTENT_TYPE
from visitorlog.core.exceptions import SinkDeliveryError
from visitorlog.models.schemas import VisitorRecord

logger = logging.getLogger(__name__)


class SinkClient:
    """Async wrapper around the sink endpoint.

    One ``httpx.AsyncClient`` is shared by all deliveries and created on
    first use. No retries: each record is attempted exactly once.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_SINK_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._client

    async def send(self, url: str, record: VisitorRecord) -> int:
        """POST ``record`` as JSON to ``url`` and return the status code.

        The whole exchange is bounded by the client timeout, not just each
        connect/read/write step. Raises :class:`SinkDeliveryError` on network
        errors, timeouts, invalid URLs and non-2xx responses. The response
        body is never read.
        """
        client = self._get_client()
        try:
            status_code, reason = await asyncio.wait_for(self._post(client, url, record), self._timeout)
        except asyncio.TimeoutError as exc:
            raise SinkDeliveryError(url, f"timed out after {self._timeout}s") from exc
        except httpx.InvalidURL as exc:
            raise SinkDeliveryError(url, f"invalid endpoint: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise SinkDeliveryError(url, f"timed out after {self._timeout}s") from exc
        except httpx.HTTPError as exc:
            raise SinkDeliveryError(url, str(exc) or type(exc).__name__) from exc

        if not 200 <= status_code < 300:
            raise SinkDeliveryError(url, reason or "non-success status", status_code)

        logger.debug("Visitor record delivered to %s (%d)", url, status_code)
        return status_code

    async def _post(self, client: httpx.AsyncClient, url: str, record: VisitorRecord) -> tuple[int, str]:
        # Streamed so the body is closed unread once the status line is in.
        async with client.stream(
            "POST",
            url,
            json=record.to_payload(),
            headers={"Content-Type": SINK_CONTENT_TYPE},
        ) as resp:
            return resp.status_code, resp.reason_phrase

    async def aclose(self) -> None:
        """Close the shared connection pool."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
