"""Custom exception hierarchy for visitorlog."""

from __future__ import annotations

from typing import Optional


class VisitorLogError(Exception):
    """Base exception for all visitorlog errors."""


class SinkDeliveryError(VisitorLogError):
    """Raised when a visitor record could not be delivered to the sink.

    Covers connection errors, timeouts, non-success status codes and
    malformed endpoint URLs.
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        status = f" (HTTP {status_code})" if status_code is not None else ""
        super().__init__(f"Delivery to {url} failed{status}: {reason}")
