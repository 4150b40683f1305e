"""Pydantic schemas shared across visitorlog."""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# ── Visitor record ──────────────────────────────────────────────────────────


class VisitorRecord(BaseModel):
    """Metadata captured for one inbound request.

    Built once per request, serialized once, then discarded. Optional
    headers default to ``""``; only ``ip`` may be ``None``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ip: Optional[str] = None
    user_agent: str = Field("", alias="userAgent")
    referrer: str = ""
    accept_language: str = Field("", alias="acceptLanguage")
    method: str
    url: str
    path: str
    hostname: str = ""
    timestamp: str

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict with the wire (camelCase) field names."""
        return self.model_dump(by_alias=True)


# ── Health ──────────────────────────────────────────────────────────────────


class HealthResponse(BaseModel):
    status: str = "ok"
    sink_configured: bool = False
    pending_deliveries: int = 0
    uptime_seconds: float = 0.0
    version: str = ""
