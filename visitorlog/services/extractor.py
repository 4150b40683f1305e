"""Visitor record extraction — client IP resolution and record construction."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Protocol
from urllib.parse import urlsplit

from visitorlog.core.constants import (
    HEADER_ACCEPT_LANGUAGE,
    HEADER_CDN_CLIENT_IP,
    HEADER_FORWARDED_FOR,
    HEADER_PLATFORM_CLIENT_IP,
    HEADER_REFERER,
    HEADER_REFERRER,
    HEADER_USER_AGENT,
)
from visitorlog.models.schemas import VisitorRecord


class HeaderLookup(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...


class InboundRequest(Protocol):
    """What the hook needs from a host request: headers, method and URL.

    Starlette's ``Request`` satisfies this as-is.
    """

    headers: HeaderLookup
    method: str
    url: Any


def _header(headers: HeaderLookup, name: str) -> str:
    """Header value stripped of surrounding whitespace, ``""`` when absent."""
    value = headers.get(name)
    if not isinstance(value, str):
        return ""
    return value.strip()


def resolve_client_ip(headers: HeaderLookup) -> Optional[str]:
    """Pick the client IP from proxy/CDN headers.

    Order: platform client-IP header, then the first ``x-forwarded-for``
    entry, then the CDN header. Returns None when none is present.
    """
    platform_ip = _header(headers, HEADER_PLATFORM_CLIENT_IP)
    if platform_ip:
        return platform_ip

    forwarded_for = _header(headers, HEADER_FORWARDED_FOR)
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    return _header(headers, HEADER_CDN_CLIENT_IP) or None


def format_timestamp(dt: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. ``2025-01-01T00:00:00.000Z``."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def _split_url(url: str) -> tuple[str, str]:
    """Return ``(path_with_query, hostname)``; malformed URLs degrade to ``("", "")``."""
    try:
        parts = urlsplit(url)
        hostname = parts.hostname or ""
    except ValueError:
        return "", ""
    path = parts.path or "/"
    if parts.query:
        path = f"{path}?{parts.query}"
    return path, hostname


def build_visitor_record(request: InboundRequest, now: Optional[datetime] = None) -> VisitorRecord:
    """Build the :class:`VisitorRecord` for ``request``."""
    headers = request.headers
    url = str(request.url)
    path, hostname = _split_url(url)

    return VisitorRecord(
        ip=resolve_client_ip(headers),
        user_agent=_header(headers, HEADER_USER_AGENT),
        referrer=_header(headers, HEADER_REFERER) or _header(headers, HEADER_REFERRER),
        accept_language=_header(headers, HEADER_ACCEPT_LANGUAGE),
        method=str(request.method or ""),
        url=url,
        path=path,
        hostname=hostname,
        timestamp=format_timestamp(now or datetime.now(timezone.utc)),
    )
