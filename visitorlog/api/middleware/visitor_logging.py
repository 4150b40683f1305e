"""Visitor logging middleware — runs the visitor hook ahead of page serving."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from visitorlog.services.visitor_logger import VisitorLogger
from visitorlog.utils.patterns import PathMatcher


class VisitorLoggingMiddleware(BaseHTTPMiddleware):
    """Sends a visitor record for every request whose path matches the route rule."""

    def __init__(self, app: ASGIApp, visitor_logger: VisitorLogger, matcher: PathMatcher | None = None):
        super().__init__(app)
        self.visitor_logger = visitor_logger
        self.matcher = matcher or PathMatcher()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not self.matcher.matches(request.url.path):
            return await call_next(request)
        return await self.visitor_logger.handle(request, lambda: call_next(request))
