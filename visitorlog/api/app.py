"""FastAPI application factory with lifespan, visitor hook, and page serving."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import HTMLResponse

from visitorlog.__version__ import __version__
from visitorlog.api.middleware.visitor_logging import VisitorLoggingMiddleware
from visitorlog.core.config import Settings, get_settings
from visitorlog.services.dispatcher import BackgroundDispatcher
from visitorlog.services.sink_client import SinkClient
from visitorlog.services.visitor_logger import VisitorLogger
from visitorlog.utils.patterns import PathMatcher

logger = logging.getLogger(__name__)

_PLACEHOLDER_PAGE = """<!doctype html>
<html>
  <head><meta charset="utf-8"><title>visitorlog</title></head>
  <body>
    <h1>visitorlog</h1>
    <p>Set VISITORLOG_SITE_DIR to serve your own pages behind the visitor hook.</p>
  </body>
</html>
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle."""
    settings: Settings = app.state.settings
    app.state.start_time = time.time()

    if settings.sink_configured:
        logger.info("visitorlog v%s started, sending visitors to %s", __version__, settings.sink_url)
    else:
        logger.info("visitorlog v%s started, no sink configured (delivery disabled)", __version__)

    yield

    # Shutdown: let in-flight deliveries finish before closing the pool
    await app.state.visitor_logger.aclose(settings.drain_timeout)
    logger.info("visitorlog stopped")


def create_app(
    settings: Optional[Settings] = None,
    sink_client: Optional[SinkClient] = None,
) -> FastAPI:
    """Build and return the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="visitorlog",
        description="Visitor logging hook in front of a static site",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
    )

    dispatcher = BackgroundDispatcher()
    sink_client = sink_client or SinkClient(timeout=settings.sink_timeout)
    app.state.settings = settings
    app.state.dispatcher = dispatcher
    app.state.sink_client = sink_client
    app.state.visitor_logger = VisitorLogger(settings.sink_url, dispatcher, sink_client)
    app.state.start_time = time.time()

    app.add_middleware(
        VisitorLoggingMiddleware,
        visitor_logger=app.state.visitor_logger,
        matcher=PathMatcher(settings.paths),
    )

    from visitorlog.api.routes.health import router as health_router

    app.include_router(health_router)

    # Normal page serving
    if settings.site_dir is not None:
        from fastapi.staticfiles import StaticFiles

        app.mount("/", StaticFiles(directory=settings.site_dir, html=True), name="site")
    else:
        @app.get("/", response_class=HTMLResponse, include_in_schema=False)
        async def serve_placeholder():
            return HTMLResponse(_PLACEHOLDER_PAGE)

    return app
