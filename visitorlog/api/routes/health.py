"""GET /health — hook status."""

from __future__ import annotations

import time

from fastapi import APIRouter, Request

from visitorlog.__version__ import __version__
from visitorlog.models.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Return hook status."""
    state = request.app.state
    uptime = time.time() - state.start_time

    return HealthResponse(
        status="ok",
        sink_configured=state.settings.sink_configured,
        pending_deliveries=state.dispatcher.pending,
        uptime_seconds=round(uptime, 1),
        version=__version__,
    )
