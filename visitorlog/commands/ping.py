"""visitorlog ping — Send a sample visitor record to the sink."""

from __future__ import annotations

import asyncio
import time
from datetime import datetime, timezone
from typing import Optional

import typer

from visitorlog.ui.panels import error_panel, success_panel
from visitorlog.ui.themes import console

ping_app = typer.Typer(help="Send a test record to the sink")


@ping_app.callback(invoke_without_command=True)
def ping(
    endpoint: Optional[str] = typer.Option(None, "--endpoint", "-e", help="Sink URL (defaults to LOG_ENDPOINT)"),
):
    """POST one sample visitor record and report the outcome."""
    from visitorlog.core.config import get_settings

    settings = get_settings()
    url = endpoint or settings.sink_url
    if not url:
        error_panel("No sink", "Set LOG_ENDPOINT or pass --endpoint.")
        raise typer.Exit(1)

    ok = asyncio.run(_ping(url, settings.sink_timeout))
    if not ok:
        raise typer.Exit(1)


async def _ping(url: str, timeout: float) -> bool:
    from visitorlog.__version__ import __version__
    from visitorlog.core.exceptions import SinkDeliveryError
    from visitorlog.models.schemas import VisitorRecord
    from visitorlog.services.extractor import format_timestamp
    from visitorlog.services.sink_client import SinkClient

    record = VisitorRecord(
        ip="127.0.0.1",
        user_agent=f"visitorlog-ping/{__version__}",
        method="GET",
        url="http://localhost/visitorlog-ping",
        path="/visitorlog-ping",
        hostname="localhost",
        timestamp=format_timestamp(datetime.now(timezone.utc)),
    )

    console.print(f"📤 Sending sample record to [info]{url}[/info]...")
    client = SinkClient(timeout=timeout)
    t0 = time.perf_counter()
    try:
        status = await client.send(url, record)
    except SinkDeliveryError as exc:
        error_panel("Delivery failed", str(exc))
        return False
    finally:
        await client.aclose()

    elapsed = int((time.perf_counter() - t0) * 1000)
    success_panel("Delivered", f"HTTP [number]{status}[/number] in [number]{elapsed}[/number]ms")
    return True
