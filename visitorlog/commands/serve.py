"""visitorlog serve — Run the site behind the visitor hook."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from visitorlog.core.config import get_settings, reset_settings
from visitorlog.core.constants import (
    ENV_ENDPOINT,
    ENV_HOST,
    ENV_LOG_ENDPOINT,
    ENV_LOG_LEVEL,
    ENV_PATHS,
    ENV_PORT,
    ENV_SITE_DIR,
)
from visitorlog.ui.panels import banner
from visitorlog.ui.themes import console
from visitorlog.utils.helpers import get_local_ip

serve_app = typer.Typer(help="Serve a site with visitor logging")


@serve_app.callback(invoke_without_command=True)
def serve(
    host: Optional[str] = typer.Option(None, "--host", "-h", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Port to listen on"),
    site_dir: Optional[Path] = typer.Option(
        None, "--site-dir", "-d", exists=True, file_okay=False, help="Static site directory to serve"
    ),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", "-e", help="Sink URL for visitor records"),
    paths: Optional[str] = typer.Option(None, "--paths", help="Comma-separated route rule, e.g. '/,/blog/*'"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Log level (DEBUG, INFO, ...)"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload (dev)"),
):
    """Start the server. CLI options override environment settings."""
    # The app is built by uvicorn's factory, so overrides travel via the environment.
    overrides = {
        ENV_HOST: host,
        ENV_PORT: str(port) if port is not None else None,
        ENV_SITE_DIR: str(site_dir) if site_dir is not None else None,
        ENV_PATHS: paths,
        ENV_LOG_LEVEL: log_level,
    }
    if endpoint is not None:
        overrides[ENV_LOG_ENDPOINT] = endpoint
        overrides[ENV_ENDPOINT] = endpoint
    for name, value in overrides.items():
        if value is not None:
            os.environ[name] = value

    reset_settings()
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    banner()
    sink = f"[info]{settings.sink_url}[/info]" if settings.sink_configured else "[warning]not configured (logging disabled)[/warning]"
    site = str(settings.site_dir) if settings.site_dir else "[muted]built-in placeholder page[/muted]"
    console.print(f"""
🌐 Local:   [info]http://{settings.host}:{settings.port}[/info]
🌍 Network: [info]http://{get_local_ip()}:{settings.port}[/info]
📤 Sink:    {sink}
🧭 Paths:   [info]{', '.join(settings.paths)}[/info]
📁 Site:    {site}
""")

    uvicorn.run(
        "visitorlog.api.app:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
