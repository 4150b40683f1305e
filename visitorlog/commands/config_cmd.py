"""visitorlog config — Show resolved configuration."""

from __future__ import annotations

import typer

from visitorlog.ui.themes import console

config_app = typer.Typer(help="Show configuration")


@config_app.callback(invoke_without_command=True)
def config_show():
    """Display the configuration resolved from the environment and .env."""
    from visitorlog.core.config import get_settings

    settings = get_settings()
    sink = settings.sink_url or "[warning](not set, delivery disabled)[/warning]"

    console.print("[header]⚙️  visitorlog Configuration[/header]\n")
    console.print(f"  Sink URL:        {sink}")
    console.print(f"  Sink Timeout:    [number]{settings.sink_timeout}[/number]s")
    console.print(f"  Drain Timeout:   [number]{settings.drain_timeout}[/number]s")
    console.print(f"  Paths:           [info]{', '.join(settings.paths)}[/info]")
    console.print(f"  Host:            [info]{settings.host}[/info]")
    console.print(f"  Port:            [number]{settings.port}[/number]")
    console.print(f"  Site Dir:        [dim]{settings.site_dir or '-'}[/dim]")
    console.print(f"  Log Level:       [dim]{settings.log_level}[/dim]")
