"""visitorlog CLI — main entry point.

Usage:
    visitorlog serve    Serve a site with visitor logging
    visitorlog config   Show resolved configuration
    visitorlog ping     Send a test record to the sink
"""

from __future__ import annotations

import typer

from visitorlog.__version__ import __version__

app = typer.Typer(
    name="visitorlog",
    help="Log every visitor to an external endpoint without slowing the page down",
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool):
    if value:
        from visitorlog.ui.themes import console
        console.print(f"visitorlog v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=version_callback, is_eager=True, help="Show version"
    ),
):
    """visitorlog CLI."""


# Register subcommands
from visitorlog.commands.serve import serve_app
from visitorlog.commands.config_cmd import config_app
from visitorlog.commands.ping import ping_app

app.add_typer(serve_app, name="serve")
app.add_typer(config_app, name="config")
app.add_typer(ping_app, name="ping")


def run():
    """Entry point for console_scripts."""
    app()


if __name__ == "__main__":
    run()
