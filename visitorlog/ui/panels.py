"""Rich panel / display helpers."""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from visitorlog.ui.themes import console


def banner() -> None:
    """Print the visitorlog startup banner."""
    from visitorlog.__version__ import __version__

    banner_text = Text()
    banner_text.append("visitorlog", style="bold bright_white")
    banner_text.append(f" v{__version__}", style="dim")
    banner_text.append("  ·  visitor logging hook", style="cyan")
    console.print(Panel(banner_text, border_style="bright_cyan", expand=False))


def success_panel(title: str, message: str) -> None:
    """Display a green success panel."""
    console.print(Panel(message, title=f"✅ {title}", border_style="green"))


def error_panel(title: str, message: str) -> None:
    """Display a red error panel."""
    console.print(Panel(message, title=f"❌ {title}", border_style="red"))
