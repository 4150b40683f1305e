"""visitorlog color theme and console singleton."""

from __future__ import annotations

from rich.console import Console
from rich.theme import Theme

VISITORLOG_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "number": "bold white",
    "header": "bold bright_cyan",
    "muted": "dim",
})

console = Console(theme=VISITORLOG_THEME)
