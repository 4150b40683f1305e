"""visitorlog — fire-and-forget visitor logging hook for ASGI sites."""

from visitorlog.__version__ import __version__

__all__ = ["__version__"]
