"""Route rule matching for the visitor hook."""

from __future__ import annotations

import re
from typing import Iterable, Optional

from visitorlog.core.constants import DEFAULT_PATH_PATTERNS, MATCH_ALL_PATTERN


def _compile(pattern: str) -> re.Pattern[str]:
    """``*`` matches any run of characters, slashes included."""
    parts = (re.escape(chunk) for chunk in pattern.split("*"))
    return re.compile("^" + ".*".join(parts) + "$")


class PathMatcher:
    """Decides which request paths go through the hook.

    Patterns look like ``/``, ``/apply`` or ``/blog/*``; ``/*`` matches
    every path, including ``/`` itself.
    """

    def __init__(self, patterns: Optional[Iterable[str]] = None):
        self.patterns = list(patterns) if patterns else list(DEFAULT_PATH_PATTERNS)
        self.match_all = MATCH_ALL_PATTERN in self.patterns or "*" in self.patterns
        self._compiled = [_compile(p) for p in self.patterns]

    def matches(self, path: str) -> bool:
        if self.match_all:
            return True
        return any(rx.match(path) for rx in self._compiled)

    def __repr__(self) -> str:
        return f"PathMatcher({self.patterns!r})"
