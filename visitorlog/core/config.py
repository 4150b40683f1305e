"""Application settings loaded from env vars / .env file.

Resolved once at startup and handed to the hook explicitly; the hook itself
never reads the environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from visitorlog.core.constants import (
    DEFAULT_DRAIN_TIMEOUT,
    DEFAULT_HOST,
    DEFAULT_PATH_PATTERNS,
    DEFAULT_PORT,
    DEFAULT_SINK_TIMEOUT,
    ENV_DRAIN_TIMEOUT,
    ENV_ENDPOINT,
    ENV_HOST,
    ENV_LOG_ENDPOINT,
    ENV_LOG_LEVEL,
    ENV_PATHS,
    ENV_PORT,
    ENV_SINK_TIMEOUT,
    ENV_SITE_DIR,
)


def _load_dotenv() -> None:
    """Load .env file if present (simple implementation, no dependency)."""
    for env_path in (Path(".env"), Path(__file__).resolve().parents[2] / ".env"):
        if env_path.exists():
            for line in env_path.read_text(encoding="utf-8").splitlines():
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, _, value = line.partition("=")
                key, value = key.strip(), value.strip().strip('"').strip("'")
                os.environ.setdefault(key, value)
            break


def _env(name: str, default: str) -> str:
    return os.environ.get(name, default)


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, str(default)))


def _env_float(name: str, default: float) -> float:
    return float(os.environ.get(name, str(default)))


def _env_optional(*names: str) -> Optional[str]:
    """First non-blank value among ``names``, else None."""
    for name in names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return None


def parse_path_patterns(raw: str) -> list[str]:
    """Split a comma-separated route rule such as ``"/, /blog/*"``."""
    patterns = [p.strip() for p in raw.split(",") if p.strip()]
    return patterns or list(DEFAULT_PATH_PATTERNS)


@dataclass
class Settings:
    """visitorlog configuration — env vars take precedence, then .env, then defaults."""

    # Sink (None disables dispatch)
    sink_url: Optional[str] = None
    sink_timeout: float = DEFAULT_SINK_TIMEOUT
    drain_timeout: float = DEFAULT_DRAIN_TIMEOUT
    # Route rule
    paths: list[str] = field(default_factory=lambda: list(DEFAULT_PATH_PATTERNS))
    # Server
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    site_dir: Optional[Path] = None
    # Logging
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (and .env)."""
        _load_dotenv()
        site_dir = _env_optional(ENV_SITE_DIR)
        return cls(
            sink_url=_env_optional(ENV_LOG_ENDPOINT, ENV_ENDPOINT),
            sink_timeout=_env_float(ENV_SINK_TIMEOUT, DEFAULT_SINK_TIMEOUT),
            drain_timeout=_env_float(ENV_DRAIN_TIMEOUT, DEFAULT_DRAIN_TIMEOUT),
            paths=parse_path_patterns(_env(ENV_PATHS, "")),
            host=_env(ENV_HOST, DEFAULT_HOST),
            port=_env_int(ENV_PORT, DEFAULT_PORT),
            site_dir=Path(site_dir) if site_dir else None,
            log_level=_env(ENV_LOG_LEVEL, "INFO").upper(),
        )

    @property
    def sink_configured(self) -> bool:
        return bool(self.sink_url)


# Singleton
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the global settings singleton."""
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
