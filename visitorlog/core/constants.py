"""Constants for visitorlog — header names, defaults, env var names."""

from __future__ import annotations

# ── Client IP headers (checked in this order) ──────────────────────────────
# Most specific proxy header first; x-forwarded-for is generic and spoofable.
HEADER_PLATFORM_CLIENT_IP = "x-nf-client-connection-ip"
HEADER_FORWARDED_FOR = "x-forwarded-for"
HEADER_CDN_CLIENT_IP = "cf-connecting-ip"

# ── Request metadata headers ───────────────────────────────────────────────
HEADER_USER_AGENT = "user-agent"
HEADER_REFERER = "referer"
HEADER_REFERRER = "referrer"
HEADER_ACCEPT_LANGUAGE = "accept-language"

# ── Sink delivery ──────────────────────────────────────────────────────────
SINK_CONTENT_TYPE = "application/json"
DEFAULT_SINK_TIMEOUT = 5.0     # seconds per POST
DEFAULT_DRAIN_TIMEOUT = 5.0    # seconds to wait for in-flight POSTs on shutdown

# ── Route matching ─────────────────────────────────────────────────────────
MATCH_ALL_PATTERN = "/*"
DEFAULT_PATH_PATTERNS: list[str] = [MATCH_ALL_PATTERN]

# ── Environment variables ──────────────────────────────────────────────────
ENV_LOG_ENDPOINT = "LOG_ENDPOINT"
ENV_ENDPOINT = "VISITORLOG_ENDPOINT"
ENV_PATHS = "VISITORLOG_PATHS"
ENV_SINK_TIMEOUT = "VISITORLOG_SINK_TIMEOUT"
ENV_DRAIN_TIMEOUT = "VISITORLOG_DRAIN_TIMEOUT"
ENV_HOST = "VISITORLOG_HOST"
ENV_PORT = "VISITORLOG_PORT"
ENV_SITE_DIR = "VISITORLOG_SITE_DIR"
ENV_LOG_LEVEL = "VISITORLOG_LOG_LEVEL"

# ── Server defaults ────────────────────────────────────────────────────────
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
