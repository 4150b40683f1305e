"""Shared fixtures: clean environment, fake requests, and a recording sink."""

from __future__ import annotations

import asyncio
import json
import threading
from typing import Optional

import httpx
import pytest
from starlette.datastructures import Headers

from visitorlog.core import constants
from visitorlog.core.config import reset_settings

_ENV_VARS = [
    constants.ENV_LOG_ENDPOINT,
    constants.ENV_ENDPOINT,
    constants.ENV_PATHS,
    constants.ENV_SINK_TIMEOUT,
    constants.ENV_DRAIN_TIMEOUT,
    constants.ENV_HOST,
    constants.ENV_PORT,
    constants.ENV_SITE_DIR,
    constants.ENV_LOG_LEVEL,
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate every test from the caller's environment and any .env file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


class FakeRequest:
    """Minimal request exposing headers, method and url."""

    def __init__(self, url: str, headers: Optional[dict] = None, method: str = "GET"):
        self.url = url
        self.method = method
        self.headers = Headers(headers=headers or {})


class RecordingSink:
    """httpx mock endpoint that remembers every request it receives."""

    def __init__(
        self,
        status_code: int = 204,
        fail: bool = False,
        delay: float = 0.0,
        gate: Optional[threading.Event] = None,
    ):
        self.status_code = status_code
        self.fail = fail
        self.delay = delay
        self.gate = gate
        self.requests: list[httpx.Request] = []

    async def handler(self, request: httpx.Request) -> httpx.Response:
        # gate is set from the test thread, so poll rather than await an asyncio.Event
        while self.gate is not None and not self.gate.is_set():
            await asyncio.sleep(0.01)
        if self.delay:
            await asyncio.sleep(self.delay)
        self.requests.append(request)
        if self.fail:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(self.status_code)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def payloads(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def failing_sink():
    return RecordingSink(fail=True)
