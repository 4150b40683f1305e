"""
Tests for the background dispatcher.
"""

import asyncio
import logging

from visitorlog.core.exceptions import SinkDeliveryError
from visitorlog.services.dispatcher import BackgroundDispatcher


class TestBackgroundDispatcher:
    """Test fire-and-forget scheduling."""

    def test_schedule_does_not_block(self):
        dispatcher = BackgroundDispatcher()
        done = []

        async def work():
            await asyncio.sleep(0.01)
            done.append(True)

        async def run():
            dispatcher.schedule(work())
            assert dispatcher.pending == 1
            assert done == []
            await dispatcher.drain(1.0)

        asyncio.run(run())
        assert done == [True]
        assert dispatcher.pending == 0

    def test_delivery_errors_are_logged_not_raised(self, caplog):
        dispatcher = BackgroundDispatcher()

        async def failing():
            raise SinkDeliveryError("https://sink.example", "connection refused")

        async def run():
            task = dispatcher.schedule(failing())
            await task
            return task

        with caplog.at_level(logging.WARNING, logger="visitorlog.services.dispatcher"):
            task = asyncio.run(run())

        assert task.exception() is None
        assert "connection refused" in caplog.text

    def test_unexpected_errors_are_logged(self, caplog):
        dispatcher = BackgroundDispatcher()

        async def broken():
            raise RuntimeError("boom")

        async def run():
            await dispatcher.schedule(broken())

        with caplog.at_level(logging.ERROR, logger="visitorlog.services.dispatcher"):
            asyncio.run(run())

        assert "boom" in caplog.text

    def test_drain_cancels_slow_tasks(self):
        dispatcher = BackgroundDispatcher()

        async def run():
            dispatcher.schedule(asyncio.sleep(10))
            dispatcher.schedule(asyncio.sleep(0))
            return await dispatcher.drain(0.05)

        cancelled = asyncio.run(run())
        assert cancelled == 1
        assert dispatcher.pending == 0

    def test_drain_with_nothing_pending(self):
        assert asyncio.run(BackgroundDispatcher().drain(0.1)) == 0
