"""Tests for demoai/shared/core/event_bus.py."""

import asyncio

import pytest

from demoai.shared.core.event_bus import EventBus


class TestEventBus:

    @pytest.mark.asyncio
    async def test_publish_reaches_every_subscriber(self):
        bus = EventBus()
        seen = []

        async def first(payload):
            seen.append(("first", payload["n"]))

        async def second(payload):
            seen.append(("second", payload["n"]))

        await bus.subscribe("topic", first)
        await bus.subscribe("topic", second)
        await bus.subscribe("topic", first)
        await bus.publish("topic", {"n": 1})
        assert await bus.wait_until_idle()

        assert sorted(seen) == [("first", 1), ("second", 1)]

    @pytest.mark.asyncio
    async def test_failing_handler_does_not_stop_others(self):
        bus = EventBus()
        seen = []

        async def broken(payload):
            raise RuntimeError("boom")

        async def healthy(payload):
            seen.append(payload)

        await bus.subscribe("topic", broken)
        await bus.subscribe("topic", healthy)
        await bus.publish("topic", {"ok": True})
        await bus.wait_until_idle()

        assert seen == [{"ok": True}]

    @pytest.mark.asyncio
    async def test_unsubscribe_and_clear(self):
        bus = EventBus()
        seen = []

        async def handler(payload):
            seen.append(payload)

        await bus.subscribe("topic", handler)
        await bus.unsubscribe("topic", handler)
        await bus.publish("topic", {})
        await bus.wait_until_idle()
        assert seen == []

        await bus.subscribe("topic", handler)
        bus.clear()
        assert bus.subscriber_count("topic") == 0

    @pytest.mark.asyncio
    async def test_idle_without_pending_tasks(self):
        assert await EventBus().wait_until_idle() is True

    @pytest.mark.asyncio
    async def test_publish_reports_scheduled_handlers(self):
        bus = EventBus()

        async def handler(payload):
            pass

        assert await bus.publish("topic", {}) == 0
        await bus.subscribe("topic", handler)
        assert await bus.publish("topic", {}) == 1
        assert await bus.wait_until_idle()
        assert bus.in_flight == 0

    @pytest.mark.asyncio
    async def test_idle_waits_for_follow_up_events(self):
        bus = EventBus()
        seen = []

        async def relay(payload):
            await bus.publish("second", {"from": "first"})

        async def sink(payload):
            seen.append(payload)

        await bus.subscribe("first", relay)
        await bus.subscribe("second", sink)
        await bus.publish("first", {})

        assert await bus.wait_until_idle()
        assert seen == [{"from": "first"}]

    @pytest.mark.asyncio
    async def test_idle_times_out_on_stuck_handler(self):
        bus = EventBus()
        release = asyncio.Event()

        async def stuck(payload):
            await release.wait()

        await bus.subscribe("topic", stuck)
        await bus.publish("topic", {})

        assert await bus.wait_until_idle(timeout=0.05) is False
        release.set()
        assert await bus.wait_until_idle()
