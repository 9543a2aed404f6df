"""Test doubles and helpers shared across test modules."""

import asyncio

from demoai.shared.domain.navigation import AppNavigator, AppScreen


class RecordingSleep:
    """Zero-latency stand-in for asyncio.sleep that remembers requested delays."""

    def __init__(self):
        self.calls = []

    async def __call__(self, delay):
        self.calls.append(delay)
        await asyncio.sleep(0)


class GatedSleep:
    """Sleep that only returns once ``release`` is called."""

    def __init__(self):
        self.calls = []
        self._gate = asyncio.Event()

    async def __call__(self, delay):
        self.calls.append(delay)
        await self._gate.wait()

    def release(self):
        self._gate.set()


class EventRecorder:
    """Collects payloads published on the given topics."""

    def __init__(self):
        self.received = []

    async def subscribe(self, bus, *topics):
        for topic in topics:
            async def handler(payload, topic=topic):
                self.received.append((topic, payload))
            await bus.subscribe(topic, handler)

    def topics(self):
        return [topic for topic, _ in self.received]

    def payloads(self, topic):
        return [payload for t, payload in self.received if t == topic]


async def wait_for(predicate, rounds=50):
    """Yield to the loop until ``predicate()`` holds."""
    for _ in range(rounds):
        if predicate():
            return True
        await asyncio.sleep(0)
    return predicate()


def assert_dashboard_identity_invariant(navigator: AppNavigator):
    if navigator.screen is AppScreen.DASHBOARD:
        assert (navigator.identity is not None) != navigator.demo_mode
