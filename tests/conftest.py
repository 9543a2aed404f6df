"""Shared fixtures for the DemoAI test suite."""

from datetime import datetime, timezone

import pytest
import pytest_asyncio

from demoai.console.state import Store
from demoai.shared.core.clock import FrozenClock
from demoai.shared.core.configuration import SystemConfig
from demoai.shared.core.event_bus import EventBus
from demoai.shared.domain.auth import AuthFlow
from demoai.shared.domain.navigation import AppNavigator
from demoai.shared.domain.sessions import SessionLifecycle
from demoai.shared.infrastructure.persistence import InMemorySettingsStorage

from tests.helpers import RecordingSleep


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 1, 15, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def no_sleep():
    return RecordingSleep()


@pytest.fixture
def sessions(clock):
    return SessionLifecycle(clock)


@pytest.fixture
def auth_flow(no_sleep):
    return AuthFlow(latency_seconds=1.5, sleep=no_sleep)


@pytest.fixture
def navigator(auth_flow, sessions, clock):
    return AppNavigator(auth_flow, sessions, clock=clock)


@pytest.fixture
def memory_storage():
    return InMemorySettingsStorage()


@pytest.fixture
def config():
    return SystemConfig(speech={"voice_input_available": False})


@pytest_asyncio.fixture
async def store(config, clock, memory_storage, no_sleep):
    store = Store.build(
        config,
        event_bus=EventBus(),
        clock=clock,
        storage=memory_storage,
        sleep=no_sleep,
    )
    await store.initialize()
    return store
