"""State Store - composition root for one console process.

Builds the core components from configuration and wires them together. The
store is created explicitly and handed to the views; there is no global
instance.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from demoai.shared.core.clock import Clock, SystemClock
from demoai.shared.core.configuration import SystemConfig
from demoai.shared.core.event_bus import EventBus
from demoai.shared.domain.auth import AuthFlow
from demoai.shared.domain.auth.flow import Sleep
from demoai.shared.domain.navigation import AppNavigator
from demoai.shared.domain.sessions import SessionLifecycle
from demoai.shared.domain.settings import SettingsStore
from demoai.shared.infrastructure.persistence import SettingsStorage, YamlSettingsStorage
from demoai.shared.infrastructure.speech import voice_input_available

from .app_state import AppState
from .notifications import NotificationCenter


class Store:
    """Holds every stateful component of the console application.

    Usage:
        store = Store.build(config)
        await store.initialize()
        await store.app.try_demo()
    """

    def __init__(self, app: AppState, notifications: NotificationCenter, config: SystemConfig) -> None:
        self.app = app
        self.notifications = notifications
        self.config = config

    @property
    def bus(self) -> EventBus:
        return self.app.bus

    @property
    def navigator(self) -> AppNavigator:
        return self.app.navigator

    @property
    def settings(self) -> SettingsStore:
        return self.app.settings

    @classmethod
    def build(
        cls,
        config: Optional[SystemConfig] = None,
        event_bus: Optional[EventBus] = None,
        clock: Optional[Clock] = None,
        storage: Optional[SettingsStorage] = None,
        sleep: Optional[Sleep] = None,
    ) -> 'Store':
        """Create and wire all components.

        Args:
            config: System configuration (defaults when omitted)
            event_bus: Shared event bus (a new one when omitted)
            clock: Time source for session timestamps
            storage: Settings storage (YAML file from config when omitted)
            sleep: Awaitable used for the simulated sign-in latency

        Returns:
            The wired store; call ``initialize`` before use
        """
        config = config or SystemConfig()
        bus = event_bus or EventBus()
        clock = clock or SystemClock()

        settings = SettingsStore(storage or YamlSettingsStorage(Path(config.settings.storage_path)))
        if config.settings.autoload:
            settings.load()

        sessions = SessionLifecycle(clock)
        auth_flow = AuthFlow(
            latency_seconds=config.auth.latency_seconds,
            min_password_length=config.auth.min_password_length,
            sleep=sleep,
        )
        navigator = AppNavigator(
            auth_flow,
            sessions,
            clock=clock,
            seed_demo_fixtures=config.sessions.demo_fixtures_enabled,
        )
        app = AppState(
            bus,
            navigator,
            settings,
            voice_input_available=voice_input_available(config.speech.voice_input_available),
        )
        notifications = NotificationCenter(
            bus,
            max_items=config.ui.notification_buffer_size,
            enabled=lambda: bool(settings.get("preferences", "notifications")),
        )
        return cls(app, notifications, config)

    async def initialize(self) -> None:
        """Subscribe the notification sink. Safe to call more than once."""
        await self.notifications.initialize()
