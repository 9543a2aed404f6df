"""Application Shell State.

User-facing actions for every screen. Each action calls into the core
components, converts expected ``DemoAIError`` failures into notifications
and publishes outcome events on the EventBus.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from demoai.shared.core import events
from demoai.shared.core.errors import AuthError, DemoAIError, SessionError, SettingsError
from demoai.shared.core.event_bus import EventBus, EventPayload
from demoai.shared.domain.auth import AuthAttempt, AuthMode, UserIdentity
from demoai.shared.domain.navigation import AppNavigator, AppScreen, DashboardTab
from demoai.shared.domain.sessions import DemoSession, SessionLifecycle, SessionStats
from demoai.shared.domain.settings import SettingsStore

logger = logging.getLogger(__name__)


class AppState:
    """State facade for the console shell.

    The navigator, session lifecycle and settings store are owned here and
    passed in by the ``Store``; views only talk to this class.
    """

    def __init__(
        self,
        event_bus: EventBus,
        navigator: AppNavigator,
        settings: SettingsStore,
        voice_input_available: bool = False,
    ) -> None:
        """Initialize application state.

        Args:
            event_bus: The shared event bus for outcome events
            navigator: Screen state machine (owns auth flow and sessions)
            settings: User settings store
            voice_input_available: Result of the speech capability probe
        """
        self.bus = event_bus
        self.navigator = navigator
        self.settings = settings
        self.voice_input_available = voice_input_available

    # --- Read-only views ---

    @property
    def screen(self) -> AppScreen:
        return self.navigator.screen

    @property
    def sessions(self) -> SessionLifecycle:
        return self.navigator.sessions

    @property
    def identity(self) -> Optional[UserIdentity]:
        return self.navigator.identity

    @property
    def demo_mode(self) -> bool:
        return self.navigator.demo_mode

    @property
    def greeting(self) -> str:
        if self.demo_mode:
            return "Welcome, Demo User!"
        if self.identity is not None:
            return f"Welcome back, {self.identity.display_name}!"
        return ""

    def stats(self) -> SessionStats:
        return self.sessions.stats()

    def search_sessions(self, query: str = "") -> List[DemoSession]:
        return list(self.sessions.search(query))

    # --- Helpers ---

    async def publish(self, topic: str, payload: EventPayload) -> None:
        await self.bus.publish(topic, payload)

    async def notify(self, title: str, description: str = "", level: events.NotificationLevel = "info",
                     topic: Optional[str] = None) -> None:
        await self.publish(events.TOPIC_NOTIFY, events.create_notify_event(title, description, level, topic))

    async def notify_error(self, error: DemoAIError, title: str, topic: Optional[str] = None) -> None:
        logger.info(f"{title}: {error.message} ({error.code})")
        await self.notify(title, error.message, "error", topic)

    async def _after_navigation(self, previous: AppScreen) -> None:
        if self.screen is previous:
            return
        email = self.identity.email if self.identity else None
        await self.publish(
            events.TOPIC_NAV_CHANGED,
            events.create_nav_changed_event(self.screen.value, previous.value, self.demo_mode, email),
        )

    # --- Navigation actions ---

    async def get_started(self) -> bool:
        previous = self.screen
        moved = self.navigator.get_started()
        await self._after_navigation(previous)
        return moved

    async def sign_in(self) -> bool:
        previous = self.screen
        moved = self.navigator.sign_in()
        await self._after_navigation(previous)
        return moved

    async def cancel_auth(self) -> bool:
        previous = self.screen
        moved = self.navigator.cancel_auth()
        await self._after_navigation(previous)
        return moved

    def toggle_auth_mode(self) -> bool:
        return self.navigator.toggle_auth_mode()

    async def try_demo(self) -> bool:
        previous = self.screen
        moved = self.navigator.try_demo()
        if moved:
            await self.notify("Demo mode", "Exploring DemoAI with sample sessions.", "info")
        await self._after_navigation(previous)
        return moved

    def select_tab(self, tab: DashboardTab | str) -> bool:
        return self.navigator.select_tab(DashboardTab(tab))

    async def logout(self) -> bool:
        previous = self.screen
        moved = self.navigator.logout()
        if moved:
            await self.publish(events.TOPIC_SESSIONS_RESET, {})
            await self.notify("Signed out", level="info")
        await self._after_navigation(previous)
        return moved

    async def submit_auth(
        self,
        email: str,
        password: str,
        confirm_password: Optional[str] = None,
    ) -> Optional[UserIdentity]:
        """Submit the auth form in its current mode."""
        if self.screen is not AppScreen.AUTH:
            return None

        mode = self.navigator.auth_mode
        attempt = AuthAttempt(email=email, password=password, confirm_password=confirm_password, mode=mode)
        await self.publish(events.TOPIC_AUTH_SUBMITTING, {"email": email, "mode": mode.value})

        previous = self.screen
        try:
            identity = await self.navigator.submit_auth(attempt)
        except AuthError as e:
            await self.publish(events.TOPIC_AUTH_FAILED, events.create_auth_failed_event(e.code, e.message, mode.value))
            await self.notify_error(e, "Sign in failed", events.TOPIC_AUTH_FAILED)
            return None

        if identity is None:
            await self.publish(events.TOPIC_AUTH_DISCARDED, {"email": email, "mode": mode.value})
            return None

        await self.publish(events.TOPIC_AUTH_SUCCEEDED, {"email": identity.email, "mode": mode.value})
        await self.notify(
            "Account created" if mode is AuthMode.SIGN_UP else "Signed in",
            f"Welcome, {identity.email}",
            "success",
            events.TOPIC_AUTH_SUCCEEDED,
        )
        await self._after_navigation(previous)
        return identity

    # --- Session actions ---

    async def start_session(self, title: Optional[str] = None) -> Optional[DemoSession]:
        if self.screen is not AppScreen.DASHBOARD:
            return None
        try:
            session = self.sessions.start_session(title)
        except SessionError as e:
            await self.notify_error(e, "Could not start demo", events.TOPIC_SESSION_STARTED)
            return None

        await self.publish(events.TOPIC_SESSION_STARTED, events.create_session_event(session.model_dump(mode="json")))
        await self.notify("Demo session started!", "Voice commands are now active.", "success",
                          events.TOPIC_SESSION_STARTED)
        return session

    async def stop_session(self, session_id: str) -> Optional[DemoSession]:
        if self.screen is not AppScreen.DASHBOARD:
            return None
        try:
            session = self.sessions.stop_session(session_id)
        except SessionError as e:
            await self.notify_error(e, "Could not stop demo", events.TOPIC_SESSION_STOPPED)
            return None

        await self.publish(events.TOPIC_SESSION_STOPPED, events.create_session_event(session.model_dump(mode="json")))
        await self.notify("Demo session completed", f"{session.title} ({session.formatted_duration()})",
                          "success", events.TOPIC_SESSION_STOPPED)
        return session

    async def fail_session(self, session_id: str, reason: str = "") -> Optional[DemoSession]:
        if self.screen is not AppScreen.DASHBOARD:
            return None
        try:
            session = self.sessions.fail_session(session_id, reason)
        except SessionError as e:
            await self.notify_error(e, "Could not update demo", events.TOPIC_SESSION_FAILED)
            return None

        await self.publish(events.TOPIC_SESSION_FAILED, events.create_session_event(session.model_dump(mode="json")))
        await self.notify("Demo session failed", reason or session.title, "warning", events.TOPIC_SESSION_FAILED)
        return session

    # --- Settings actions ---

    async def update_setting(self, category: str, key: str, value: Any) -> bool:
        try:
            stored = self.settings.set(category, key, value)
        except SettingsError as e:
            await self.notify_error(e, "Invalid setting", events.TOPIC_SETTINGS_UPDATED)
            return False

        await self.publish(events.TOPIC_SETTINGS_UPDATED, events.create_settings_updated_event(category, key, stored))
        return True

    def settings_snapshot(self) -> Dict[str, Dict[str, Any]]:
        return self.settings.snapshot()

    async def save_settings(self) -> bool:
        saved = self.settings.save()
        if saved:
            await self.publish(events.TOPIC_SETTINGS_SAVED, {"settings": self.settings.snapshot()})
            await self.notify("Settings saved", "Your preferences have been updated successfully.", "success",
                              events.TOPIC_SETTINGS_SAVED)
        else:
            await self.notify("Settings not saved", "Your preferences could not be stored.", "warning",
                              events.TOPIC_SETTINGS_SAVED)
        return saved

    async def reset_settings(self) -> None:
        self.settings.reset_to_defaults()
        await self.notify("Settings reset", "Defaults restored.", "info", events.TOPIC_SETTINGS_UPDATED)
