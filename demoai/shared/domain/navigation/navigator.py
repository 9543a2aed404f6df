"""Top-level screen state machine.

Landing ──get_started/sign_in──▶ Auth ──submit_auth ok──▶ Dashboard
   │  ▲                            │                          │
   │  └────────cancel_auth─────────┘                          │
   └──────────────try_demo (also from Auth)──────────────▶ Dashboard
   ▲                                                          │
   └───────────────────────────logout─────────────────────────┘

Requests that do not match a transition from the current screen are ignored
and return False.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Optional

from demoai.shared.core.clock import Clock
from demoai.shared.core.errors import AlreadyInFlight
from demoai.shared.domain.auth import AuthAttempt, AuthFlow, AuthMode, UserIdentity
from demoai.shared.domain.sessions import SessionLifecycle, demo_fixture_sessions

logger = logging.getLogger(__name__)


class AppScreen(str, Enum):
    LANDING = "landing"
    AUTH = "auth"
    DASHBOARD = "dashboard"


class DashboardTab(str, Enum):
    DASHBOARD = "dashboard"
    SETTINGS = "settings"


class AppNavigator:
    """Owns the current screen, demo-mode flag and signed-in identity."""

    def __init__(
        self,
        auth_flow: AuthFlow,
        sessions: SessionLifecycle,
        clock: Optional[Clock] = None,
        seed_demo_fixtures: bool = True,
    ) -> None:
        self.auth_flow = auth_flow
        self.sessions = sessions
        self.clock = clock or sessions.clock
        self.seed_demo_fixtures = seed_demo_fixtures

        self.screen = AppScreen.LANDING
        self.demo_mode = False
        self.identity: Optional[UserIdentity] = None
        self.auth_mode = AuthMode.LOGIN
        self.dashboard_tab = DashboardTab.DASHBOARD

        self._auth_task: Optional[asyncio.Task] = None
        self._auth_ticket = 0

    # --- Derived state ---

    @property
    def is_submitting(self) -> bool:
        return self._auth_task is not None and not self._auth_task.done()

    @property
    def can_start_session(self) -> bool:
        return self.screen is AppScreen.DASHBOARD and self.sessions.active_session is None

    def _ignore(self, action: str) -> bool:
        logger.debug(f"Ignoring '{action}' on screen '{self.screen.value}'")
        return False

    def _move(self, target: AppScreen) -> None:
        logger.info(f"Navigation: {self.screen.value} -> {target.value}")
        self.screen = target

    def _invalidate_pending_auth(self) -> None:
        self._auth_ticket += 1
        if self._auth_task is not None and not self._auth_task.done():
            self._auth_task.cancel()
        self._auth_task = None

    def _enter_dashboard(self, identity: Optional[UserIdentity], demo_mode: bool) -> None:
        self.identity = identity
        self.demo_mode = demo_mode
        self.dashboard_tab = DashboardTab.DASHBOARD
        self.sessions.reset()
        if demo_mode and self.seed_demo_fixtures:
            self.sessions.seed(demo_fixture_sessions(self.clock))
        self._move(AppScreen.DASHBOARD)

    # --- Landing / Auth ---

    def get_started(self) -> bool:
        if self.screen is not AppScreen.LANDING:
            return self._ignore("get_started")
        self.auth_mode = AuthMode.SIGN_UP
        self._move(AppScreen.AUTH)
        return True

    def sign_in(self) -> bool:
        if self.screen is not AppScreen.LANDING:
            return self._ignore("sign_in")
        self.auth_mode = AuthMode.LOGIN
        self._move(AppScreen.AUTH)
        return True

    def toggle_auth_mode(self) -> bool:
        if self.screen is not AppScreen.AUTH or self.is_submitting:
            return self._ignore("toggle_auth_mode")
        self.auth_mode = AuthMode.SIGN_UP if self.auth_mode is AuthMode.LOGIN else AuthMode.LOGIN
        return True

    def cancel_auth(self) -> bool:
        if self.screen is not AppScreen.AUTH:
            return self._ignore("cancel_auth")
        self._invalidate_pending_auth()
        self._move(AppScreen.LANDING)
        return True

    def try_demo(self) -> bool:
        if self.screen not in (AppScreen.LANDING, AppScreen.AUTH):
            return self._ignore("try_demo")
        self._invalidate_pending_auth()
        self._enter_dashboard(identity=None, demo_mode=True)
        return True

    async def submit_auth(self, attempt: AuthAttempt) -> Optional[UserIdentity]:
        """Run the auth flow and enter the dashboard on success.

        Returns None when the request is ignored (not on the auth screen) or
        when the user navigated away before the result arrived. Validation
        failures propagate as ``AuthError``.
        """
        if self.screen is not AppScreen.AUTH:
            self._ignore("submit_auth")
            return None

        if self.is_submitting or self.auth_flow.is_submitting:
            raise AlreadyInFlight()

        self._auth_ticket += 1
        ticket = self._auth_ticket
        task = asyncio.ensure_future(self.auth_flow.submit(attempt))
        self._auth_task = task

        try:
            identity = await task
        except asyncio.CancelledError:
            if task.cancelled() and ticket != self._auth_ticket:
                logger.info(f"Discarded sign-in for {attempt.email!r}: navigated away")
                return None
            raise
        finally:
            if self._auth_task is task:
                self._auth_task = None

        if ticket != self._auth_ticket or self.screen is not AppScreen.AUTH:
            logger.info(f"Discarded stale sign-in result for {attempt.email!r}")
            return None

        self._enter_dashboard(identity=identity, demo_mode=False)
        return identity

    # --- Dashboard ---

    def select_tab(self, tab: DashboardTab) -> bool:
        if self.screen is not AppScreen.DASHBOARD:
            return self._ignore("select_tab")
        self.dashboard_tab = DashboardTab(tab)
        return True

    def logout(self) -> bool:
        if self.screen is not AppScreen.DASHBOARD:
            return self._ignore("logout")
        self.identity = None
        self.demo_mode = False
        self.dashboard_tab = DashboardTab.DASHBOARD
        self.sessions.reset()
        self._move(AppScreen.LANDING)
        return True
