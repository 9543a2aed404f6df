"""Simulated login / sign-up round trip."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

from demoai.shared.core.errors import AlreadyInFlight, AuthError, InvalidEmail, PasswordMismatch, WeakPassword
from demoai.shared.domain.validation import MIN_PASSWORD_LENGTH, is_strong_password, is_valid_email, passwords_match

from .models import AuthAttempt, AuthMode, UserIdentity

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class AuthFlowState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"


class AuthFlow:
    """Validates an attempt and resolves it after a fixed simulated latency.

    Only one submission may be outstanding; a second one is rejected with
    ``AlreadyInFlight`` instead of being queued.
    """

    def __init__(
        self,
        latency_seconds: float = 1.5,
        min_password_length: int = MIN_PASSWORD_LENGTH,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self.latency_seconds = latency_seconds
        self.min_password_length = min_password_length
        self._sleep = sleep or asyncio.sleep
        self.state = AuthFlowState.IDLE

    @property
    def is_submitting(self) -> bool:
        return self.state is AuthFlowState.SUBMITTING

    def validate(self, attempt: AuthAttempt) -> None:
        """Raise the first validation failure for ``attempt``."""
        if not is_valid_email(attempt.email):
            raise InvalidEmail()
        if not is_strong_password(attempt.password, self.min_password_length):
            raise WeakPassword(f"Password must be at least {self.min_password_length} characters")
        if attempt.mode is AuthMode.SIGN_UP and not passwords_match(attempt.password, attempt.confirm_password):
            raise PasswordMismatch()

    async def submit(self, attempt: AuthAttempt) -> UserIdentity:
        if self.is_submitting:
            raise AlreadyInFlight()

        try:
            self.validate(attempt)
        except AuthError as e:
            logger.info(f"Rejected {attempt.mode.value} for {attempt.email!r}: {e}")
            raise

        self.state = AuthFlowState.SUBMITTING
        try:
            # No backend: every valid attempt succeeds after the delay
            await self._sleep(self.latency_seconds)
        except asyncio.CancelledError:
            logger.info(f"Cancelled {attempt.mode.value} for {attempt.email!r}")
            raise
        finally:
            self.state = AuthFlowState.IDLE

        logger.info(f"Signed in {attempt.email!r} ({attempt.mode.value})")
        return UserIdentity(email=attempt.email)
