"""Tests for demoai/shared/domain/auth/flow.py."""

import asyncio

import pytest

from demoai.shared.core.errors import AlreadyInFlight, InvalidEmail, PasswordMismatch, WeakPassword
from demoai.shared.domain.auth import AuthAttempt, AuthFlow, AuthFlowState, AuthMode, UserIdentity

from tests.helpers import GatedSleep, wait_for


def login(email="ada@example.com", password="correct-horse"):
    return AuthAttempt(email=email, password=password, mode=AuthMode.LOGIN)


def signup(email="ada@example.com", password="correct-horse", confirm="correct-horse"):
    return AuthAttempt(email=email, password=password, confirm_password=confirm, mode=AuthMode.SIGN_UP)


class TestValidationOrder:

    @pytest.mark.asyncio
    async def test_invalid_email_wins_over_weak_password(self, auth_flow):
        with pytest.raises(InvalidEmail):
            await auth_flow.submit(login(email="not-an-email", password="short"))

    @pytest.mark.asyncio
    async def test_weak_password(self, auth_flow):
        with pytest.raises(WeakPassword):
            await auth_flow.submit(login(password="1234567"))

    @pytest.mark.asyncio
    async def test_weak_password_wins_over_mismatch(self, auth_flow):
        with pytest.raises(WeakPassword):
            await auth_flow.submit(signup(password="short", confirm="other"))

    @pytest.mark.asyncio
    async def test_signup_requires_matching_confirmation(self, auth_flow):
        with pytest.raises(PasswordMismatch):
            await auth_flow.submit(signup(confirm="correct-horses"))

    @pytest.mark.asyncio
    async def test_login_ignores_confirmation(self, auth_flow):
        attempt = AuthAttempt(email="ada@example.com", password="correct-horse", confirm_password="x")
        assert await auth_flow.submit(attempt) == UserIdentity(email="ada@example.com")

    @pytest.mark.asyncio
    async def test_validation_failure_skips_latency(self, auth_flow, no_sleep):
        with pytest.raises(InvalidEmail):
            await auth_flow.submit(login(email="bad"))
        assert no_sleep.calls == []
        assert auth_flow.state is AuthFlowState.IDLE

    def test_password_not_in_repr(self):
        assert "correct-horse" not in repr(signup())


class TestSubmission:

    @pytest.mark.asyncio
    async def test_success_returns_identity_after_latency(self, auth_flow, no_sleep):
        identity = await auth_flow.submit(signup())

        assert identity.email == "ada@example.com"
        assert identity.display_name == "ada"
        assert no_sleep.calls == [1.5]
        assert auth_flow.state is AuthFlowState.IDLE

    @pytest.mark.asyncio
    async def test_concurrent_submit_is_rejected(self):
        gate = GatedSleep()
        flow = AuthFlow(latency_seconds=1.5, sleep=gate)

        first = asyncio.create_task(flow.submit(login()))
        assert await wait_for(lambda: flow.is_submitting)

        with pytest.raises(AlreadyInFlight):
            await flow.submit(login(email="grace@example.com"))

        gate.release()
        assert (await first).email == "ada@example.com"
        assert flow.state is AuthFlowState.IDLE
        assert gate.calls == [1.5]

    @pytest.mark.asyncio
    async def test_cancellation_returns_to_idle(self):
        gate = GatedSleep()
        flow = AuthFlow(sleep=gate)

        task = asyncio.create_task(flow.submit(login()))
        assert await wait_for(lambda: flow.is_submitting)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert flow.state is AuthFlowState.IDLE

    @pytest.mark.asyncio
    async def test_custom_password_length(self, no_sleep):
        flow = AuthFlow(min_password_length=12, sleep=no_sleep)
        with pytest.raises(WeakPassword) as excinfo:
            await flow.submit(login(password="elevenchars"))
        assert "12" in str(excinfo.value)
