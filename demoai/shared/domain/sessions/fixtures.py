"""Sample sessions shown in demo mode."""

from __future__ import annotations

from datetime import timedelta
from typing import List
from uuid import uuid4

from demoai.shared.core.clock import Clock

from .models import DemoSession, SessionStatus

# (title, days ago, duration seconds, status)
_FIXTURES = [
    ("Onboarding Walkthrough", 0, 138, SessionStatus.ACTIVE),
    ("Product Tour - Landing Page", 1, 332, SessionStatus.COMPLETED),
    ("Feature Demo - Dashboard", 2, 225, SessionStatus.COMPLETED),
    ("API Integration Demo", 4, 441, SessionStatus.COMPLETED),
]


def demo_fixture_sessions(clock: Clock) -> List[DemoSession]:
    """Build the sample session set, newest first, relative to ``clock``."""
    now = clock.now()
    sessions = []
    for title, days_ago, duration, status in _FIXTURES:
        recording = status is SessionStatus.ACTIVE
        sessions.append(
            DemoSession(
                id=uuid4().hex,
                title=title,
                # The recording one started `duration` seconds ago
                created_at=now - timedelta(days=days_ago, seconds=duration if recording else 0),
                duration_seconds=0 if recording else duration,
                status=status,
                is_recording=recording,
            )
        )
    return sessions
