"""Canonical event definitions for DemoAI."""

from __future__ import annotations

import time
from typing import Any, Dict, Literal

from .event_bus import EventPayload

NotificationLevel = Literal["info", "success", "warning", "error"]

# Shell
TOPIC_NAV_CHANGED = "nav.changed"
TOPIC_NOTIFY = "notify"

# Auth lifecycle
TOPIC_AUTH_SUBMITTING = "auth.submitting"
TOPIC_AUTH_SUCCEEDED = "auth.succeeded"
TOPIC_AUTH_FAILED = "auth.failed"
TOPIC_AUTH_DISCARDED = "auth.discarded"

# Demo sessions
TOPIC_SESSION_STARTED = "session.started"
TOPIC_SESSION_STOPPED = "session.stopped"
TOPIC_SESSION_FAILED = "session.failed"
TOPIC_SESSIONS_RESET = "session.reset"

# Settings
TOPIC_SETTINGS_UPDATED = "settings.updated"
TOPIC_SETTINGS_SAVED = "settings.saved"


def create_notify_event(
    title: str,
    description: str = "",
    level: NotificationLevel = "info",
    topic: str | None = None,
) -> EventPayload:
    """Create a user-facing notification (toast / banner)."""
    return {
        "title": title,
        "description": description,
        "level": level,
        "topic": topic,
        "ts": time.time(),
    }


def create_nav_changed_event(
    screen: str,
    previous: str,
    demo_mode: bool,
    email: str | None = None,
) -> EventPayload:
    """Create a navigation change event."""
    return {
        "screen": screen,
        "previous": previous,
        "demo_mode": demo_mode,
        "email": email,
    }


def create_auth_failed_event(code: str, message: str, mode: str) -> EventPayload:
    """Create an auth failure event from an error code."""
    return {
        "code": code,
        "message": message,
        "mode": mode,
    }


def create_session_event(session: Dict[str, Any]) -> EventPayload:
    """Create a session lifecycle event carrying the serialized session."""
    return {
        "session": session,
    }


def create_settings_updated_event(category: str, key: str, value: Any) -> EventPayload:
    """Create a settings updated event."""
    return {
        "category": category,
        "key": key,
        "value": value,
    }
