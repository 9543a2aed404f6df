from .fixtures import demo_fixture_sessions
from .lifecycle import SessionLifecycle
from .models import DemoSession, SessionStats, SessionStatus

__all__ = ["DemoSession", "SessionStats", "SessionStatus", "SessionLifecycle", "demo_fixture_sessions"]
