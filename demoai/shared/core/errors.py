"""Error taxonomy for DemoAI.

Every expected failure of a core operation is a ``DemoAIError`` subclass with a
stable ``code``; the console facade turns them into notifications.
"""

from __future__ import annotations

from typing import Optional


class DemoAIError(Exception):
    """Base class for recoverable DemoAI failures."""

    code = "error"
    default_message = "Something went wrong"

    def __init__(self, message: Optional[str] = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


# --- Auth ---

class AuthError(DemoAIError):
    code = "auth_error"
    default_message = "Authentication failed"


class InvalidEmail(AuthError):
    code = "invalid_email"
    default_message = "Please enter a valid email address"


class WeakPassword(AuthError):
    code = "weak_password"
    default_message = "Password must be at least 8 characters"


class PasswordMismatch(AuthError):
    code = "password_mismatch"
    default_message = "Passwords do not match"


class AlreadyInFlight(AuthError):
    code = "already_in_flight"
    default_message = "A sign-in request is already in progress"


class AuthenticationError(AuthError):
    """Reserved for a real backend rejecting valid-looking credentials."""

    code = "authentication_failed"
    default_message = "Invalid email or password"


# --- Sessions ---

class SessionError(DemoAIError):
    code = "session_error"
    default_message = "Demo session error"


class SessionAlreadyActive(SessionError):
    code = "session_already_active"
    default_message = "A demo session is already recording"


class NoSuchSession(SessionError):
    code = "no_such_session"
    default_message = "Demo session not found"

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Demo session '{session_id}' not found")
        self.session_id = session_id


class NotRecording(SessionError):
    code = "not_recording"
    default_message = "Demo session is not recording"

    def __init__(self, session_id: str) -> None:
        super().__init__(f"Demo session '{session_id}' is not recording")
        self.session_id = session_id


class InvalidSessionSet(SessionError):
    code = "invalid_session_set"
    default_message = "At most one demo session may be recording"


# --- Settings ---

class SettingsError(DemoAIError):
    code = "settings_error"
    default_message = "Settings error"


class UnknownCategory(SettingsError):
    code = "unknown_category"

    def __init__(self, category: str) -> None:
        super().__init__(f"Unknown settings category '{category}'")
        self.category = category


class UnknownKey(SettingsError):
    code = "unknown_key"

    def __init__(self, category: str, key: str) -> None:
        super().__init__(f"Unknown setting '{key}' in category '{category}'")
        self.category = category
        self.key = key


class InvalidSettingValue(SettingsError):
    code = "invalid_setting_value"

    def __init__(self, category: str, key: str, value: object, reason: str = "") -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(f"Invalid value {value!r} for {category}.{key}{detail}")
        self.category = category
        self.key = key
        self.value = value
