"""
Shared Domain Module
====================

Credential validation, settings, demo sessions, auth and navigation.
"""

# Validation
from demoai.shared.domain.validation import is_strong_password, is_valid_email, passwords_match

# Settings
from demoai.shared.domain.settings import SettingsStore, SettingsTree

# Sessions
from demoai.shared.domain.sessions import DemoSession, SessionLifecycle, SessionStats, SessionStatus

# Auth
from demoai.shared.domain.auth import AuthAttempt, AuthFlow, AuthMode, UserIdentity

# Navigation
from demoai.shared.domain.navigation import AppNavigator, AppScreen, DashboardTab

__all__ = [
    # Validation
    "is_valid_email",
    "is_strong_password",
    "passwords_match",
    # Settings
    "SettingsStore",
    "SettingsTree",
    # Sessions
    "DemoSession",
    "SessionLifecycle",
    "SessionStats",
    "SessionStatus",
    # Auth
    "AuthAttempt",
    "AuthFlow",
    "AuthMode",
    "UserIdentity",
    # Navigation
    "AppNavigator",
    "AppScreen",
    "DashboardTab",
]
