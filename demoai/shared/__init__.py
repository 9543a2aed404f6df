"""
DemoAI Shared Kernel
====================

Application state logic shared by every DemoAI front-end.

Architecture:
- core: EventBus, events, errors, clock, configuration
- infrastructure: Host adapters (settings storage, speech probe)
- domain: Validation, settings, sessions, auth, navigation
"""

__all__ = []
