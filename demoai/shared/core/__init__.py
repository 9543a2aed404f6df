"""
Shared Core Module
==================

Event system, error taxonomy, time source and configuration.
"""

# Event System
from .event_bus import EventBus, EventPayload
from . import events

# Errors
from . import errors
from .errors import DemoAIError

# Time
from .clock import Clock, FrozenClock, SystemClock

# Configuration
from .configuration import (
    ConfigManager,
    SystemConfig,
    ValidationLevel,
)

__all__ = [
    # Event System
    "EventBus",
    "EventPayload",
    "events",
    # Errors
    "errors",
    "DemoAIError",
    # Time
    "Clock",
    "FrozenClock",
    "SystemClock",
    # Configuration
    "ConfigManager",
    "SystemConfig",
    "ValidationLevel",
]
