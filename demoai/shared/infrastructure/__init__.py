"""
Shared Infrastructure Module
=============================

Adapters for the host environment (settings storage, speech capability).
"""

from demoai.shared.infrastructure.persistence import (
    InMemorySettingsStorage,
    SettingsStorage,
    YamlSettingsStorage,
)
from demoai.shared.infrastructure.speech import voice_input_available

__all__ = [
    "SettingsStorage",
    "InMemorySettingsStorage",
    "YamlSettingsStorage",
    "voice_input_available",
]
