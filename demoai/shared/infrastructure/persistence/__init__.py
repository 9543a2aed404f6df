"""Persistence adapters."""

from .settings_storage import InMemorySettingsStorage, SettingsStorage, YamlSettingsStorage

__all__ = ["SettingsStorage", "InMemorySettingsStorage", "YamlSettingsStorage"]
