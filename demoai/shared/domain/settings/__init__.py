from .schema import CATEGORIES, IntegrationSettings, PreferenceSettings, SettingsTree, VoiceSettings
from .store import SettingsStore

__all__ = [
    "CATEGORIES",
    "SettingsTree",
    "VoiceSettings",
    "IntegrationSettings",
    "PreferenceSettings",
    "SettingsStore",
]
