"""Settings tree schema.

Each category is a closed pydantic model; fields accept both their snake_case
name and the camelCase name used by the web dashboard (``voiceType``).
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Language = Literal["en-US", "en-GB", "es-ES", "fr-FR", "de-DE", "zh-CN"]
VoiceType = Literal["female", "male", "neutral"]
Theme = Literal["light", "dark", "system"]


class _Category(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
        strict=True,
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class VoiceSettings(_Category):
    """Voice recognition and playback"""

    enabled: bool = True
    language: Language = "en-US"
    sensitivity: int = Field(default=7, ge=1, le=10, json_schema_extra={"step": 1})
    voice_type: VoiceType = "female"
    speed: float = Field(default=1.0, ge=0.5, le=2.0, json_schema_extra={"step": 0.1})


class IntegrationSettings(_Category):
    """Third-party integrations"""

    webhook: str = ""
    slack: bool = False
    zapier: bool = False
    analytics: bool = True


class PreferenceSettings(_Category):
    """General preferences"""

    theme: Theme = "light"
    notifications: bool = True
    auto_save: bool = True
    email_updates: bool = False


class SettingsTree(BaseModel):
    model_config = ConfigDict(extra='forbid', frozen=True)

    voice: VoiceSettings = Field(default_factory=VoiceSettings)
    integrations: IntegrationSettings = Field(default_factory=IntegrationSettings)
    preferences: PreferenceSettings = Field(default_factory=PreferenceSettings)


CATEGORIES = tuple(SettingsTree.model_fields)
