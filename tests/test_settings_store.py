"""Tests for demoai/shared/domain/settings/store.py."""

import pytest

from demoai.shared.core.errors import InvalidSettingValue, UnknownCategory, UnknownKey
from demoai.shared.domain.settings import CATEGORIES, SettingsStore
from demoai.shared.infrastructure.persistence import InMemorySettingsStorage


@pytest.fixture
def settings():
    return SettingsStore()


class TestDefaults:

    def test_categories(self):
        assert CATEGORIES == ("voice", "integrations", "preferences")

    def test_voice_defaults(self, settings):
        assert settings.category("voice") == {
            "enabled": True,
            "language": "en-US",
            "sensitivity": 7,
            "voice_type": "female",
            "speed": 1.0,
        }

    def test_preferences_defaults(self, settings):
        assert settings.get("preferences", "theme") == "light"
        assert settings.get("preferences", "auto_save") is True
        assert settings.get("preferences", "email_updates") is False

    def test_camel_case_keys_resolve(self, settings):
        assert settings.get("voice", "voiceType") == "female"
        assert settings.get("preferences", "autoSave") is True


class TestNumericClamping:

    def test_sensitivity_above_max_is_clamped(self, settings):
        settings.set("voice", "sensitivity", 15)
        assert settings.get("voice", "sensitivity") == 10

    def test_sensitivity_below_min_is_clamped(self, settings):
        assert settings.set("voice", "sensitivity", 0) == 1

    def test_sensitivity_snaps_to_whole_steps(self, settings):
        assert settings.set("voice", "sensitivity", 7.6) == 8

    def test_speed_is_clamped_to_range(self, settings):
        assert settings.set("voice", "speed", 3.7) == 2.0
        assert settings.set("voice", "speed", 0.1) == 0.5

    def test_speed_snaps_to_tenths(self, settings):
        assert settings.set("voice", "speed", 1.23) == 1.2

    def test_speed_accepts_integers(self, settings):
        assert settings.set("voice", "speed", 2) == 2.0
        assert isinstance(settings.get("voice", "speed"), float)

    def test_slider_list_value_is_unwrapped(self, settings):
        assert settings.set("voice", "sensitivity", [3]) == 3
        assert settings.set("voice", "speed", [1.5]) == 1.5

    def test_non_numeric_value_is_rejected(self, settings):
        with pytest.raises(InvalidSettingValue):
            settings.set("voice", "sensitivity", "loud")
        with pytest.raises(InvalidSettingValue):
            settings.set("voice", "sensitivity", True)
        assert settings.get("voice", "sensitivity") == 7

    def test_nan_is_rejected(self, settings):
        with pytest.raises(InvalidSettingValue):
            settings.set("voice", "speed", float("nan"))
        with pytest.raises(InvalidSettingValue):
            settings.set("voice", "sensitivity", [float("nan")])
        assert settings.get("voice", "speed") == 1.0

    def test_infinity_is_clamped(self, settings):
        assert settings.set("voice", "speed", float("inf")) == 2.0
        assert settings.set("voice", "sensitivity", float("-inf")) == 1


class TestScopedUpdates:

    def test_update_touches_only_one_key(self, settings):
        before = settings.snapshot()
        settings.set("integrations", "slack", True)
        after = settings.snapshot()

        assert after["integrations"]["slack"] is True
        after["integrations"]["slack"] = False
        assert after == before

    def test_camel_case_write(self, settings):
        settings.set("voice", "voiceType", "male")
        assert settings.get("voice", "voice_type") == "male"

    def test_webhook_accepts_text(self, settings):
        settings.set("integrations", "webhook", "https://hooks.example.com/demo")
        assert settings.get("integrations", "webhook") == "https://hooks.example.com/demo"

    def test_unknown_category(self, settings):
        with pytest.raises(UnknownCategory):
            settings.set("account", "password", "hunter22")
        with pytest.raises(UnknownCategory):
            settings.get("account", "password")

    def test_unknown_key(self, settings):
        with pytest.raises(UnknownKey) as excinfo:
            settings.set("voice", "volume", 5)
        assert excinfo.value.category == "voice"
        assert excinfo.value.key == "volume"

    def test_unknown_enum_member_is_rejected(self, settings):
        with pytest.raises(InvalidSettingValue):
            settings.set("voice", "language", "tlh-KL")
        with pytest.raises(InvalidSettingValue):
            settings.set("preferences", "theme", "neon")
        assert settings.get("voice", "language") == "en-US"

    def test_wrong_type_for_boolean_is_rejected(self, settings):
        with pytest.raises(InvalidSettingValue):
            settings.set("voice", "enabled", "yes")

    def test_update_category_is_all_or_nothing(self, settings):
        with pytest.raises(InvalidSettingValue):
            settings.update_category("preferences", {"theme": "dark", "notifications": "nope"})
        assert settings.get("preferences", "theme") == "light"

        result = settings.update_category("preferences", {"theme": "dark", "emailUpdates": True})
        assert result["theme"] == "dark"
        assert result["email_updates"] is True

    def test_reset_to_defaults(self, settings):
        settings.set("preferences", "theme", "system")
        settings.reset_to_defaults()
        assert settings.get("preferences", "theme") == "light"


class TestPersistence:

    def test_save_without_storage_reports_failure(self, settings):
        assert settings.save() is False
        assert settings.load() is False

    def test_save_writes_snapshot(self):
        storage = InMemorySettingsStorage()
        settings = SettingsStore(storage)
        settings.set("preferences", "theme", "dark")

        assert settings.save() is True
        assert storage.load()["preferences"]["theme"] == "dark"

    def test_load_merges_and_skips_invalid_values(self):
        storage = InMemorySettingsStorage({
            "voice": {"sensitivity": 42, "language": "klingon", "voiceType": "neutral"},
            "preferences": "not-a-mapping",
            "bogus": {"x": 1},
        })
        settings = SettingsStore(storage)

        assert settings.load() is True
        assert settings.get("voice", "sensitivity") == 10
        assert settings.get("voice", "language") == "en-US"
        assert settings.get("voice", "voice_type") == "neutral"
        assert settings.get("preferences", "theme") == "light"

    def test_load_from_empty_storage(self):
        settings = SettingsStore(InMemorySettingsStorage())
        assert settings.load() is False
