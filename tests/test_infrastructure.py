"""Tests for demoai/shared/infrastructure (settings storage, speech probe)."""

from demoai.shared.infrastructure.persistence import InMemorySettingsStorage, YamlSettingsStorage
from demoai.shared.infrastructure.speech import voice_input_available


class TestYamlSettingsStorage:

    def test_missing_file_loads_empty(self, tmp_path):
        assert YamlSettingsStorage(tmp_path / "absent.yaml").load() == {}

    def test_round_trip_creates_parent_directories(self, tmp_path):
        storage = YamlSettingsStorage(tmp_path / "settings" / "user.yaml")
        tree = {"voice": {"sensitivity": 9, "speed": 1.5}, "preferences": {"theme": "dark"}}

        assert storage.save(tree) is True
        assert storage.load() == tree

    def test_corrupt_file_loads_empty(self, tmp_path):
        path = tmp_path / "user.yaml"
        path.write_text("voice: {sensitivity: [", encoding="utf-8")
        assert YamlSettingsStorage(path).load() == {}

    def test_undecodable_file_loads_empty(self, tmp_path):
        path = tmp_path / "user.yaml"
        path.write_bytes(b"voice:\n  language: \xff\xfe\n")
        assert YamlSettingsStorage(path).load() == {}

    def test_non_mapping_loads_empty(self, tmp_path):
        path = tmp_path / "user.yaml"
        path.write_text("- just\n- a list\n", encoding="utf-8")
        assert YamlSettingsStorage(path).load() == {}

    def test_unwritable_location_reports_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        assert YamlSettingsStorage(blocker / "user.yaml").save({"voice": {}}) is False


class TestInMemorySettingsStorage:

    def test_returns_copies(self):
        storage = InMemorySettingsStorage()
        tree = {"voice": {"sensitivity": 3}}
        storage.save(tree)
        tree["voice"]["sensitivity"] = 9

        loaded = storage.load()
        assert loaded == {"voice": {"sensitivity": 3}}
        loaded["voice"]["sensitivity"] = 1
        assert storage.load() == {"voice": {"sensitivity": 3}}


class TestSpeechProbe:

    def test_override_wins(self):
        assert voice_input_available(True, modules=()) is True
        assert voice_input_available(False, modules=("json",)) is False

    def test_detects_installed_module(self):
        assert voice_input_available(modules=("definitely_missing_audio_mod", "json")) is True

    def test_nothing_installed(self):
        assert voice_input_available(modules=("definitely_missing_audio_mod",)) is False
