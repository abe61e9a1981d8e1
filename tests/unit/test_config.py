"""
Unit tests for settings loading.
"""

import pytest

from locsync.config import Settings, load_config
from locsync.errors import ConfigurationError


class TestConfig:
    """Test settings loading."""

    def test_defaults(self, monkeypatch, temp_dir):
        monkeypatch.chdir(temp_dir)

        settings = load_config()

        assert str(settings.manifest_path) == "index.json"
        assert str(settings.result_file) == ".result.json"
        assert settings.placeholder_patterns == ["{}", "%"]
        assert settings.indent == 4

    def test_none_overrides_ignored(self, monkeypatch, temp_dir):
        monkeypatch.chdir(temp_dir)

        settings = load_config(manifest_path=None, debug=None)

        assert str(settings.manifest_path) == "index.json"
        assert settings.debug is False

    def test_environment(self, monkeypatch, temp_dir):
        monkeypatch.chdir(temp_dir)
        monkeypatch.setenv("LOCSYNC_MANIFEST_PATH", "locales/index.json")
        monkeypatch.setenv("LOCSYNC_PLACEHOLDER_PATTERNS", '["{}", "%s"]')

        settings = load_config()

        assert str(settings.manifest_path) == "locales/index.json"
        assert settings.placeholder_patterns == ["{}", "%s"]

    def test_empty_pattern_rejected(self, monkeypatch, temp_dir):
        monkeypatch.chdir(temp_dir)

        with pytest.raises(ConfigurationError) as exc_info:
            load_config(placeholder_patterns=["{}", ""])

        assert exc_info.value.context["config_key"] == "placeholder_patterns"

    def test_resolve(self, temp_dir):
        settings = Settings(base_dir=temp_dir)

        assert settings.resolve("fr.json") == temp_dir / "fr.json"
