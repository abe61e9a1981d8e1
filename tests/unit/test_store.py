"""
Unit tests for translation file I/O.
"""

import pytest

from locsync.errors import TranslationFileError
from locsync.localization.store import load_translation, save_translation


class TestTranslationStore:
    """Test reading and writing translation files."""

    def test_load_keeps_order(self, write_json, temp_dir):
        write_json("fr.json", {"z": "1", "a": "2", "m": "3"})

        assert list(load_translation(temp_dir / "fr.json")) == ["z", "a", "m"]

    def test_load_missing(self, temp_dir):
        with pytest.raises(TranslationFileError):
            load_translation(temp_dir / "missing.json")

    def test_load_invalid_json(self, temp_dir):
        (temp_dir / "fr.json").write_text('{"a": ', encoding="utf-8")

        with pytest.raises(TranslationFileError) as exc_info:
            load_translation(temp_dir / "fr.json")

        assert "Invalid JSON" in exc_info.value.message

    def test_load_rejects_non_object(self, write_json, temp_dir):
        write_json("fr.json", ["a", "b"])

        with pytest.raises(TranslationFileError):
            load_translation(temp_dir / "fr.json")

    def test_load_rejects_nested_values(self, write_json, temp_dir):
        write_json("fr.json", {"menu": {"open": "Ouvrir"}})

        with pytest.raises(TranslationFileError) as exc_info:
            load_translation(temp_dir / "fr.json")

        assert exc_info.value.context["key"] == "menu"

    def test_save_pretty_prints(self, temp_dir):
        save_translation(temp_dir / "uk.json", {"hi": "Привіт {}"}, indent=4)

        assert (temp_dir / "uk.json").read_text(encoding="utf-8") == '{\n    "hi": "Привіт {}"\n}'
