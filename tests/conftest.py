"""
Pytest configuration and fixtures for locsync tests.
"""

import json
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from locsync.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> Settings:
    """Settings pointing every file at the temporary directory."""
    return Settings(
        manifest_path=temp_dir / "index.json",
        result_file=temp_dir / ".result.json",
        base_dir=temp_dir,
        placeholder_patterns=["{}", "%"],
        indent=4,
        debug=False,
    )


@pytest.fixture
def write_json(temp_dir: Path):
    """Helper to write JSON files into the temporary directory."""
    def _write(filename: str, data) -> Path:
        file_path = temp_dir / filename
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(data, indent=4, ensure_ascii=False), encoding="utf-8")
        return file_path
    return _write


@pytest.fixture
def read_json(temp_dir: Path):
    """Helper to read JSON files back from the temporary directory."""
    def _read(filename: str):
        return json.loads((temp_dir / filename).read_text(encoding="utf-8"))
    return _read


@pytest.fixture
def manifest_data() -> dict:
    """Manifest with English as the default language and two translations."""
    return {
        "default_lang": "en",
        "translations": {
            "en": {"file": "en.json", "name": "English"},
            "fr": {"file": "fr.json", "name": "Français"},
            "de": {"file": "de.json", "name": "Deutsch"},
        },
    }


@pytest.fixture
def sample_project(write_json, manifest_data):
    """Manifest plus source and target translation files on disk."""
    write_json("index.json", manifest_data)
    write_json("en.json", {
        "greet": "Hello {}",
        "bye": "Goodbye",
        "progress": "{}% done",
    })
    write_json("fr.json", {
        "greet": "Salut {}",
        "bye": "Au revoir",
        "progress": "{}% terminé",
    })
    write_json("de.json", {
        "greet": "Hallo",
        "bye": "Goodbye",
        "stale": "Alt",
    })
    return manifest_data
