"""Reading and writing translation files."""

import json
from pathlib import Path
from typing import Dict, Mapping

import structlog

from locsync.errors import TranslationFileError

logger = structlog.get_logger(__name__)


def read_json(path: Path):
    """Parse a UTF-8 JSON file, raising TranslationFileError on any failure."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise TranslationFileError(f"File not found: {path}", path=str(path), previous_error=e) from e
    except json.JSONDecodeError as e:
        raise TranslationFileError(
            f"Invalid JSON in {path}: line {e.lineno}, column {e.colno}",
            path=str(path),
            previous_error=e,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise TranslationFileError(f"Cannot read {path}: {e}", path=str(path), previous_error=e) from e


def load_translation(path: Path) -> Dict[str, str]:
    """Load a flat string-to-string translation mapping, keeping key order."""
    data = read_json(path)

    if not isinstance(data, dict):
        raise TranslationFileError(f"{path} must contain a JSON object", path=str(path))

    for key, value in data.items():
        if not isinstance(value, str):
            raise TranslationFileError(
                f"{path}[{key}]: value must be a string, got {type(value).__name__}",
                path=str(path),
                key=key,
            )

    logger.debug("Loaded translation", file=str(path), keys=len(data))
    return data


def dump_json(data, indent: int = 4) -> str:
    return json.dumps(data, indent=indent, ensure_ascii=False)


def save_translation(path: Path, mapping: Mapping[str, str], indent: int = 4) -> None:
    """Write a translation mapping as pretty-printed JSON in its current key order."""
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(dump_json(dict(mapping), indent=indent))
    except OSError as e:
        raise TranslationFileError(f"Cannot write {path}: {e}", path=str(path), previous_error=e) from e

    logger.info("Saved translation", file=str(path), keys=len(mapping))
