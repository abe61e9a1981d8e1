"""Manifest model: which translation files exist and which one is the source of truth."""

import json
from pathlib import Path
from typing import Dict, List, Type, TypeVar

import structlog
from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from locsync.errors import ManifestError

logger = structlog.get_logger(__name__)


class TranslationEntry(BaseModel):
    """One language's entry in the manifest."""

    model_config = ConfigDict(extra="allow")

    file: str


class TranslationIndex(BaseModel):
    """The ``translations`` table of a manifest, without any default language rules.

    Previous manifests are only read through this model.
    """

    model_config = ConfigDict(extra="allow")

    translations: Dict[str, TranslationEntry]

    def files(self) -> List[str]:
        return [entry.file for entry in self.translations.values()]


class Manifest(TranslationIndex):
    """Parsed manifest (``index.json``)."""

    default_lang: str

    @model_validator(mode="after")
    def default_lang_registered(self) -> "Manifest":
        if self.default_lang not in self.translations:
            raise ValueError(f"default_lang '{self.default_lang}' has no entry in translations")
        return self

    @property
    def source_file(self) -> str:
        """File name of the source-of-truth language."""
        return self.translations[self.default_lang].file

    def target_files(self) -> List[str]:
        """Every translation file except the source one, in declared order."""
        source = self.source_file
        return [file for file in self.files() if file != source]


M = TypeVar("M", bound=TranslationIndex)


def load_manifest(path: Path, model: Type[M] = Manifest) -> M:
    """Read a manifest file and validate it against ``model``."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ManifestError(f"Manifest not found: {path}", path=str(path), previous_error=e) from e
    except json.JSONDecodeError as e:
        raise ManifestError(
            f"Invalid JSON in manifest {path}: line {e.lineno}, column {e.colno}",
            path=str(path),
            previous_error=e,
        ) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}", path=str(path), previous_error=e) from e

    try:
        manifest = model.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest {path}: {e.errors()[0]['msg']}", path=str(path), previous_error=e) from e

    logger.debug("Loaded manifest", file=str(path), languages=len(manifest.translations))
    return manifest
