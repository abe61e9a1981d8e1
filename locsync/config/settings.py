"""Runtime settings for locsync."""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from the environment (``LOCSYNC_*``) or a ``.env`` file."""

    # Files
    manifest_path: Path = Field(default=Path("index.json"), description="Manifest listing every translation file")
    result_file: Path = Field(default=Path(".result.json"), description="Where the run report is written")
    base_dir: Path = Field(default=Path("."), description="Directory translation file names are relative to")

    # Checks
    placeholder_patterns: List[str] = Field(default_factory=lambda: ["{}", "%"])

    # Output
    indent: int = Field(default=4, ge=0)
    debug: bool = False

    model_config = SettingsConfigDict(env_prefix="LOCSYNC_", env_file=".env", extra="ignore")

    @field_validator("placeholder_patterns")
    @classmethod
    def patterns_not_empty(cls, value: List[str]) -> List[str]:
        if not value:
            raise ValueError("at least one placeholder pattern is required")
        if any(pattern == "" for pattern in value):
            raise ValueError("placeholder patterns must not be empty strings")
        return value

    def resolve(self, filename: str) -> Path:
        """Path of a manifest-declared file name."""
        return self.base_dir / filename
