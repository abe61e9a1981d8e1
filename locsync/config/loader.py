"""Build Settings from the environment plus command line overrides."""

from typing import Any

from pydantic import ValidationError

from locsync.config.settings import Settings
from locsync.errors import ConfigurationError


def load_config(**overrides: Any) -> Settings:
    """Create Settings, letting explicit non-None overrides win over the environment."""
    values = {key: value for key, value in overrides.items() if value is not None}

    try:
        return Settings(**values)
    except ValidationError as e:
        first = e.errors()[0]
        config_key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            f"Invalid configuration: {first.get('msg')}",
            config_key=config_key or None,
            previous_error=e,
        ) from e
