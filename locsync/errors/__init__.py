"""
Error handling for locsync.

- Structured error hierarchy for fatal conditions
- Logging decorator that records context and re-raises
"""

from .exceptions import (
    LocSyncError,
    UsageError,
    ConfigurationError,
    ManifestError,
    TranslationFileError,
)

from .decorators import log_errors

__all__ = [
    # Exceptions
    "LocSyncError",
    "UsageError",
    "ConfigurationError",
    "ManifestError",
    "TranslationFileError",

    # Decorators
    "log_errors",
]
