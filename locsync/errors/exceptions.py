"""
Error hierarchy for locsync.

Every fatal condition the tool can hit is a LocSyncError subclass carrying a
message, a stable error code and a context dict. Content problems found while
merging or validating are not exceptions: they are collected in the Report.
"""

from typing import Any, Dict, Optional


class LocSyncError(Exception):
    """
    Base exception for all locsync errors.

    Holds the context needed to log the failure in a structured way.
    """

    exit_code = 2

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.previous_error = previous_error

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class UsageError(LocSyncError):
    """Missing or unknown command on the command line."""

    exit_code = 1

    def __init__(self, message: str, command: Optional[str] = None, **kwargs):
        super().__init__(message, context={"command": command}, **kwargs)


class ConfigurationError(LocSyncError):
    """Configuration-related errors."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"config_key": config_key}, **kwargs)


class ManifestError(LocSyncError):
    """The manifest is missing, unreadable or inconsistent."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, context={"path": path}, **kwargs)
        self.path = path


class TranslationFileError(LocSyncError):
    """A translation file is missing, unreadable or not a flat string mapping."""

    def __init__(self, message: str, path: Optional[str] = None, key: Optional[str] = None, **kwargs):
        super().__init__(message, context={"path": path, "key": key}, **kwargs)
        self.path = path
