"""
Error logging decorator for locsync.

Fatal errors are never swallowed: the decorator records them through
structlog and lets them propagate to the CLI.
"""

import functools
from typing import Any, Callable, Optional

import structlog

from .exceptions import LocSyncError

logger = structlog.get_logger(__name__)


def log_errors(
    level: str = "error",
    operation_name: Optional[str] = None,
):
    """
    Decorator to log errors with context before re-raising them.

    Args:
        level: Log level (debug, info, warning, error, critical)
        operation_name: Custom operation name for logging
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            op_name = operation_name or f"{func.__module__}.{func.__name__}"

            try:
                return func(*args, **kwargs)
            except LocSyncError as e:
                log_method = getattr(logger, level.lower(), logger.error)

                log_data = {
                    "operation": op_name,
                    "error_type": type(e).__name__,
                    "error_code": e.error_code,
                    "error": e.message,
                    **{k: v for k, v in e.context.items() if v is not None},
                }

                log_method("Error in operation", **log_data)
                raise

        return wrapper

    return decorator
