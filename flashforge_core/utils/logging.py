"""Logging for flashforge_core.

Every module gets its logger from ``get_logger(__name__)``. Records go to
stdout in one plain format, and the default level comes from the
``FLASHFORGE_LOG_LEVEL`` environment variable (``INFO`` when unset).
"""

import asyncio
import logging
import os
import sys
from functools import wraps
from typing import Any, Callable, TypeVar

_LOG_LEVEL = os.environ.get("FLASHFORGE_LOG_LEVEL", "INFO").upper()
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

F = TypeVar("F", bound=Callable[..., Any])


def get_logger(name: str, level: int | None = None) -> logging.Logger:
    """Return a pipeline logger writing to stdout.

    The handler is attached once per logger name, so repeated imports of a
    module do not duplicate lines.

    Args:
        name: Logger name, normally the module's ``__name__``
        level: Level for this logger; defaults to ``FLASHFORGE_LOG_LEVEL``

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)

    if level is not None:
        logger.setLevel(level)
    elif logger.level == logging.NOTSET:
        logger.setLevel(getattr(logging, _LOG_LEVEL, logging.INFO))

    return logger


def log_exceptions(logger: logging.Logger) -> Callable[[F], F]:
    """Log a failed pipeline stage under its function name, then re-raise.

    Works on both plain functions and coroutines, e.g. ``extract_upload``.
    Cancellation is not logged.

    Args:
        logger: Logger of the module that owns the stage

    Returns:
        Decorator
    """

    def decorator(func: F) -> F:
        if asyncio.iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    logger.error(f"{func.__name__} failed: {e}")
                    raise

            return async_wrapper  # type: ignore

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"{func.__name__} failed: {e}")
                raise

        return sync_wrapper  # type: ignore

    return decorator
