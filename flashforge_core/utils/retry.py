"""Retry and concurrency helpers for calls to external generation services."""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from flashforge_core.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 3
DEFAULT_MIN_WAIT = 1  # seconds
DEFAULT_MAX_WAIT = 20  # seconds
DEFAULT_MAX_CONCURRENT_CALLS = 8

# Semaphores are bound to the loop that created them, so keep one per loop.
_loop_semaphores: dict[int, asyncio.Semaphore] = {}


class RateLimitError(Exception):
    """Raised when a remote service reports that its rate limit was hit."""

    def __init__(
        self, message: str = "Rate limit exceeded", retry_after: float | None = None
    ):
        super().__init__(message)
        self.retry_after = retry_after


RETRYABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    ConnectionError,
    TimeoutError,
    asyncio.TimeoutError,
    RateLimitError,
)


def get_call_semaphore(
    max_concurrent: int = DEFAULT_MAX_CONCURRENT_CALLS,
) -> asyncio.Semaphore:
    """Return the semaphore bounding concurrent external calls on this loop.

    Args:
        max_concurrent: Maximum concurrent calls allowed

    Returns:
        Semaphore for the running event loop
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.warning("get_call_semaphore called outside an event loop")
        return asyncio.Semaphore(max_concurrent)

    loop_id = id(loop)
    if loop_id not in _loop_semaphores:
        _loop_semaphores[loop_id] = asyncio.Semaphore(max_concurrent)
        logger.debug(
            f"Created call limiter for loop {loop_id} ({max_concurrent} slots)"
        )
    return _loop_semaphores[loop_id]


def get_async_retry(
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    min_wait: float = DEFAULT_MIN_WAIT,
    max_wait: float = DEFAULT_MAX_WAIT,
    retry_on: tuple[type[BaseException], ...] = RETRYABLE_EXCEPTIONS,
) -> AsyncRetrying:
    """Create the tenacity retry controller used by ``with_retry``.

    Args:
        max_attempts: Maximum number of attempts
        min_wait: Minimum backoff in seconds
        max_wait: Maximum backoff in seconds
        retry_on: Exception types that trigger another attempt

    Returns:
        AsyncRetrying instance
    """
    return AsyncRetrying(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=1, min=min_wait, max=max_wait),
        retry=retry_if_exception_type(retry_on),
        reraise=True,
    )


def describe_exception(e: BaseException) -> str:
    """Render an exception for logs, including its cause and status code."""
    msg = str(e).strip() or type(e).__name__

    if e.__cause__ is not None:
        cause_msg = str(e.__cause__).strip()
        if cause_msg:
            msg = f"{msg} (caused by: {cause_msg})"

    status_code = getattr(e, "status_code", None)
    if status_code is not None:
        msg = f"HTTP {status_code}: {msg}"

    return msg


async def with_retry(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    operation_name: str = "operation",
    use_rate_limit: bool = True,
    min_wait: float = DEFAULT_MIN_WAIT,
    max_wait: float = DEFAULT_MAX_WAIT,
    **kwargs: Any,
) -> T:
    """Run an async callable with bounded retries and optional call limiting.

    Args:
        func: Async callable to execute
        *args: Positional arguments for the callable
        max_attempts: Maximum number of attempts
        operation_name: Name used in log lines
        use_rate_limit: Whether to hold the per-loop call semaphore
        min_wait: Minimum backoff in seconds
        max_wait: Maximum backoff in seconds
        **kwargs: Keyword arguments for the callable

    Returns:
        Result of the callable

    Raises:
        The last exception once attempts are exhausted, or the first
        non-retryable exception
    """
    semaphore = get_call_semaphore() if use_rate_limit else None
    attempt = 0

    async def _execute() -> T:
        if semaphore is not None:
            async with semaphore:
                return await func(*args, **kwargs)
        return await func(*args, **kwargs)

    async for attempt_ctx in get_async_retry(
        max_attempts=max_attempts, min_wait=min_wait, max_wait=max_wait
    ):
        with attempt_ctx:
            attempt += 1
            if attempt > 1:
                logger.info(
                    f"Retrying {operation_name} (attempt {attempt}/{max_attempts})"
                )
            try:
                return await _execute()
            except RETRYABLE_EXCEPTIONS as e:
                logger.warning(
                    f"{operation_name} failed (attempt {attempt}/{max_attempts}): "
                    f"{describe_exception(e)}"
                )
                raise
            except Exception as e:
                logger.error(
                    f"{operation_name} failed with non-retryable error: "
                    f"{describe_exception(e)}"
                )
                raise

    raise RuntimeError(f"{operation_name} failed after {max_attempts} attempts")
