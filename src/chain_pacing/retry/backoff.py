"""
Backoff calculation and bounded retry executors.

Two executors share one linear backoff:

- retry_if_err retries any exception raised by the operation.
- retry_if_none retries only when the operation returns None; exceptions
  propagate on the first attempt.
"""

import functools
import logging
from typing import Awaitable, Callable, ParamSpec, TypeVar

from .config import RetryConfig
from ..chains import Chain
from ..pacing.delay import jitter_delay

logger = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")

OnRetry = Callable[[int, Exception | None, int], None]


def calculate_backoff(attempt: int, config: RetryConfig) -> int:
    """
    Calculate the delay after a failed attempt.

    Args:
        attempt: One-based number of the attempt that just failed
        config: Retry configuration

    Returns:
        Delay in milliseconds, before jitter
    """
    return config.base_delay_ms * attempt


async def retry_if_err(
    chain: Chain,
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
) -> T:
    """
    Run an operation, retrying whenever it raises.

    The exception from the last attempt is re-raised unchanged. No delay
    follows the last attempt.

    Args:
        chain: Chain the operation talks to, for logging
        operation: Zero-argument callable returning a fresh awaitable per call
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, exception, delay_ms) called
            instead of logging before each retry

    Returns:
        The operation's result
    """
    if config is None:
        config = RetryConfig()

    for attempt in range(1, config.max_attempts + 1):
        try:
            return await operation()
        except Exception as e:
            if attempt >= config.max_attempts:
                raise
            delay_ms = calculate_backoff(attempt, config)
            if on_retry:
                on_retry(attempt, e, delay_ms)
            else:
                logger.warning(
                    f"for chain {chain} received err {e}. retrying in {delay_ms} ms"
                )
            await jitter_delay(delay_ms)

    raise RuntimeError("Retry loop exited unexpectedly")


async def retry_if_none(
    chain: Chain,
    operation: Callable[[], Awaitable[T | None]],
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
) -> T | None:
    """
    Run an operation, retrying while it returns None.

    Exceptions are not retried. Returns None once every attempt came back
    empty.

    Args:
        chain: Chain the operation talks to, for logging
        operation: Zero-argument callable returning a fresh awaitable per call
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, None, delay_ms) called instead
            of logging before each retry

    Returns:
        The first non-None result, or None
    """
    if config is None:
        config = RetryConfig()

    for attempt in range(1, config.max_attempts + 1):
        value = await operation()
        if value is not None:
            return value
        if attempt >= config.max_attempts:
            break
        delay_ms = calculate_backoff(attempt, config)
        if on_retry:
            on_retry(attempt, None, delay_ms)
        else:
            logger.warning(f"for chain {chain} received None. retrying in {delay_ms} ms")
        await jitter_delay(delay_ms)

    return None


def async_retry_if_err(
    chain: Chain,
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[T]]]:
    """
    Decorator running every call of an async function through retry_if_err.

    Args:
        chain: Chain the function talks to, for logging
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, exception, delay_ms)

    Returns:
        Decorated async function with retry behavior
    """

    def decorator(func: Callable[P, Awaitable[T]]) -> Callable[P, Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            return await retry_if_err(
                chain, lambda: func(*args, **kwargs), config, on_retry
            )

        return wrapper

    return decorator


def async_retry_if_none(
    chain: Chain,
    config: RetryConfig | None = None,
    on_retry: OnRetry | None = None,
) -> Callable[[Callable[P, Awaitable[T | None]]], Callable[P, Awaitable[T | None]]]:
    """
    Decorator running every call of an async function through retry_if_none.

    Args:
        chain: Chain the function talks to, for logging
        config: Retry configuration (default: RetryConfig())
        on_retry: Optional callback(attempt, None, delay_ms)

    Returns:
        Decorated async function with retry behavior
    """

    def decorator(
        func: Callable[P, Awaitable[T | None]]
    ) -> Callable[P, Awaitable[T | None]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> T | None:
            return await retry_if_none(
                chain, lambda: func(*args, **kwargs), config, on_retry
            )

        return wrapper

    return decorator
