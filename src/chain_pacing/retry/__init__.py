"""
Chain Pacing - Retry Logic.

Bounded retry executors with linear backoff and jitter.
"""

from .config import RetryConfig
from .backoff import (
    calculate_backoff,
    retry_if_err,
    retry_if_none,
    async_retry_if_err,
    async_retry_if_none,
)

__all__ = [
    "RetryConfig",
    "calculate_backoff",
    "retry_if_err",
    "retry_if_none",
    "async_retry_if_err",
    "async_retry_if_none",
]
