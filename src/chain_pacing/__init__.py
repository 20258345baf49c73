"""
Chain Pacing - Timing and retry policy for multi-chain block import.

Per-chain request pacing, jittered rescan and lifecycle delays, and bounded
retry executors for RPC calls.
"""

from .chains import Chain, Job, JobKind
from .exceptions import (
    PacingError,
    UnknownChainError,
    InvalidRetryConfigError,
)
from .pacing import (
    ChainPacing,
    pacing_for,
    request_pace_ms,
    rescan_delay_ms,
    jitter_delay,
    rescan_delay,
    job_error_delay,
    recalculate_delay,
    remove_data_delay,
)
from .retry import (
    RetryConfig,
    calculate_backoff,
    retry_if_err,
    retry_if_none,
    async_retry_if_err,
    async_retry_if_none,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Identifiers
    "Chain",
    "Job",
    "JobKind",
    # Exceptions
    "PacingError",
    "UnknownChainError",
    "InvalidRetryConfigError",
    # Pacing
    "ChainPacing",
    "pacing_for",
    "request_pace_ms",
    "rescan_delay_ms",
    "jitter_delay",
    "rescan_delay",
    "job_error_delay",
    "recalculate_delay",
    "remove_data_delay",
    # Retry
    "RetryConfig",
    "calculate_backoff",
    "retry_if_err",
    "retry_if_none",
    "async_retry_if_err",
    "async_retry_if_none",
]
