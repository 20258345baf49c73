"""
Retry configuration for the bounded retry executors.
"""

from dataclasses import dataclass

from ..exceptions import InvalidRetryConfigError


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for retry behavior.

    Backoff is linear: the wait after attempt n is base_delay_ms * n.

    Attributes:
        max_attempts: Total number of attempts, including the first (default: 3)
        base_delay_ms: Base delay in milliseconds (default: 500)
    """

    max_attempts: int = 3
    base_delay_ms: int = 500

    def __post_init__(self):
        if self.max_attempts < 1:
            raise InvalidRetryConfigError(
                f"max_attempts must be at least 1, got {self.max_attempts}"
            )
        if self.base_delay_ms < 0:
            raise InvalidRetryConfigError(
                f"base_delay_ms must be non-negative, got {self.base_delay_ms}"
            )

    def backoff_schedule(self) -> list[int]:
        """Delays in milliseconds between consecutive attempts."""
        return [self.base_delay_ms * n for n in range(1, self.max_attempts)]

    @classmethod
    def no_retry(cls) -> "RetryConfig":
        """Preset for no retry (single attempt only)."""
        return cls(max_attempts=1)
