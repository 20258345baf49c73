"""
Base exception classes for pacing and retry policy errors.

Failures raised by the operations wrapped in a retry executor are never
converted into these; callers always see the original exception.
"""


class PacingError(Exception):
    """Base exception for all pacing errors."""

    def __init__(self, message: str, *, chain: str | None = None):
        super().__init__(message)
        self.message = message
        self.chain = chain

    def __str__(self) -> str:
        if self.chain:
            return f"[{self.chain}] {self.message}"
        return self.message


class UnknownChainError(PacingError):
    """Raised when a chain name does not match any supported network."""

    def __init__(self, name: str, **kwargs):
        super().__init__(f"Unknown chain: {name!r}", **kwargs)
        self.name = name


class InvalidRetryConfigError(PacingError):
    """Raised when a retry configuration can never run an attempt."""

    def __init__(self, message: str = "Invalid retry configuration", **kwargs):
        super().__init__(message, **kwargs)
