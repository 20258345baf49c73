"""
Chain Pacing - Exception Hierarchy.
"""

from .base import (
    PacingError,
    UnknownChainError,
    InvalidRetryConfigError,
)

__all__ = [
    "PacingError",
    "UnknownChainError",
    "InvalidRetryConfigError",
]
