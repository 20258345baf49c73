"""
Chain Pacing - Chain and Job identifiers.
"""

from .base import Chain, Job, JobKind

__all__ = [
    "Chain",
    "Job",
    "JobKind",
]
