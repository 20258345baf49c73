"""
Chain Pacing - Delays and per-chain pacing constants.
"""

from .table import (
    ChainPacing,
    DEFAULT_PACING,
    PACING_TABLE,
    pacing_for,
    request_pace_ms,
    rescan_delay_ms,
)
from .delay import (
    jitter_delay,
    rescan_delay,
    job_error_delay,
    recalculate_delay,
    remove_data_delay,
)

__all__ = [
    "ChainPacing",
    "DEFAULT_PACING",
    "PACING_TABLE",
    "pacing_for",
    "request_pace_ms",
    "rescan_delay_ms",
    "jitter_delay",
    "rescan_delay",
    "job_error_delay",
    "recalculate_delay",
    "remove_data_delay",
]
