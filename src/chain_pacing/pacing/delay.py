"""
Jittered delays for the importer's scan and job lifecycle.
"""

import asyncio
import logging
import random

from .table import rescan_delay_ms
from ..chains import Chain, Job

logger = logging.getLogger(__name__)

JITTER_MS = 10
JOB_ERROR_DELAY_MS = 1000
RECALCULATE_DELAY_MS = 5000
REMOVE_DATA_DELAY_MS = 24 * 60 * 60 * 1000


async def jitter_delay(base_ms: int) -> None:
    """
    Sleep for base_ms plus a random 0-9 ms of jitter.

    Args:
        base_ms: Minimum delay in milliseconds
    """
    if base_ms < 0:
        raise ValueError(f"delay must be non-negative, got {base_ms} ms")
    delay_ms = base_ms + random.randrange(JITTER_MS)
    await asyncio.sleep(delay_ms / 1000)


async def rescan_delay(chain: Chain) -> None:
    """Wait before checking a chain for new blocks again."""
    msecs = rescan_delay_ms(chain)
    logger.debug(f"delaying {msecs} ms to rescan chain {chain}")
    await jitter_delay(msecs)


async def job_error_delay(job: Job) -> None:
    msecs = JOB_ERROR_DELAY_MS
    logger.debug(f"delaying {msecs} ms to retry job {job}")
    await jitter_delay(msecs)


async def recalculate_delay() -> None:
    msecs = RECALCULATE_DELAY_MS
    logger.debug(f"delaying {msecs} ms before recalculating")
    await jitter_delay(msecs)


async def remove_data_delay() -> None:
    msecs = REMOVE_DATA_DELAY_MS
    logger.debug(f"delaying {msecs} ms to remove old blocks")
    await jitter_delay(msecs)
