"""
Per-chain request pace and rescan interval.

Rescan intervals are kept somewhat longer than each chain's average block
time so a scan rarely finds no new blocks.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..chains import Chain


@dataclass(frozen=True)
class ChainPacing:
    """
    Hand-tuned pacing constants for one chain.

    Attributes:
        request_pace_ms: Minimum spacing between block requests. 0 means the
            chain's RPC client rate-limits itself.
        rescan_secs: Pause between checks for new blocks.
    """

    request_pace_ms: int = 500
    rescan_secs: int = 30

    @property
    def rescan_ms(self) -> int:
        return self.rescan_secs * 1000


DEFAULT_PACING = ChainPacing()

PACING_TABLE: Mapping[Chain, ChainPacing] = MappingProxyType(
    {
        Chain.ELROND: ChainPacing(request_pace_ms=1000),  # 6s block time
        # Blocked at 500ms, allowed rate is undocumented
        Chain.OPTIMISM: ChainPacing(request_pace_ms=1000, rescan_secs=10),
        # The Solana client applies its own limiter against public nodes
        Chain.SOLANA: ChainPacing(request_pace_ms=0, rescan_secs=1),
        Chain.INTERNET_COMPUTER: ChainPacing(rescan_secs=1),
        # 6s block time, server rate-limited
        Chain.POLKADOT: ChainPacing(rescan_secs=7),
        Chain.KUSAMA: ChainPacing(rescan_secs=7),
    }
)


def pacing_for(chain: Chain) -> ChainPacing:
    """Return the pacing constants for a chain, falling back to the defaults."""
    return PACING_TABLE.get(chain, DEFAULT_PACING)


def request_pace_ms(chain: Chain) -> int:
    """The pace, in milliseconds, at which blocks should be requested."""
    return pacing_for(chain).request_pace_ms


def rescan_delay_ms(chain: Chain) -> int:
    """Base pause, in milliseconds, between imports of new blocks."""
    return pacing_for(chain).rescan_ms
