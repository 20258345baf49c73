"""
Chain and job identifiers shared with the importer.

The scheduler owns these values; the pacing core only matches on chains to
pick constants and formats jobs into log lines.
"""

from dataclasses import dataclass
from enum import Enum

from ..exceptions import UnknownChainError


class Chain(str, Enum):
    """Supported blockchain networks."""

    ALGORAND = "algorand"
    ARBITRUM = "arbitrum"
    AVALANCHE = "avalanche"
    BINANCE = "binance"
    CELO = "celo"
    CRONOS = "cronos"
    ELROND = "elrond"
    ETHEREUM = "ethereum"
    FANTOM = "fantom"
    HARMONY = "harmony"
    INTERNET_COMPUTER = "internet-computer"
    KUSAMA = "kusama"
    NEAR = "near"
    OPTIMISM = "optimism"
    POLKADOT = "polkadot"
    POLYGON = "polygon"
    ROOTSTOCK = "rootstock"
    SOLANA = "solana"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, name: str) -> "Chain":
        """Look up a chain by its display name, ignoring case and underscores."""
        key = name.strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError:
            raise UnknownChainError(name) from None


class JobKind(str, Enum):
    """Units of work the importer schedules."""

    IMPORT_MOST_RECENT = "import-most-recent"
    IMPORT_BLOCKS = "import-blocks"
    CALCULATE = "calculate"
    REMOVE_OLD_DATA = "remove-old-data"


@dataclass(frozen=True)
class Job:
    """A unit of import work, used here only as a log label."""

    kind: JobKind
    chain: Chain | None = None

    def __str__(self) -> str:
        if self.chain is None:
            return self.kind.value
        return f"{self.kind.value}({self.chain})"
