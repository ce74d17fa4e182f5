"""Secret-number derivation for new games.

The default source, ``BlockHashRandomness``, mixes the previous block's header
hash with the current block height. Both inputs are public before the creating
transaction is mined, so anyone can compute a game's secret before guessing.
It is reproducible for auditing but offers no secrecy. Production deployments
need a committed (commit-reveal) or VRF-backed ``RandomnessSource``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ledger.runtime import TxContext

SEED_BYTES = 16


class RandomnessSource(ABC):
    """Supplies the raw seed used to pick a game's secret number."""

    @abstractmethod
    def seed(self, ctx: TxContext) -> int:
        """Return a non-negative integer seed for the current transaction."""


class BlockHashRandomness(RandomnessSource):
    """Seed = first 16 bytes of the previous header hash (big-endian) XOR block height."""

    def seed(self, ctx: TxContext) -> int:
        hash_prefix = int.from_bytes(ctx.previous_block_hash[:SEED_BYTES], "big")
        return hash_prefix ^ ctx.block_height


class FixedSeedRandomness(RandomnessSource):
    """Always returns the same seed. For tests and replaying recorded games."""

    def __init__(self, value: int):
        if value < 0:
            raise ValueError("Seed value must be >= 0.")
        self.value = value

    def seed(self, ctx: TxContext) -> int:
        return self.value


class RandomnessDeriver:
    """Maps a source seed onto ``[min_number, max_number]``."""

    def __init__(self, source: RandomnessSource | None = None):
        self.source = source or BlockHashRandomness()

    def derive(self, ctx: TxContext, min_number: int, max_number: int) -> int:
        if min_number > max_number:
            raise ValueError("min_number must be <= max_number.")
        span = max_number - min_number + 1
        return min_number + self.source.seed(ctx) % span
