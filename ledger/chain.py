"""Block height and header-hash source for the in-process ledger."""

from __future__ import annotations

import hashlib
import logging

logger = logging.getLogger(__name__)


def _header_hash(previous_hash: bytes, height: int) -> bytes:
    return hashlib.sha256(previous_hash + height.to_bytes(8, "big")).digest()


class Chain:
    """Monotonic block counter with deterministic header hashes.

    Block 0 is the genesis block. The block currently being assembled has
    height ``block_height``; every block below it is finalized and has a
    header hash.
    """

    def __init__(self, genesis_seed: str):
        genesis = hashlib.sha256(genesis_seed.encode("utf-8")).digest()
        self._hashes: list[bytes] = [genesis]

    @property
    def block_height(self) -> int:
        """Height of the block currently accepting transactions."""
        return len(self._hashes)

    def header_hash(self, height: int) -> bytes | None:
        """Return the header hash of a finalized block, or None."""
        if 0 <= height < len(self._hashes):
            return self._hashes[height]
        return None

    def previous_block_hash(self) -> bytes:
        """Return the hash of the most recently finalized block."""
        return self._hashes[-1]

    def mine_block(self) -> int:
        """Finalize the current block and return the new current height."""
        height = self.block_height
        self._hashes.append(_header_hash(self._hashes[-1], height))
        logger.debug("Mined block %d", height)
        return self.block_height

    def mine_blocks(self, count: int) -> int:
        """Finalize ``count`` blocks in a row."""
        if count < 0:
            raise ValueError("count must be >= 0.")
        for _ in range(count):
            self.mine_block()
        return self.block_height
