"""Helpers behind the ``bor_*`` RPC methods and their errors."""

from __future__ import annotations

from typing import Sequence

from Crypto.Hash import keccak

HASH_LENGTH = 32
ZERO_HASH = bytes(HASH_LENGTH)


class BorRpcError(Exception):
    """Base error for Bor RPC methods."""


class BlockNotFoundError(BorRpcError):
    """The requested block does not exist."""

    def __init__(self, block_number: int) -> None:
        self.block_number = block_number
        super().__init__(f"block not found: {block_number}")


class ExtraDataError(BorRpcError):
    """A header's extra data could not be parsed."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"invalid extra data: {detail}")


class InvalidBlockRangeError(BorRpcError):
    """A block range whose start lies after its end."""

    def __init__(self, start: int, end: int) -> None:
        self.start = start
        self.end = end
        super().__init__(f"invalid block range: start {start} > end {end}")


def keccak256(data: bytes) -> bytes:
    """Return the Keccak-256 digest of ``data``."""
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def compute_root_hash(block_hashes: Sequence[bytes]) -> bytes:
    """Merkle root over block hashes.

    The list is padded with zero hashes to the next power of two, then
    adjacent pairs are hashed together until one hash remains. An empty list
    gives the zero hash; a single hash is its own root.
    """
    level = [bytes(h) for h in block_hashes]
    for h in level:
        if len(h) != HASH_LENGTH:
            raise ValueError(f"block hash must be {HASH_LENGTH} bytes, got {len(h)}")
    if not level:
        return ZERO_HASH
    if len(level) == 1:
        return level[0]

    width = 1 << (len(level) - 1).bit_length()
    level.extend([ZERO_HASH] * (width - len(level)))

    while len(level) > 1:
        pairs = zip(level[0::2], level[1::2])
        level = [keccak256(left + right) for left, right in pairs]
    return level[0]