"""
Keccak-256 (original Keccak padding, as used by Ethereum/Solidity). Pure Python.

Only needed for asset selectors and asset ids, so throughput is not a concern.
"""

from __future__ import annotations

_MASK64 = 0xFFFFFFFFFFFFFFFF
_RATE = 136  # bytes, capacity 512 bits

_ROUND_CONSTANTS = (
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
)

# Rotation offset for lane index x + 5*y.
_RHO = (
    0, 1, 62, 28, 27,
    36, 44, 6, 55, 20,
    3, 10, 43, 25, 39,
    41, 45, 15, 21, 8,
    18, 2, 61, 56, 14,
)

# pi: lane (x, y) moves to (y, 2x + 3y).
_PI = tuple(y + 5 * ((2 * x + 3 * y) % 5) for y in range(5) for x in range(5))


def _rotl(v: int, n: int) -> int:
    if n == 0:
        return v
    return ((v << n) | (v >> (64 - n))) & _MASK64


def _permute(lanes: list[int]) -> None:
    """Keccak-f[1600] over a flat 25-lane state (index x + 5*y), in place."""
    b = [0] * 25
    for rc in _ROUND_CONSTANTS:
        c = [lanes[x] ^ lanes[x + 5] ^ lanes[x + 10] ^ lanes[x + 15] ^ lanes[x + 20] for x in range(5)]
        for x in range(5):
            d = c[(x - 1) % 5] ^ _rotl(c[(x + 1) % 5], 1)
            for y in range(0, 25, 5):
                lanes[x + y] ^= d
        for i in range(25):
            b[_PI[i]] = _rotl(lanes[i], _RHO[i])
        for y in range(0, 25, 5):
            row = b[y : y + 5]
            for x in range(5):
                lanes[x + y] = row[x] ^ (~row[(x + 1) % 5] & row[(x + 2) % 5])
        lanes[0] ^= rc


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 digest.

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    padded = bytearray(data)
    padded.append(0x01)
    padded.extend(b"\x00" * (-len(padded) % _RATE))
    padded[-1] |= 0x80
    lanes = [0] * 25
    for start in range(0, len(padded), _RATE):
        block = padded[start : start + _RATE]
        for i in range(_RATE // 8):
            lanes[i] ^= int.from_bytes(block[8 * i : 8 * i + 8], "little")
        _permute(lanes)
    return b"".join(lane.to_bytes(8, "little") for lane in lanes[:4])


def keccak256_int(data: bytes) -> int:
    """Keccak-256 digest as a big-endian integer."""
    return int.from_bytes(keccak256(data), "big")


__all__: tuple[str, ...] = ("keccak256", "keccak256_int")
