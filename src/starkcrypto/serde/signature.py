"""
Signature wire format: r (32 bytes) || s (32 bytes) [|| v (1 byte, 27 + recovery_param)].
"""

from __future__ import annotations

from .._hex import int_to_hex, strip_hex_prefix
from ..curves.stark import Signature
from ..errors import InvalidSignatureEncoding

V_OFFSET = 27


def serialize_signature(signature: tuple[int, ...]) -> str:
    """
    Hex-encode a signature in the 65-byte layout.

    Args:
        signature: Signature, or a plain (r, s) pair (recovery_param 0).

    Returns:
        "0x" + r (64 hex) + s (64 hex) + v (2 hex).
    """
    r, s = signature[0], signature[1]
    recovery_param = signature[2] if len(signature) > 2 else 0
    if not (0 <= r < 1 << 256 and 0 <= s < 1 << 256):
        raise InvalidSignatureEncoding("r and s must fit in 32 bytes")
    if recovery_param not in (0, 1, 2, 3):
        raise InvalidSignatureEncoding("recovery_param must be in [0, 3]")
    return "0x" + int_to_hex(r, 64) + int_to_hex(s, 64) + int_to_hex(V_OFFSET + recovery_param, 2)


def deserialize_signature(value: str | bytes) -> Signature:
    """
    Parse a 64-byte (r || s) or 65-byte (r || s || v) signature.

    Args:
        value: Raw bytes or hex string (0x prefix optional).

    Returns:
        Signature(r, s, recovery_param); recovery_param is 0 for the 64-byte form.
    """
    if isinstance(value, str):
        try:
            value = bytes.fromhex(strip_hex_prefix(value.strip()))
        except ValueError as exc:
            raise InvalidSignatureEncoding("signature is not valid hex") from exc
    if len(value) not in (64, 65):
        raise InvalidSignatureEncoding(f"signature must be 64 or 65 bytes, got {len(value)}")
    r = int.from_bytes(value[:32], "big")
    s = int.from_bytes(value[32:64], "big")
    if len(value) == 64:
        return Signature(r, s)
    v = value[64]
    recovery_param = v - V_OFFSET if v >= V_OFFSET else v
    if recovery_param not in (0, 1, 2, 3):
        raise InvalidSignatureEncoding(f"bad recovery byte {v}")
    return Signature(r, s, recovery_param)


__all__: tuple[str, ...] = ("V_OFFSET", "deserialize_signature", "serialize_signature")
