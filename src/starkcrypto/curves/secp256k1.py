"""
secp256k1 (Bitcoin/Ethereum curve): only what BIP-32 key derivation needs.
"""

from __future__ import annotations

from ._field import PrimeField
from ._weierstrass import Curve

_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
_Gx = 0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798
_Gy = 0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8

SECP256K1 = Curve(
    name="secp256k1",
    field=PrimeField(_P),
    a=0,
    b=7,
    n=_N,
    g=(_Gx, _Gy),
)


def privkey_to_pubkey(privkey: bytes, compressed: bool = False) -> bytes:
    """
    Derive the public key for a 32-byte secp256k1 private key.

    Args:
        privkey: 32-byte secp256k1 private key.
        compressed: Return the 33-byte SEC1 form (0x02/0x03 || x) instead of 65 bytes.

    Returns:
        65-byte uncompressed (0x04 || x || y) or 33-byte compressed public key.
    """
    if len(privkey) != 32:
        raise ValueError("privkey must be 32 bytes")
    d = int.from_bytes(privkey, "big")
    if d == 0 or d >= _N:
        raise ValueError("invalid privkey")
    x, y = SECP256K1.mul(d, SECP256K1.g)
    if compressed:
        return bytes([0x02 | (y & 1)]) + x.to_bytes(32, "big")
    return bytes([0x04]) + x.to_bytes(32, "big") + y.to_bytes(32, "big")


__all__: tuple[str, ...] = ("SECP256K1", "privkey_to_pubkey")
