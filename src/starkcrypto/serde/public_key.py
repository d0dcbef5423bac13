"""
STARK public keys in SEC1 form: 04 || X || Y, or 02/03 || X (parity of Y).
Hex helpers operate on unprefixed lowercase strings, as the exchange exchanges them.
"""

from __future__ import annotations

from .._hex import int_to_hex, strip_hex_prefix
from ..curves._weierstrass import Point
from ..curves.stark import STARK_CURVE, private_to_public_key
from ..errors import InvalidFieldElement, InvalidPublicKey

_COORD_BYTES = 32


def encode_public_key(point: Point, compressed: bool = False) -> bytes:
    """
    SEC1 encoding of a STARK public key.

    Args:
        point: (x, y) on the STARK curve.
        compressed: Emit 33 bytes (02/03 || x) instead of 65 (04 || x || y).

    Returns:
        Encoded key bytes.
    """
    try:
        on_curve = not STARK_CURVE.is_infinity(point) and STARK_CURVE.contains(point)
    except InvalidFieldElement as exc:
        raise InvalidPublicKey(str(exc)) from exc
    if not on_curve:
        raise InvalidPublicKey("point is not on the STARK curve")
    x, y = point
    x_bytes = x.to_bytes(_COORD_BYTES, "big")
    if compressed:
        return bytes([0x02 | (y & 1)]) + x_bytes
    return b"\x04" + x_bytes + y.to_bytes(_COORD_BYTES, "big")


def decode_public_key(data: bytes) -> Point:
    """
    Parse a SEC1-encoded STARK public key (compressed or uncompressed).

    Args:
        data: 33 or 65 bytes.

    Returns:
        (x, y) on the curve.
    """
    if len(data) == 1 + _COORD_BYTES and data[0] in (0x02, 0x03):
        x = int.from_bytes(data[1:], "big")
        if x >= STARK_CURVE.p:
            raise InvalidPublicKey("x coordinate is not a field element")
        y = STARK_CURVE.y_from_x(x, odd=data[0] == 0x03)
        if y is None:
            raise InvalidPublicKey("x coordinate is not on the STARK curve")
        return (x, y)
    if len(data) == 1 + 2 * _COORD_BYTES and data[0] == 0x04:
        point = (
            int.from_bytes(data[1 : 1 + _COORD_BYTES], "big"),
            int.from_bytes(data[1 + _COORD_BYTES :], "big"),
        )
        if point[0] >= STARK_CURVE.p or point[1] >= STARK_CURVE.p:
            raise InvalidPublicKey("coordinate is not a field element")
        if not STARK_CURVE.contains(point) or STARK_CURVE.is_infinity(point):
            raise InvalidPublicKey("point is not on the STARK curve")
        return point
    raise InvalidPublicKey(f"unrecognized public key encoding ({len(data)} bytes)")


def _hex_to_bytes(value: str) -> bytes:
    if not isinstance(value, str):
        raise InvalidPublicKey("public key must be a hex string")
    try:
        return bytes.fromhex(strip_hex_prefix(value.strip()))
    except ValueError as exc:
        raise InvalidPublicKey("public key is not valid hex") from exc


def public_key_from_hex(public_key: str) -> Point:
    """Point from a compressed or uncompressed hex key (0x prefix optional)."""
    return decode_public_key(_hex_to_bytes(public_key))


def compress(public_key: str) -> str:
    """04 || X || Y hex to 02/03 || X hex."""
    return encode_public_key(public_key_from_hex(public_key), compressed=True).hex()


def decompress(public_key: str) -> str:
    """02/03 || X hex to 04 || X || Y hex."""
    return encode_public_key(public_key_from_hex(public_key)).hex()


def get_x_coordinate(public_key: str) -> str:
    """X of a hex public key, 64 hex chars."""
    return int_to_hex(public_key_from_hex(public_key)[0], 2 * _COORD_BYTES)


def get_y_coordinate(public_key: str) -> str:
    """Y of a hex public key, 64 hex chars (recovered for compressed input)."""
    return int_to_hex(public_key_from_hex(public_key)[1], 2 * _COORD_BYTES)


def get_stark_public_key(private_key: int | str) -> str:
    """Compressed hex public key of a STARK private key."""
    return encode_public_key(private_to_public_key(private_key), compressed=True).hex()


__all__: tuple[str, ...] = (
    "compress",
    "decode_public_key",
    "decompress",
    "encode_public_key",
    "get_stark_public_key",
    "get_x_coordinate",
    "get_y_coordinate",
    "public_key_from_hex",
)
