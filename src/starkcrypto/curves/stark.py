"""
STARK curve (StarkEx / StarkNet): public keys, ECDSA sign and verify with the
exchange's range checks on the message hash, r, s and w = s^-1.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from .._hex import parse_int
from ..errors import (InvalidFieldElement, InvalidMessageHashLength,
                      InvalidRLength, InvalidSLength, InvalidWLength,
                      SigningRetryExhausted)
from ._drbg import HmacDrbg
from ._field import PrimeField, mod_inv
from ._weierstrass import Curve, Point

logger = logging.getLogger(__name__)

FIELD_PRIME = 0x800000000000011000000000000000000000000000000000000000000000001
ALPHA = 1
BETA = 0x6F21413EFBE40DE150E596D72F7A8C5609AD26C15C915C1F4CDFCB99CEE9E89
EC_ORDER = 0x800000000000010FFFFFFFFFFFFFFFFB781126DCAE7B2321E66A241ADC64D2F
EC_GEN: Point = (
    0x1EF15C18599971B7BECED415A40F0C7DEACFD9B0D1819E03D723D8BC943CFCA,
    0x5668060AA49730B7BE4801DF46EC62DE53ECD11ABE43A32873000C36E8DC1F,
)

N_ELEMENT_BITS_ECDSA = 251
# Upper bound (exclusive) for message hashes, r and w.
MAX_ECDSA_VAL = 2**N_ELEMENT_BITS_ECDSA
MAX_SIGNING_ATTEMPTS = 1024

STARK_CURVE = Curve(
    name="stark",
    field=PrimeField(FIELD_PRIME),
    a=ALPHA,
    b=BETA,
    n=EC_ORDER,
    g=EC_GEN,
)


class Signature(NamedTuple):
    """(r, s) plus the parity/overflow bits of k*G, kept for 65-byte serialization."""

    r: int
    s: int
    recovery_param: int = 0


def _check_private_key(private_key: int | str) -> int:
    d = parse_int(private_key, InvalidFieldElement, "private key")
    if not 1 <= d < EC_ORDER:
        raise InvalidFieldElement("private key out of range [1, n)")
    return d


def _check_msg_hash(msg_hash: int | str) -> int:
    e = parse_int(msg_hash, InvalidMessageHashLength, "msg hash")
    if not 0 <= e < MAX_ECDSA_VAL:
        raise InvalidMessageHashLength("Message not signable, invalid msgHash length.")
    return e


def _truncate_to_n(value: int) -> int:
    """Drop the excess low bits of a byte-aligned value wider than the curve order."""
    delta = (value.bit_length() + 7) // 8 * 8 - EC_ORDER.bit_length()
    if delta > 0:
        value >>= delta
    return value


def private_to_public_key(private_key: int | str) -> Point:
    """
    Public key point for a STARK private key.

    Args:
        private_key: Scalar in [1, n), as int or hex string.

    Returns:
        (x, y) = private_key * G.
    """
    return STARK_CURVE.mul(_check_private_key(private_key), EC_GEN)


def private_to_stark_key(private_key: int | str) -> int:
    """The STARK key registered on-chain: x-coordinate of the public key."""
    return private_to_public_key(private_key)[0]


def sign(private_key: int | str, msg_hash: int | str) -> Signature:
    """
    Deterministic ECDSA signature over a message hash.

    Nonces are the successive outputs of an HMAC-SHA256 DRBG seeded with the
    32-byte private key and message hash. Candidates giving r or w outside
    [1, 2^251), or s == 0, are skipped.

    Args:
        private_key: Scalar in [1, n), as int or hex string.
        msg_hash: Message hash in [0, 2^251), as int or hex string.

    Returns:
        Signature(r, s, recovery_param).
    """
    d = _check_private_key(private_key)
    e = _check_msg_hash(msg_hash)
    drbg = HmacDrbg(d.to_bytes(32, "big"), e.to_bytes(32, "big"))
    for attempt in range(MAX_SIGNING_ATTEMPTS):
        k = _truncate_to_n(int.from_bytes(drbg.generate(32), "big"))
        if k <= 1 or k >= EC_ORDER - 1:
            logger.debug("nonce candidate %d out of range, retrying", attempt)
            continue
        x, y = STARK_CURVE.mul(k, EC_GEN)
        r = x % EC_ORDER
        if not 1 <= r < MAX_ECDSA_VAL:
            logger.debug("nonce candidate %d gives r out of range, retrying", attempt)
            continue
        s = mod_inv(k, EC_ORDER) * (e + r * d) % EC_ORDER
        if s == 0:
            logger.debug("nonce candidate %d gives s == 0, retrying", attempt)
            continue
        w = mod_inv(s, EC_ORDER)
        if not 1 <= w < MAX_ECDSA_VAL:
            logger.debug("nonce candidate %d gives w out of range, retrying", attempt)
            continue
        recovery_param = (y & 1) | (2 if x != r else 0)
        return Signature(r, s, recovery_param)
    raise SigningRetryExhausted(
        f"no valid nonce after {MAX_SIGNING_ATTEMPTS} candidates"
    )


def _check_signature(signature: tuple[int, ...]) -> tuple[int, int, int]:
    """Range-check (r, s) and derive w; raises the protocol's named length errors."""
    r, s = signature[0], signature[1]
    if not 1 <= r < MAX_ECDSA_VAL:
        raise InvalidRLength("Message not signable, invalid r length.")
    if not 1 <= s < EC_ORDER:
        raise InvalidSLength("Message not signable, invalid s length.")
    w = mod_inv(s, EC_ORDER)
    if not 1 <= w < MAX_ECDSA_VAL:
        raise InvalidWLength("Message not signable, invalid w length.")
    return r, s, w


def _is_curve_point(point: Point) -> bool:
    """Finite point with canonical coordinates satisfying the curve equation."""
    if STARK_CURVE.is_infinity(point):
        return False
    if not all(isinstance(c, int) and 0 <= c < FIELD_PRIME for c in point):
        return False
    return STARK_CURVE.contains(point)


def verify(
    public_key: Point, msg_hash: int | str, signature: tuple[int, ...]
) -> bool:
    """
    Verify a signature against a full public key point.

    Args:
        public_key: (x, y) public key.
        msg_hash: Message hash in [0, 2^251), as int or hex string.
        signature: (r, s) or Signature.

    Returns:
        True iff the signature is valid. A public key that is not a canonical
        curve point gives False; a malformed hash or signature raises.
    """
    e = _check_msg_hash(msg_hash)
    r, _, w = _check_signature(signature)
    if not _is_curve_point(public_key):
        return False
    u1 = e * w % EC_ORDER
    u2 = r * w % EC_ORDER
    point = STARK_CURVE.add(
        STARK_CURVE.mul(u1, EC_GEN), STARK_CURVE.mul(u2, public_key)
    )
    if STARK_CURVE.is_infinity(point):
        return False
    return point[0] % EC_ORDER == r


def verify_stark_key(
    stark_key: int | str, msg_hash: int | str, signature: tuple[int, ...]
) -> bool:
    """
    Verify against an x-only STARK key; either y matching x is accepted.

    Args:
        stark_key: x-coordinate of the signer's public key (int or hex string).
        msg_hash: Message hash in [0, 2^251).
        signature: (r, s) or Signature.

    Returns:
        True iff the signature is valid for (x, y) or (x, -y).
    """
    e = _check_msg_hash(msg_hash)
    _check_signature(signature)
    x = parse_int(stark_key, InvalidFieldElement, "stark key")
    if not 0 <= x < FIELD_PRIME:
        return False
    y = STARK_CURVE.y_from_x(x, odd=False)
    if y is None:
        return False
    return verify((x, y), e, signature) or verify(
        (x, STARK_CURVE.field.neg(y)), e, signature
    )


__all__: tuple[str, ...] = (
    "ALPHA",
    "BETA",
    "EC_GEN",
    "EC_ORDER",
    "FIELD_PRIME",
    "MAX_ECDSA_VAL",
    "MAX_SIGNING_ATTEMPTS",
    "N_ELEMENT_BITS_ECDSA",
    "STARK_CURVE",
    "Signature",
    "private_to_public_key",
    "private_to_stark_key",
    "sign",
    "verify",
    "verify_stark_key",
)
