"""Elliptic-curve crypto: the STARK curve (keys, ECDSA) and secp256k1 (BIP-32 only)."""

from ._field import PrimeField, mod_inv
from ._weierstrass import INFINITY, Curve, Point
from .secp256k1 import SECP256K1, privkey_to_pubkey
from .stark import (EC_GEN, EC_ORDER, FIELD_PRIME, MAX_ECDSA_VAL,
                    MAX_SIGNING_ATTEMPTS, STARK_CURVE, Signature,
                    private_to_public_key, private_to_stark_key, sign, verify,
                    verify_stark_key)

__all__: tuple[str, ...] = (
    "Curve",
    "EC_GEN",
    "EC_ORDER",
    "FIELD_PRIME",
    "INFINITY",
    "MAX_ECDSA_VAL",
    "MAX_SIGNING_ATTEMPTS",
    "Point",
    "PrimeField",
    "SECP256K1",
    "STARK_CURVE",
    "Signature",
    "mod_inv",
    "private_to_public_key",
    "private_to_stark_key",
    "privkey_to_pubkey",
    "sign",
    "verify",
    "verify_stark_key",
)
