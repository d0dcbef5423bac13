"""
BIP-39 seed and BIP-32 hierarchical derivation over secp256k1.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import unicodedata
from typing import NamedTuple

from ..curves.secp256k1 import SECP256K1, privkey_to_pubkey
from ..errors import DerivationExhausted, InvalidDerivationPath

logger = logging.getLogger(__name__)

HARDENED_OFFSET = 0x80000000
PBKDF2_ROUNDS = 2048
# Consecutive invalid child indices tolerated before giving up (each has probability ~2^-127).
MAX_CHILD_SKIPS = 16


class ExtendedKey(NamedTuple):
    key: int
    chain_code: bytes


def mnemonic_to_seed(mnemonic: str, passphrase: str = "") -> bytes:
    """
    BIP-39 seed from a mnemonic sentence.

    The phrase is not checked against a wordlist; any NFKD-normalized string
    is stretched the same way.

    Args:
        mnemonic: Space-separated mnemonic words.
        passphrase: Optional BIP-39 passphrase.

    Returns:
        64-byte seed.
    """
    words = unicodedata.normalize("NFKD", mnemonic).encode("utf-8")
    salt = unicodedata.normalize("NFKD", "mnemonic" + passphrase).encode("utf-8")
    return hashlib.pbkdf2_hmac("sha512", words, salt, PBKDF2_ROUNDS)


def _hmac_sha512(key: bytes, data: bytes) -> tuple[bytes, bytes]:
    digest = hmac.new(key, data, hashlib.sha512).digest()
    return digest[:32], digest[32:]


def master_key(seed: bytes) -> ExtendedKey:
    """Master extended private key for a BIP-32 seed."""
    il, ir = _hmac_sha512(b"Bitcoin seed", seed)
    key = int.from_bytes(il, "big")
    if not 0 < key < SECP256K1.n:
        raise DerivationExhausted("seed yields an invalid master key")
    return ExtendedKey(key, ir)


def child_key(parent: ExtendedKey, index: int) -> ExtendedKey | None:
    """
    Private child derivation (CKDpriv).

    Args:
        parent: Parent extended private key.
        index: Child index; >= 2^31 means hardened.

    Returns:
        The child key, or None when this index yields an invalid key.
    """
    parent_bytes = parent.key.to_bytes(32, "big")
    if index >= HARDENED_OFFSET:
        data = b"\x00" + parent_bytes
    else:
        data = privkey_to_pubkey(parent_bytes, compressed=True)
    il, ir = _hmac_sha512(parent.chain_code, data + index.to_bytes(4, "big"))
    tweak = int.from_bytes(il, "big")
    if tweak >= SECP256K1.n:
        return None
    key = (tweak + parent.key) % SECP256K1.n
    if key == 0:
        return None
    return ExtendedKey(key, ir)


def parse_path(path: str) -> list[int]:
    """
    Parse "m/44'/60'/0'/0/0" into child indices (hardened ones offset by 2^31).

    Both ' and h mark a hardened segment.
    """
    if not isinstance(path, str):
        raise InvalidDerivationPath("derivation path must be a string")
    segments = path.strip().split("/")
    if segments[0] != "m":
        raise InvalidDerivationPath(f"derivation path must start with 'm': {path!r}")
    indices = []
    for segment in segments[1:]:
        hardened = segment.endswith(("'", "h", "H"))
        digits = segment[:-1] if hardened else segment
        if not (digits.isascii() and digits.isdigit()):
            raise InvalidDerivationPath(f"bad path segment {segment!r}")
        index = int(digits)
        if index >= HARDENED_OFFSET:
            raise InvalidDerivationPath(f"path segment {segment!r} out of range")
        indices.append(index + HARDENED_OFFSET if hardened else index)
    return indices


def derive_path(seed: bytes, path: str) -> int:
    """
    Walk a BIP-32 path from a seed.

    An index that yields an invalid child is skipped in favour of the next one.

    Args:
        seed: BIP-39 seed.
        path: Derivation path string.

    Returns:
        The private key at the end of the path.
    """
    node = master_key(seed)
    for index in parse_path(path):
        for skip in range(MAX_CHILD_SKIPS):
            child = child_key(node, index + skip)
            if child is not None:
                break
            logger.debug("child index skipped during BIP-32 walk")
        else:
            raise DerivationExhausted("no valid child key near requested index")
        node = child
    return node.key


__all__: tuple[str, ...] = (
    "ExtendedKey",
    "HARDENED_OFFSET",
    "child_key",
    "derive_path",
    "master_key",
    "mnemonic_to_seed",
    "parse_path",
)
