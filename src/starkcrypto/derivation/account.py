"""
STARK account keys: EIP-2645 style path, BIP-32 walk, then grinding into [1, n).
"""

from __future__ import annotations

import hashlib
import logging
from typing import NamedTuple

from .._hex import parse_int
from ..curves._weierstrass import Point
from ..curves.stark import EC_ORDER, private_to_public_key
from ..errors import DerivationExhausted, InvalidDerivationPath
from ._bip32 import derive_path, mnemonic_to_seed

logger = logging.getLogger(__name__)

PATH_PURPOSE = 2645
MAX_GRIND_ITERATIONS = 1000
_MASK31 = (1 << 31) - 1
_SHA256_BOUND = 1 << 256


class KeyPair(NamedTuple):
    private_key: int
    public_key: Point


def _int_from_sha256(text: str) -> int:
    return int.from_bytes(hashlib.sha256(text.encode("utf-8")).digest(), "big")


def get_account_path(
    layer: str, application: str, eth_address: int | str, index: int | str
) -> str:
    """
    Derivation path of a STARK account.

    Args:
        layer: Layer name, e.g. "starkex".
        application: Application name, e.g. "starkexdvf".
        eth_address: Owning Ethereum address (hex string or int).
        index: Account index (int or decimal string).

    Returns:
        Path of the form m/2645'/layer'/application'/addr_low'/addr_high'/index.
    """
    address = parse_int(eth_address, InvalidDerivationPath, "eth address")
    if not 0 <= address < 1 << 160:
        raise InvalidDerivationPath("eth address must be 20 bytes")
    account = parse_int(index, InvalidDerivationPath, "account index", base=10)
    if not 0 <= account <= _MASK31:
        raise InvalidDerivationPath("account index out of range [0, 2^31)")
    return "m/{}'/{}'/{}'/{}'/{}'/{}".format(
        PATH_PURPOSE,
        _int_from_sha256(layer) & _MASK31,
        _int_from_sha256(application) & _MASK31,
        address & _MASK31,
        (address >> 31) & _MASK31,
        account,
    )


def _hash_key_with_index(key_seed: bytes, index: int) -> int:
    index_bytes = index.to_bytes(max(1, (index.bit_length() + 7) // 8), "big")
    return int.from_bytes(hashlib.sha256(key_seed + index_bytes).digest(), "big")


def grind_key(key_seed: bytes | int, limit: int = EC_ORDER) -> int:
    """
    Map a 256-bit seed uniformly into [1, limit).

    Hashes seed || counter until the digest falls below the largest multiple of
    `limit` under 2^256, then reduces it.

    Args:
        key_seed: 32-byte seed (or int, encoded big-endian on 32 bytes).
        limit: Exclusive upper bound, the STARK curve order by default.

    Returns:
        Private key in [1, limit).
    """
    if isinstance(key_seed, int):
        key_seed = key_seed.to_bytes(32, "big")
    max_allowed = _SHA256_BOUND - _SHA256_BOUND % limit
    for index in range(MAX_GRIND_ITERATIONS):
        digest = _hash_key_with_index(key_seed, index)
        if digest >= max_allowed:
            logger.debug("grinding candidate %d rejected (biased range)", index)
            continue
        key = digest % limit
        if key == 0:
            logger.debug("grinding candidate %d rejected (zero key)", index)
            continue
        return key
    raise DerivationExhausted(f"key grinding did not converge in {MAX_GRIND_ITERATIONS} iterations")


def get_private_key_from_path(seed: bytes, path: str) -> int:
    """STARK private key for a BIP-39 seed and derivation path."""
    return grind_key(derive_path(seed, path))


def get_key_pair_from_path(mnemonic: str, path: str, passphrase: str = "") -> KeyPair:
    """
    STARK key pair for a mnemonic and an explicit derivation path.

    Args:
        mnemonic: BIP-39 mnemonic sentence.
        path: BIP-32 derivation path.
        passphrase: Optional BIP-39 passphrase.

    Returns:
        KeyPair(private_key, public_key).
    """
    private_key = get_private_key_from_path(mnemonic_to_seed(mnemonic, passphrase), path)
    return KeyPair(private_key, private_to_public_key(private_key))


def derive_key_pair(
    mnemonic: str,
    layer: str,
    application: str,
    eth_address: int | str,
    index: int | str = 0,
) -> KeyPair:
    """
    STARK key pair of an account, from a mnemonic and the account coordinates.

    Args:
        mnemonic: BIP-39 mnemonic sentence.
        layer: Layer name, e.g. "starkex".
        application: Application name.
        eth_address: Owning Ethereum address.
        index: Account index.

    Returns:
        KeyPair(private_key, public_key).
    """
    path = get_account_path(layer, application, eth_address, index)
    return get_key_pair_from_path(mnemonic, path)


__all__: tuple[str, ...] = (
    "KeyPair",
    "MAX_GRIND_ITERATIONS",
    "PATH_PURPOSE",
    "derive_key_pair",
    "get_account_path",
    "get_key_pair_from_path",
    "get_private_key_from_path",
    "grind_key",
)
