"""Key derivation: BIP-39 seeds, BIP-32 paths and STARK key grinding."""

from ._bip32 import derive_path, mnemonic_to_seed, parse_path
from .account import (MAX_GRIND_ITERATIONS, KeyPair, derive_key_pair,
                      get_account_path, get_key_pair_from_path,
                      get_private_key_from_path, grind_key)

__all__: tuple[str, ...] = (
    "KeyPair",
    "MAX_GRIND_ITERATIONS",
    "derive_key_pair",
    "derive_path",
    "get_account_path",
    "get_key_pair_from_path",
    "get_private_key_from_path",
    "grind_key",
    "mnemonic_to_seed",
    "parse_path",
)
