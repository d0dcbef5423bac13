"""Hash functions: Keccak-256 and the STARK-curve Pedersen hash."""

from .keccak import keccak256, keccak256_int
from .pedersen import (pedersen_hash, pedersen_hash_as_point,
                       pedersen_hash_chain)

__all__: tuple[str, ...] = (
    "keccak256",
    "keccak256_int",
    "pedersen_hash",
    "pedersen_hash_as_point",
    "pedersen_hash_chain",
)
