"""Stability tests.

Lock-in exact outputs for fixed inputs so that any change in the field, curve,
hash or nonce code (optimizations, refactors) is detected.
"""

from __future__ import annotations

import pytest

from starkcrypto import (compress, derive_key_pair, deserialize_signature,
                         pedersen_hash_chain, serialize_signature, sign)

MNEMONIC = (
    "puzzle number lab sense puzzle escape glove faith strike poem acoustic "
    "picture grit struggle know tuna soul indoor thumb dune fit job timber motor"
)
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

PEDERSEN_CHAIN_1_2_3 = 0xF9D95FBF356FBEDA26538C92F7040ABE51BF142350F73C9EE5BA7C660BAE71

ETH_TRANSFER_HASH = 0x3EA27339CCD64ABAC57A183FFE9F321AEBF2F44389F68621ED8B7ACC9B4183E
# Regression lock on this implementation's output, not a published protocol vector.
ETH_TRANSFER_SIGNATURE = (
    "0x0728d1fe4b098c776f39ddfac46aea876203fc0473ba2a525b8f0790431a012c"
    "05320e7b57a27138a74e4b791ee5053afc92a40fa9145dbc08faaa8b4f0d49c21c"
)
PUBLIC_KEY = (
    "04042582cfcb098a503562acd1325922799c9cebdf9249c26a41bd04007997f2eb"
    "03b73cdb07f399130ea38ee860c3b708c92165df37b1690d7e0af1678ecdaff8"
)


@pytest.fixture(scope="module")
def private_key() -> int:
    return derive_key_pair(MNEMONIC, "starkex", "starkexdvf", ZERO_ADDRESS, 0).private_key


def test_pedersen_chain_stability() -> None:
    assert pedersen_hash_chain([1, 2, 3]) == PEDERSEN_CHAIN_1_2_3


def test_compressed_key_stability() -> None:
    assert compress(PUBLIC_KEY) == "02" + PUBLIC_KEY[2:66]


def test_signature_stability(private_key: int) -> None:
    signature = sign(private_key, ETH_TRANSFER_HASH)
    assert serialize_signature(signature) == ETH_TRANSFER_SIGNATURE
    assert signature.recovery_param == 1
    assert deserialize_signature(ETH_TRANSFER_SIGNATURE) == signature


def test_signing_is_deterministic(private_key: int) -> None:
    assert sign(private_key, ETH_TRANSFER_HASH) == sign(private_key, hex(ETH_TRANSFER_HASH))
