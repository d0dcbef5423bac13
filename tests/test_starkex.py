"""End-to-end flows: derive key, build digest, sign, serialize, verify."""

from __future__ import annotations

import dataclasses

import starkcrypto
from starkcrypto import (EthAsset, LimitOrderParams, TransferParams,
                         derive_key_pair, deserialize_signature,
                         get_stark_public_key, get_transfer_msg_hash,
                         private_to_stark_key, serialize_signature,
                         sign_limit_order, sign_transfer, verify,
                         verify_limit_order, verify_signature,
                         verify_transfer)
from starkcrypto.serde import encode_public_key

MNEMONIC = (
    "puzzle number lab sense puzzle escape glove faith strike poem acoustic "
    "picture grit struggle know tuna soul indoor thumb dune fit job timber motor"
)
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

ETH_TRANSFER = TransferParams(
    token=EthAsset(quantum=10**10),
    receiver_public_key="0x03a535c13f12c6a2c7e7c0dade3a68225988698687e396a321c12f5d393bea4a",
    sender_vault_id=1,
    receiver_vault_id=606138218,
    amount="100000000",
    nonce=1597237097,
    expiration_timestamp=444396,
)
ETH_TRANSFER_HASH = 0x3EA27339CCD64ABAC57A183FFE9F321AEBF2F44389F68621ED8B7ACC9B4183E
# Regression lock on this implementation's output, not a published protocol vector.
ETH_TRANSFER_SIGNATURE = (
    "0x0728d1fe4b098c776f39ddfac46aea876203fc0473ba2a525b8f0790431a012c"
    "05320e7b57a27138a74e4b791ee5053afc92a40fa9145dbc08faaa8b4f0d49c21c"
)

LIMIT_ORDER_PRIVATE_KEY = 0x3C1E9550E66958296D11B60F8E8E7A7AD990D07FA65D5F7652C4A6C87D4E3CC
LIMIT_ORDER = LimitOrderParams(
    vault_sell=21,
    vault_buy=27,
    amount_sell="2154686749748910716",
    amount_buy="1470242115489520459",
    token_sell="0x5fa3383597691ea9d827a79e1a4f0f7989c35ced18ca9619de8ab97e661020",
    token_buy="0x774961c824a3b0fb3d2965f01471c9c7734bf8dbde659e0c08dca2ef18d56a",
    nonce=0,
    expiration_timestamp=438953,
)
LIMIT_ORDER_R = 0x173FD03D8B008EE7432977AC27D1E9D1A1F6C98B1A2F05FA84A21C84C44E882
LIMIT_ORDER_S = 0x4B6D75385AED025AA222F28A0ADC6D58DB78FF17E51C3F59E259B131CD5A1CC


def test_eth_transfer_end_to_end() -> None:
    pair = derive_key_pair(MNEMONIC, "starkex", "starkexdvf", ZERO_ADDRESS, "0")
    msg_hash = get_transfer_msg_hash(ETH_TRANSFER)
    assert msg_hash == ETH_TRANSFER_HASH

    signature = sign_transfer(pair.private_key, ETH_TRANSFER)
    serialized = serialize_signature(signature)
    assert serialized == ETH_TRANSFER_SIGNATURE
    assert len(bytes.fromhex(serialized[2:])) == 65

    parsed = deserialize_signature(serialized)
    assert parsed == signature
    assert verify(pair.public_key, msg_hash, parsed)
    assert verify_transfer(pair.public_key, ETH_TRANSFER, serialized)


def test_transfer_verify_key_forms() -> None:
    pair = derive_key_pair(MNEMONIC, "starkex", "starkexdvf", ZERO_ADDRESS, 0)
    signature = sign_transfer(pair.private_key, ETH_TRANSFER)
    stark_key = private_to_stark_key(pair.private_key)
    for key in (
        pair.public_key,
        stark_key,
        hex(stark_key),
        get_stark_public_key(pair.private_key),
        encode_public_key(pair.public_key).hex(),
    ):
        assert verify_transfer(key, ETH_TRANSFER, signature)


def test_transfer_tampered_params() -> None:
    pair = derive_key_pair(MNEMONIC, "starkex", "starkexdvf", ZERO_ADDRESS, 0)
    signature = sign_transfer(pair.private_key, ETH_TRANSFER)
    tampered = dataclasses.replace(ETH_TRANSFER, amount="100000001")
    assert not verify_transfer(pair.public_key, tampered, signature)


def test_limit_order_signature() -> None:
    signature = sign_limit_order(LIMIT_ORDER_PRIVATE_KEY, LIMIT_ORDER)
    assert (signature.r, signature.s) == (LIMIT_ORDER_R, LIMIT_ORDER_S)
    stark_key = private_to_stark_key(LIMIT_ORDER_PRIVATE_KEY)
    assert verify_limit_order(stark_key, LIMIT_ORDER, signature)
    assert verify_limit_order(stark_key, LIMIT_ORDER, (LIMIT_ORDER_R, LIMIT_ORDER_S))
    assert not verify_limit_order(
        stark_key, dataclasses.replace(LIMIT_ORDER, nonce=1), signature
    )


def test_verify_signature_accepts_serialized() -> None:
    signature = sign_limit_order(LIMIT_ORDER_PRIVATE_KEY, LIMIT_ORDER)
    stark_key = private_to_stark_key(LIMIT_ORDER_PRIVATE_KEY)
    msg_hash = starkcrypto.get_msg_hash(LIMIT_ORDER)
    assert verify_signature(stark_key, msg_hash, serialize_signature(signature))
    assert verify_signature(stark_key, msg_hash, bytes.fromhex(serialize_signature(signature)[2:]))


def test_public_surface() -> None:
    for name in starkcrypto.__all__:
        assert hasattr(starkcrypto, name), name
    assert isinstance(starkcrypto.__version__, str)
