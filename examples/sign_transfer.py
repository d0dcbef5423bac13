#!/usr/bin/env python3
"""Example: quantize an ETH amount, sign a transfer and verify it."""

from starkcrypto import (EthAsset, TransferParams, derive_key_pair,
                         get_transfer_msg_hash, quantize_amount,
                         serialize_signature, sign_transfer, verify_transfer)

mnemonic = (
    "puzzle number lab sense puzzle escape glove faith strike poem acoustic "
    "picture grit struggle know tuna soul indoor thumb dune fit job timber motor"
)
pair = derive_key_pair(mnemonic, "starkex", "starkexdvf", "0x" + "00" * 20, 0)

eth = EthAsset(quantum=10**10)
params = TransferParams(
    token=eth,
    receiver_public_key="0x03a535c13f12c6a2c7e7c0dade3a68225988698687e396a321c12f5d393bea4a",
    sender_vault_id=1,
    receiver_vault_id=606138218,
    amount=quantize_amount("1", eth.quantum, decimals=18),
    nonce=1597237097,
    expiration_timestamp=444396,
)
print("Message hash:", hex(get_transfer_msg_hash(params)))
signature = sign_transfer(pair.private_key, params)
print("Signature:", serialize_signature(signature))
print("Verify:", verify_transfer(pair.public_key, params, signature))
