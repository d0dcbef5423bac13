#!/usr/bin/env python3
"""Example: STARK account key from a BIP-39 mnemonic."""

from starkcrypto import (compress, derive_key_pair, encode_public_key,
                         get_account_path)

mnemonic = (
    "puzzle number lab sense puzzle escape glove faith strike poem acoustic "
    "picture grit struggle know tuna soul indoor thumb dune fit job timber motor"
)
eth_address = "0x" + "00" * 20

print("Path:", get_account_path("starkex", "starkexdvf", eth_address, 0))
pair = derive_key_pair(mnemonic, "starkex", "starkexdvf", eth_address, 0)
public_key = encode_public_key(pair.public_key).hex()
print("Public key:", public_key[:32] + "...")
print("Compressed:", compress(public_key))
print("STARK key:", hex(pair.public_key[0]))
