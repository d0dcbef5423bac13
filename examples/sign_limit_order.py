#!/usr/bin/env python3
"""Example: sign a limit order between two ERC20 tokens."""

from starkcrypto import (Erc20Asset, LimitOrderParams, get_asset_id,
                         private_to_stark_key, sign_limit_order,
                         verify_limit_order)

private_key = 0x3C1E9550E66958296D11B60F8E8E7A7AD990D07FA65D5F7652C4A6C87D4E3CC
usdc = Erc20Asset("0xa0b86991c6218b36c1d19d4a2e9eb0ce3606eb48", quantum=1)
weth = Erc20Asset("0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2", quantum=10**10)
print("Sell asset id:", hex(get_asset_id(usdc)))
print("Buy asset id:", hex(get_asset_id(weth)))

order = LimitOrderParams(
    vault_sell=21,
    vault_buy=27,
    amount_sell="2000000000",
    amount_buy="100000000",
    token_sell=usdc,
    token_buy=weth,
    nonce=0,
    expiration_timestamp=438953,
)
signature = sign_limit_order(private_key, order)
print("Signature (r, s):", hex(signature.r), hex(signature.s))
print("Verify:", verify_limit_order(private_to_stark_key(private_key), order, signature))
