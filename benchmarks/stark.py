"""
Benchmark STARK operations (pure Python): Pedersen hash, digests, sign, verify.

Run from repo root:

  PYTHONPATH=src python benchmarks/stark.py
"""

from __future__ import annotations

import os
import sys
import time

_SRC = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")
if _SRC not in sys.path:
    sys.path.insert(0, _SRC)

from starkcrypto import (LimitOrderParams, get_limit_order_msg_hash,
                         pedersen_hash, private_to_public_key, sign, verify)

PRIVATE_KEY = 0x3C1E9550E66958296D11B60F8E8E7A7AD990D07FA65D5F7652C4A6C87D4E3CC
A = 0x3D937C035C878245CAF64531A5756109C53068DA139362728FEB561405371CB
B = 0x208A0A10250E382E1E4BBE2880906C2791BF6275695E02FBBC6AEFF9CD8B31A
ORDER = LimitOrderParams(
    vault_sell=21,
    vault_buy=27,
    amount_sell=2154686749748910716,
    amount_buy=1470242115489520459,
    token_sell=0x5FA3383597691EA9D827A79E1A4F0F7989C35CED18CA9619DE8AB97E661020,
    token_buy=0x774961C824A3B0FB3D2965F01471C9C7734BF8DBDE659E0C08DCA2EF18D56A,
    nonce=0,
    expiration_timestamp=438953,
)


def _time_it(fn, *args, n: int = 100) -> float:
    for _ in range(min(n, 5)):
        fn(*args)
    start = time.perf_counter()
    for _ in range(n):
        fn(*args)
    return (time.perf_counter() - start) / n


def main() -> None:
    public_key = private_to_public_key(PRIVATE_KEY)
    msg_hash = get_limit_order_msg_hash(ORDER)
    signature = sign(PRIVATE_KEY, msg_hash)
    rows = (
        ("pedersen_hash", _time_it(pedersen_hash, A, B, n=100)),
        ("limit_order_msg_hash", _time_it(get_limit_order_msg_hash, ORDER, n=50)),
        ("private_to_public_key", _time_it(private_to_public_key, PRIVATE_KEY, n=20)),
        ("sign", _time_it(sign, PRIVATE_KEY, msg_hash, n=20)),
        ("verify", _time_it(verify, public_key, msg_hash, signature, n=20)),
    )
    print("Benchmark: starkcrypto (pure Python)")
    for name, seconds in rows:
        print(f"  {name:<22} {seconds * 1e3:8.2f} ms")


if __name__ == "__main__":
    main()
