from __future__ import annotations

import pytest

from starkcrypto.curves import EC_ORDER, private_to_public_key
from starkcrypto.derivation import (KeyPair, derive_key_pair, derive_path,
                                    get_account_path, get_key_pair_from_path,
                                    get_private_key_from_path, grind_key,
                                    mnemonic_to_seed, parse_path)
from starkcrypto.derivation._bip32 import HARDENED_OFFSET
from starkcrypto.errors import ErrorKind, InvalidDerivationPath

MNEMONIC = (
    "puzzle number lab sense puzzle escape glove faith strike poem acoustic "
    "picture grit struggle know tuna soul indoor thumb dune fit job timber motor"
)
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"
ACCOUNT_PATH = "m/2645'/579218131'/1393043894'/0'/0'/0"
BIP32_KEY = bytes.fromhex("86f3e7293141f20a8baff320e8ee4accb9d4a4bf2b4d295e8cee784db46e0519")
PRIVATE_KEY = 0x5C8C8683596C732541A59E03007B2D30DBBBB873556FE65B5FB63C16688F941
PUBLIC_X = 0x042582CFCB098A503562ACD1325922799C9CEBDF9249C26A41BD04007997F2EB
PUBLIC_Y = 0x03B73CDB07F399130EA38EE860C3B708C92165DF37B1690D7E0AF1678ECDAFF8


def test_account_path() -> None:
    assert get_account_path("starkex", "starkexdvf", ZERO_ADDRESS, "0") == ACCOUNT_PATH
    assert get_account_path("starkex", "starkexdvf", 0, 0) == ACCOUNT_PATH


def test_account_path_splits_address() -> None:
    address = (5 << 31) | 7
    path = get_account_path("starkex", "starkexdvf", hex(address), 3)
    assert path.endswith("/7'/5'/3")


def test_account_path_rejects_bad_inputs() -> None:
    with pytest.raises(InvalidDerivationPath):
        get_account_path("starkex", "starkexdvf", hex(1 << 160), 0)
    with pytest.raises(InvalidDerivationPath):
        get_account_path("starkex", "starkexdvf", ZERO_ADDRESS, 1 << 31)


def test_parse_path() -> None:
    assert parse_path("m") == []
    assert parse_path("m/44'/60h/0/1") == [
        44 + HARDENED_OFFSET,
        60 + HARDENED_OFFSET,
        0,
        1,
    ]


def test_parse_path_errors() -> None:
    for bad in ("", "44'/0", "m/", "m/x", "m/-1", f"m/{HARDENED_OFFSET}"):
        with pytest.raises(InvalidDerivationPath) as exc:
            parse_path(bad)
        assert exc.value.kind is ErrorKind.INVALID_DERIVATION_PATH


def test_bip32_walk() -> None:
    seed = mnemonic_to_seed(MNEMONIC)
    assert len(seed) == 64
    assert derive_path(seed, ACCOUNT_PATH) == int.from_bytes(BIP32_KEY, "big")


def test_passphrase_changes_seed() -> None:
    assert mnemonic_to_seed(MNEMONIC) != mnemonic_to_seed(MNEMONIC, "secret")


def test_grind_key() -> None:
    assert grind_key(BIP32_KEY) == PRIVATE_KEY
    assert grind_key(int.from_bytes(BIP32_KEY, "big")) == PRIVATE_KEY


def test_grind_key_in_range() -> None:
    for seed in (0, 1, 2**256 - 1):
        key = grind_key(seed)
        assert 1 <= key < EC_ORDER


def test_private_key_from_path() -> None:
    seed = mnemonic_to_seed(MNEMONIC)
    assert get_private_key_from_path(seed, ACCOUNT_PATH) == PRIVATE_KEY


def test_derive_key_pair() -> None:
    pair = derive_key_pair(MNEMONIC, "starkex", "starkexdvf", ZERO_ADDRESS, "0")
    assert isinstance(pair, KeyPair)
    assert pair.private_key == PRIVATE_KEY
    assert pair.public_key == (PUBLIC_X, PUBLIC_Y)
    assert private_to_public_key(pair.private_key) == pair.public_key


def test_key_pair_from_path_deterministic() -> None:
    first = get_key_pair_from_path(MNEMONIC, ACCOUNT_PATH)
    second = get_key_pair_from_path(MNEMONIC, ACCOUNT_PATH)
    assert first == second


def test_other_index_gives_other_key() -> None:
    other = derive_key_pair(MNEMONIC, "starkex", "starkexdvf", ZERO_ADDRESS, 1)
    assert other.private_key != PRIVATE_KEY
