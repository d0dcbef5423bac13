from __future__ import annotations

import pytest

from starkcrypto.curves import (EC_GEN, EC_ORDER, FIELD_PRIME, INFINITY,
                                SECP256K1, STARK_CURVE, PrimeField, mod_inv,
                                private_to_public_key, privkey_to_pubkey)
from starkcrypto.errors import ErrorKind, InvalidFieldElement, StarkCryptoError

SECP_PUB_ONE = bytes.fromhex(
    "0479be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798"
    "483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8"
)


def test_field_prime_shape() -> None:
    assert FIELD_PRIME == 2**251 + 17 * 2**192 + 1


def test_mod_inv() -> None:
    assert mod_inv(3, 7) == 5
    assert mod_inv(-1, 7) == 6
    x = 0x1234567890ABCDEF
    assert x * mod_inv(x, EC_ORDER) % EC_ORDER == 1


def test_mod_inv_zero_raises() -> None:
    with pytest.raises(InvalidFieldElement):
        mod_inv(0, EC_ORDER)


def test_field_check_rejects_out_of_range() -> None:
    field = PrimeField(FIELD_PRIME)
    assert field.check(FIELD_PRIME - 1) == FIELD_PRIME - 1
    with pytest.raises(InvalidFieldElement) as exc:
        field.check(FIELD_PRIME)
    assert exc.value.kind is ErrorKind.INVALID_FIELD_ELEMENT
    assert isinstance(exc.value, StarkCryptoError)
    assert isinstance(exc.value, ValueError)
    with pytest.raises(InvalidFieldElement):
        field.check(-1)


def test_field_sqrt() -> None:
    field = PrimeField(FIELD_PRIME)
    for value in (4, 12345, FIELD_PRIME - 1):
        root = field.sqrt(field.mul(value, value))
        assert root is not None
        assert field.mul(root, root) == field.mul(value, value)


def test_field_sqrt_non_residue() -> None:
    field = PrimeField(FIELD_PRIME)
    # 3 is a quadratic non-residue mod the STARK prime.
    assert not field.is_square(3)
    assert field.sqrt(3) is None


def test_generators_on_curve() -> None:
    assert STARK_CURVE.contains(EC_GEN)
    assert SECP256K1.contains(SECP256K1.g)
    assert not STARK_CURVE.contains((EC_GEN[0], EC_GEN[1] + 1))


def test_group_law() -> None:
    g2 = STARK_CURVE.double(EC_GEN)
    assert STARK_CURVE.add(EC_GEN, EC_GEN) == g2
    assert STARK_CURVE.mul(2, EC_GEN) == g2
    assert STARK_CURVE.equal(STARK_CURVE.add(EC_GEN, EC_GEN), g2)
    assert STARK_CURVE.mul(3, EC_GEN) == STARK_CURVE.add(g2, EC_GEN)
    assert STARK_CURVE.add(EC_GEN, STARK_CURVE.neg(EC_GEN)) == INFINITY
    assert STARK_CURVE.add(INFINITY, EC_GEN) == EC_GEN
    assert STARK_CURVE.mul(0, EC_GEN) == INFINITY


def test_order_minus_one_is_negation() -> None:
    assert STARK_CURVE.mul(EC_ORDER - 1, EC_GEN) == STARK_CURVE.neg(EC_GEN)


def test_scalar_out_of_range() -> None:
    with pytest.raises(InvalidFieldElement):
        STARK_CURVE.mul(EC_ORDER, EC_GEN)
    with pytest.raises(InvalidFieldElement):
        STARK_CURVE.mul(-1, EC_GEN)


def test_coordinate_out_of_range() -> None:
    with pytest.raises(InvalidFieldElement):
        STARK_CURVE.add(EC_GEN, (FIELD_PRIME, 0))


def test_y_from_x() -> None:
    x, y = EC_GEN
    assert STARK_CURVE.y_from_x(x, odd=bool(y & 1)) == y
    assert STARK_CURVE.y_from_x(x, odd=not (y & 1)) == FIELD_PRIME - y


def test_private_to_public_key() -> None:
    assert private_to_public_key(1) == EC_GEN
    assert private_to_public_key("0x2") == STARK_CURVE.double(EC_GEN)
    with pytest.raises(InvalidFieldElement):
        private_to_public_key(0)
    with pytest.raises(InvalidFieldElement):
        private_to_public_key(EC_ORDER)


def test_secp256k1_pubkey() -> None:
    priv = (1).to_bytes(32, "big")
    assert privkey_to_pubkey(priv) == SECP_PUB_ONE
    assert privkey_to_pubkey(priv, compressed=True) == b"\x02" + SECP_PUB_ONE[1:33]
