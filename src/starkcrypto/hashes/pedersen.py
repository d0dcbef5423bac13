"""
Pedersen hash over the STARK curve.

H(a, b) = [shift_point + a_low * P0 + a_high * P1 + b_low * P2 + b_high * P3].x
where *_low are the 248 low bits and *_high the 4 high bits of each input.
The multiples 2^j * P_i are tabulated once at import time.
"""

from __future__ import annotations

from collections.abc import Iterable

from .._hex import parse_int
from ..curves.stark import FIELD_PRIME, STARK_CURVE
from ..curves._weierstrass import Point
from ..errors import InvalidHashInput

N_ELEMENT_BITS_HASH = 252
_LOW_PART_BITS = 248

SHIFT_POINT: Point = (
    0x49EE3EBA8C1600700EE1B87EB599F16716B0B1022947733551FDE4050CA6804,
    0x3CA0CFE4B3BC6DDF346D49D06EA0ED34E621062C0E056C1D0405D266E10268A,
)

CONSTANT_POINTS: tuple[Point, ...] = (
    (
        0x234287DCBAFFE7F969C748655FCA9E58FA8120B6D56EB0C1080D17957EBE47B,
        0x3B056F100F96FB21E889527D41F4E39940135DD7A6C94CC6ED0268EE89E5615,
    ),
    (
        0x4FA56F376C83DB33F9DAB2656558F3399099EC1DE5E3018B7A6932DBA8AA378,
        0x3FA0984C931C9E38113E0C0E47E4401562761F92A7A23B45168F4E80FF5B54D,
    ),
    (
        0x4BA4CC166BE8DEC764910F75B45F74B40C690C74709E90F3AA372F0BD2D6997,
        0x40301CF5C1751F4B971E46C4EDE85FCAC5C59A5CE5AE7C48151F27B24B219C,
    ),
    (
        0x54302DCB0E6CC1C6E44CCA8F61A63BB2CA65048D53FB325D36FF12C49A58202,
        0x1B77B3E37D13504B348046268D8AE25CE98AD783C25561A879DCC77E99C2426,
    ),
)


def _doublings(base: Point, count: int) -> list[Point]:
    out = []
    point = base
    for _ in range(count):
        out.append(point)
        point = STARK_CURVE.double(point)
    return out


def _build_table() -> tuple[Point, ...]:
    p0, p1, p2, p3 = CONSTANT_POINTS
    high_bits = N_ELEMENT_BITS_HASH - _LOW_PART_BITS
    return tuple(
        _doublings(p0, _LOW_PART_BITS)
        + _doublings(p1, high_bits)
        + _doublings(p2, _LOW_PART_BITS)
        + _doublings(p3, high_bits)
    )


# 2 * 252 points: entry i * 252 + j is the addend for bit j of input i.
_TABLE = _build_table()


def _check_input(value: int | str) -> int:
    x = parse_int(value, InvalidHashInput, "pedersen hash input")
    if not 0 <= x < FIELD_PRIME:
        raise InvalidHashInput("pedersen hash input is not a field element")
    return x


def pedersen_hash_as_point(a: int | str, b: int | str) -> Point:
    """
    Pedersen hash of two field elements, returned as the full curve point.

    Args:
        a: First input in [0, p), int or hex string.
        b: Second input in [0, p), int or hex string.

    Returns:
        The resulting point (x, y).
    """
    point = SHIFT_POINT
    for i, value in enumerate((a, b)):
        x = _check_input(value)
        offset = i * N_ELEMENT_BITS_HASH
        j = 0
        while x:
            if x & 1:
                addend = _TABLE[offset + j]
                if point[0] == addend[0]:
                    raise InvalidHashInput("unhashable input")
                point = STARK_CURVE.add(point, addend)
            x >>= 1
            j += 1
    return point


def pedersen_hash(a: int | str, b: int | str) -> int:
    """
    Pedersen hash of two field elements.

    Args:
        a: First input in [0, p), int or hex string.
        b: Second input in [0, p), int or hex string.

    Returns:
        x-coordinate of the hash point, a field element.
    """
    return pedersen_hash_as_point(a, b)[0]


def pedersen_hash_chain(values: Iterable[int | str]) -> int:
    """Hash of a sequence: h(...h(h(0, v0), v1)..., len(values))."""
    acc = 0
    count = 0
    for value in values:
        acc = pedersen_hash(acc, value)
        count += 1
    return pedersen_hash(acc, count)


__all__: tuple[str, ...] = (
    "CONSTANT_POINTS",
    "N_ELEMENT_BITS_HASH",
    "SHIFT_POINT",
    "pedersen_hash",
    "pedersen_hash_as_point",
    "pedersen_hash_chain",
)
