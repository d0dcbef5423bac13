"""
Short Weierstrass curves y^2 = x^3 + a*x + b over a prime field, affine coordinates.

(0, 0) is the point at infinity; it lies on neither supported curve since b != 0.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidFieldElement
from ._field import PrimeField

Point = tuple[int, int]

INFINITY: Point = (0, 0)


@dataclass(frozen=True)
class Curve:
    """Fixed curve parameters plus point arithmetic; instances are module constants."""

    name: str
    field: PrimeField
    a: int
    b: int
    n: int
    g: Point

    @property
    def p(self) -> int:
        return self.field.p

    def is_infinity(self, point: Point) -> bool:
        return point == INFINITY

    def check_point(self, point: Point) -> Point:
        """Raise InvalidFieldElement unless both coordinates are field elements."""
        x, y = point
        self.field.check(x, "x")
        self.field.check(y, "y")
        return point

    def contains(self, point: Point) -> bool:
        """True iff `point` is the identity or satisfies the curve equation."""
        if self.is_infinity(point):
            return True
        x, y = self.check_point(point)
        p = self.p
        return (y * y - (x * x * x + self.a * x + self.b)) % p == 0

    def equal(self, point: Point, other: Point) -> bool:
        return self.check_point(point) == self.check_point(other)

    def neg(self, point: Point) -> Point:
        if self.is_infinity(point):
            return INFINITY
        x, y = self.check_point(point)
        return (x, -y % self.p)

    def add(self, point: Point, other: Point) -> Point:
        """Add two points; coordinates must be canonical field elements."""
        return self._add(self.check_point(point), self.check_point(other))

    def double(self, point: Point) -> Point:
        return self._double(self.check_point(point))

    def mul(self, k: int, point: Point) -> Point:
        """
        Scalar multiplication k * point (double-and-add).

        Args:
            k: Scalar in [0, n); callers reduce mod n themselves.
            point: Curve point.

        Returns:
            k * point, or INFINITY.
        """
        if not 0 <= k < self.n:
            raise InvalidFieldElement("scalar out of range [0, n)")
        return self._mul(k, self.check_point(point))

    def y_from_x(self, x: int, odd: bool) -> int | None:
        """Solve the curve equation for y with the requested parity; None if x is not on the curve."""
        x = self.field.check(x, "x")
        rhs = (x * x * x + self.a * x + self.b) % self.p
        y = self.field.sqrt(rhs)
        if y is None:
            return None
        if (y & 1) != int(odd):
            y = -y % self.p
        return y

    def _add(self, point: Point, other: Point) -> Point:
        if point == INFINITY:
            return other
        if other == INFINITY:
            return point
        px, py = point
        qx, qy = other
        p = self.p
        if px == qx:
            if py == qy:
                return self._double(point)
            return INFINITY
        lam = (qy - py) * self.field.inv(qx - px) % p
        rx = (lam * lam - px - qx) % p
        ry = (lam * (px - rx) - py) % p
        return (rx, ry)

    def _double(self, point: Point) -> Point:
        if point == INFINITY:
            return INFINITY
        px, py = point
        if py == 0:
            return INFINITY
        p = self.p
        lam = (3 * px * px + self.a) * self.field.inv(2 * py) % p
        rx = (lam * lam - 2 * px) % p
        ry = (lam * (px - rx) - py) % p
        return (rx, ry)

    def _mul(self, k: int, point: Point) -> Point:
        result = INFINITY
        while k:
            if k & 1:
                result = self._add(result, point)
            point = self._double(point)
            k >>= 1
        return result


__all__: tuple[str, ...] = ("Curve", "INFINITY", "Point")
