"""
Prime-field arithmetic over a fixed modulus. Values are plain ints kept in [0, p).
"""

from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidFieldElement


def mod_inv(a: int, n: int) -> int:
    """Modular inverse via extended gcd."""
    if a < 0:
        a = (a % n + n) % n
    t, r = 0, n
    new_t, new_r = 1, a
    while new_r:
        q = r // new_r
        t, new_t = new_t, t - q * new_t
        r, new_r = new_r, r - q * new_r
    if r != 1:
        raise InvalidFieldElement("no inverse")
    return t % n


@dataclass(frozen=True)
class PrimeField:
    """Integers modulo the prime `p`."""

    p: int

    def check(self, value: int, name: str = "value") -> int:
        """Return `value` unchanged if it is a canonical element, else raise InvalidFieldElement."""
        if not isinstance(value, int) or not 0 <= value < self.p:
            raise InvalidFieldElement(f"{name} is not an element of the field")
        return value

    def add(self, a: int, b: int) -> int:
        return (a + b) % self.p

    def sub(self, a: int, b: int) -> int:
        return (a - b) % self.p

    def mul(self, a: int, b: int) -> int:
        return (a * b) % self.p

    def neg(self, a: int) -> int:
        return -a % self.p

    def inv(self, a: int) -> int:
        return mod_inv(a, self.p)

    def pow(self, a: int, e: int) -> int:
        return pow(a, e, self.p)

    def is_square(self, a: int) -> bool:
        a %= self.p
        return a == 0 or pow(a, (self.p - 1) // 2, self.p) == 1

    def sqrt(self, a: int) -> int | None:
        """
        Square root by Tonelli-Shanks.

        Args:
            a: Field element.

        Returns:
            Some root of `a`, or None if `a` is a non-residue.
        """
        p = self.p
        a %= p
        if a == 0:
            return 0
        if not self.is_square(a):
            return None
        if p % 4 == 3:
            return pow(a, (p + 1) // 4, p)
        q, s = p - 1, 0
        while q % 2 == 0:
            q //= 2
            s += 1
        z = 2
        while self.is_square(z):
            z += 1
        m, c, t, r = s, pow(z, q, p), pow(a, q, p), pow(a, (q + 1) // 2, p)
        while t != 1:
            i, t2 = 0, t
            while t2 != 1:
                t2 = t2 * t2 % p
                i += 1
            b = pow(c, 1 << (m - i - 1), p)
            m, c = i, b * b % p
            t, r = t * c % p, r * b % p
        return r


__all__: tuple[str, ...] = ("PrimeField", "mod_inv")
