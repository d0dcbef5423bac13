"""
HMAC-SHA256 DRBG used for deterministic ECDSA nonces (RFC 6979, section 3.2).
"""

from __future__ import annotations

import hashlib
import hmac


class HmacDrbg:
    """
    Deterministic random bit generator keyed by (entropy, nonce, personalization).

    Each `generate` call is followed by the K/V update of RFC 6979 step h.3, so
    successive outputs are the successive nonce candidates.
    """

    def __init__(self, entropy: bytes, nonce: bytes, pers: bytes = b"") -> None:
        self._k = b"\x00" * 32
        self._v = b"\x01" * 32
        self._update(entropy + nonce + pers)

    def _hmac(self, *parts: bytes) -> bytes:
        mac = hmac.new(self._k, digestmod=hashlib.sha256)
        for part in parts:
            mac.update(part)
        return mac.digest()

    def _update(self, seed: bytes = b"") -> None:
        self._k = self._hmac(self._v, b"\x00", seed)
        self._v = self._hmac(self._v)
        if not seed:
            return
        self._k = self._hmac(self._v, b"\x01", seed)
        self._v = self._hmac(self._v)

    def generate(self, length: int) -> bytes:
        out = b""
        while len(out) < length:
            self._v = self._hmac(self._v)
            out += self._v
        self._update()
        return out[:length]


__all__: tuple[str, ...] = ("HmacDrbg",)
