"""Boundary conversions: ints, hex strings and decimal strings (never floats)."""

from __future__ import annotations

from .errors import StarkCryptoError


def strip_hex_prefix(value: str) -> str:
    return value[2:] if value[:2] in ("0x", "0X") else value


def to_int(value: int | str, base: int = 16) -> int:
    """
    Parse a boundary value into an int.

    Args:
        value: Python int, hex string (optional 0x prefix) or decimal string.
        base: 16 for hex strings, 10 for decimal strings.

    Returns:
        The parsed integer.
    """
    if isinstance(value, bool):
        raise TypeError("bool is not a valid numeric input")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise TypeError(f"expected int or str, got {type(value).__name__}")
    text = value.strip()
    if base == 16:
        text = strip_hex_prefix(text)
    if not text:
        raise ValueError("empty numeric string")
    return int(text, base)


def parse_int(
    value: int | str, error: type[StarkCryptoError], name: str, base: int = 16
) -> int:
    """Like `to_int`, but a malformed value raises `error` naming the field."""
    try:
        return to_int(value, base)
    except (TypeError, ValueError) as exc:
        raise error(f"{name}: malformed integer {value!r}") from exc


def int_to_hex(value: int, width: int = 0, prefix: bool = False) -> str:
    """Lowercase hex, left-padded with zeros to `width` chars."""
    out = format(value, "x").rjust(width, "0")
    return "0x" + out if prefix else out


__all__: tuple[str, ...] = ("int_to_hex", "parse_int", "strip_hex_prefix", "to_int")
