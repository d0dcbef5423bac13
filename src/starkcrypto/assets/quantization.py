"""
Exact conversion between base-unit amounts and quantized exchange amounts.

Amounts are ints or decimal strings; floats are refused since they cannot
represent most token amounts exactly.
"""

from __future__ import annotations

import re

from .._hex import to_int
from ..errors import InvalidAmount, NonIntegerQuantization

_DECIMAL_RE = re.compile(r"^(\d+)(?:\.(\d+))?$")


def _to_base_units(amount: int | str, decimals: int) -> int:
    if isinstance(amount, bool) or not isinstance(amount, (int, str)):
        raise InvalidAmount(f"amount must be an int or decimal string, got {type(amount).__name__}")
    if isinstance(amount, int):
        if amount < 0:
            raise InvalidAmount("amount must not be negative")
        return amount * 10**decimals
    match = _DECIMAL_RE.match(amount.strip())
    if match is None:
        raise InvalidAmount(f"malformed amount {amount!r}")
    whole, fraction = match.group(1), match.group(2) or ""
    if fraction[decimals:].strip("0"):
        raise NonIntegerQuantization(f"{amount} has more than {decimals} decimals")
    fraction = fraction[:decimals].ljust(decimals, "0")
    return int(whole + fraction)


def _check_quantum(quantum: int | str) -> int:
    try:
        value = to_int(quantum, base=10)
    except (TypeError, ValueError) as exc:
        raise InvalidAmount(f"malformed quantum {quantum!r}") from exc
    if value <= 0:
        raise InvalidAmount("quantum must be positive")
    return value


def quantize_amount(amount: int | str, quantum: int | str, decimals: int = 0) -> int:
    """
    Quantized amount = amount * 10^decimals / quantum, which must be exact.

    Args:
        amount: Non-negative int or decimal string ("1.25" needs decimals >= 2).
        quantum: Asset quantum, positive.
        decimals: Decimal places of `amount`'s unit above the base unit.

    Returns:
        The quantized integer amount.
    """
    if decimals < 0:
        raise InvalidAmount("decimals must not be negative")
    base_units = _to_base_units(amount, decimals)
    quantized, remainder = divmod(base_units, _check_quantum(quantum))
    if remainder:
        raise NonIntegerQuantization(f"{amount} is not a multiple of quantum {quantum}")
    return quantized


def dequantize_amount(quantized: int | str, quantum: int | str) -> int:
    """Base-unit amount of a quantized amount."""
    try:
        value = to_int(quantized, base=10)
    except (TypeError, ValueError) as exc:
        raise InvalidAmount(f"malformed quantized amount {quantized!r}") from exc
    if value < 0:
        raise InvalidAmount("quantized amount must not be negative")
    return value * _check_quantum(quantum)


__all__: tuple[str, ...] = ("dequantize_amount", "quantize_amount")
