"""Decimal arithmetic core shared by every analyzer.

All monetary and percentage values are ``decimal.Decimal`` and every
operation runs through the ``FINANCIAL`` context rather than the thread-local
default context, so analyzers can be called from any thread without
touching global state. Native floats appear only at the output boundary
(``to_number``).
"""

from __future__ import annotations

import logging
from decimal import (
    ROUND_CEILING,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    InvalidOperation,
    Overflow,
)
from typing import Optional, Union

logger = logging.getLogger(__name__)

DecimalInput = Union[Decimal, int, float, str]

FINANCIAL = Context(
    prec=28,
    rounding=ROUND_HALF_EVEN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)

ZERO = Decimal("0")
ONE = Decimal("1")
HUNDRED = Decimal("100")
TWELVE = Decimal("12")

MAX_FINANCIAL_VALUE = Decimal("999999999999.99")
MIN_FINANCIAL_VALUE = Decimal("-999999999999.99")


def to_decimal(value: DecimalInput) -> Decimal:
    """Convert an input value to Decimal.

    Floats go through their shortest ``repr`` so ``0.1`` becomes
    ``Decimal("0.1")`` instead of its binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError("booleans are not numeric inputs")
    if isinstance(value, float):
        value = repr(value)
    result = FINANCIAL.create_decimal(value)
    if not result.is_finite():
        raise ValueError(f"non-finite value is not a valid financial input: {value!r}")
    return result


def add(a: Decimal, b: Decimal) -> Decimal:
    return FINANCIAL.add(a, b)


def subtract(a: Decimal, b: Decimal) -> Decimal:
    return FINANCIAL.subtract(a, b)


def multiply(a: Decimal, b: Decimal) -> Decimal:
    return FINANCIAL.multiply(a, b)


def divide(a: Decimal, b: Decimal) -> Decimal:
    """Divide ``a`` by ``b``. Raises ``decimal.DivisionByZero`` if ``b`` is zero."""
    return FINANCIAL.divide(a, b)


def power(base: Decimal, exponent: int) -> Decimal:
    """Raise ``base`` to an integral exponent."""
    return FINANCIAL.power(base, Decimal(exponent))


def maximum(a: Decimal, b: Decimal) -> Decimal:
    return FINANCIAL.max(a, b)


def absolute(value: Decimal) -> Decimal:
    return FINANCIAL.abs(value)


def ceiling(value: Decimal) -> int:
    return int(value.to_integral_value(rounding=ROUND_CEILING))


def divide_or_zero(
    numerator: Decimal,
    denominator: Decimal,
    field: str,
    degraded: list[str],
) -> Decimal:
    """Divide, or return 0 and record ``field`` as degraded when the denominator is 0."""
    if denominator.is_zero():
        logger.debug("Zero denominator for %s, returning 0", field)
        degraded.append(field)
        return ZERO
    return FINANCIAL.divide(numerator, denominator)


def percentage_of(
    part: Decimal,
    whole: Decimal,
    field: str,
    degraded: list[str],
) -> Decimal:
    """part / whole * 100, zero-guarded like ``divide_or_zero``."""
    if whole.is_zero():
        logger.debug("Zero denominator for %s, returning 0", field)
        degraded.append(field)
        return ZERO
    return FINANCIAL.multiply(FINANCIAL.divide(part, whole), HUNDRED)


def apply_percentage(base: Decimal, percent: Decimal) -> Decimal:
    """base * percent / 100"""
    return FINANCIAL.multiply(base, FINANCIAL.divide(percent, HUNDRED))


def bankers_round(value: Decimal, places: int = 2) -> Decimal:
    """Round half to even at ``places`` decimal places."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_EVEN, context=FINANCIAL)


def to_number(value: Decimal, places: Optional[int] = None) -> float:
    """Output boundary: Decimal -> float, optionally banker's-rounded first."""
    if places is not None:
        value = bankers_round(value, places)
    return float(value)


def is_financially_valid(value: DecimalInput) -> bool:
    """True when the value is finite and inside the supported money range."""
    try:
        dec = to_decimal(value)
    except (ArithmeticError, TypeError, ValueError):
        return False
    return MIN_FINANCIAL_VALUE <= dec <= MAX_FINANCIAL_VALUE
