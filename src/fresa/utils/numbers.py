"""Numeric text utilities for Fresa.

Provides:
- format_number: positional (never scientific) text for argument values
- to_unsigned: saturating float -> non-negative integer code
"""

from __future__ import annotations

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Format a float as a positional G-code number.

    Uses the shortest digits that round-trip the float (``repr``), expanded
    to positional notation because the lexer does not read exponents.
    Always keeps a decimal point so the text reads as a real number.

    Args:
        value: Finite float to format

    Returns:
        Text such as "3.1415", "-20.0" or "0.00001"

    Raises:
        ValueError: If value is NaN or infinite

    Example:
        >>> format_number(1e-05)
        '0.00001'
        >>> format_number(90.0)
        '90.0'
    """
    if not math.isfinite(value):
        msg = f"Cannot format non-finite number: {value!r}"
        raise ValueError(msg)

    text = format(Decimal(repr(float(value))), "f")
    if "." not in text:
        text += ".0"
    return text


# Largest value a command, line, or program number can hold.
UNSIGNED_MAX = 2**32 - 1


def to_unsigned(value: float) -> int:
    """Convert a parsed number to a non-negative integer code.

    Truncates toward zero and saturates into ``0..UNSIGNED_MAX``, so
    ``G-1`` reads as ``G0`` and NaN reads as 0.

    Example:
        >>> to_unsigned(91.7)
        91
        >>> to_unsigned(-3.0)
        0
    """
    if math.isnan(value) or value <= 0:
        return 0
    if value >= UNSIGNED_MAX:
        return UNSIGNED_MAX
    return int(value)
