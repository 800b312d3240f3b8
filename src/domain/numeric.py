"""Numeric helpers shared by the domain layer."""

import math
from decimal import Decimal
from typing import Optional, Union

Numeric = Union[int, float, str]


def parse_decimal(value: Optional[Numeric]) -> Optional[float]:
    """
    Parse a user-supplied decimal.

    Returns None for missing values, blank strings and anything that does not
    parse to a finite number, so callers can treat all of them as absent.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def round_half_up(value: float, digits: int = 0) -> float:
    """Round on the scaled value, halves going up (towards +inf)."""
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def format_decimal(value: float) -> str:
    """
    Render a number the way JavaScript's Number#toString does.

    Integers drop the trailing '.0' (6.0 -> '6'), and exponent notation is
    only used below 1e-6 or from 1e21 up ('1e-7', '1.5e+21').
    """
    number = float(value)
    if math.isnan(number):
        return "NaN"
    if number == 0:
        return "0"
    sign = "-" if number < 0 else ""
    if math.isinf(number):
        return sign + "Infinity"
    # Shortest round-tripping digits, as repr() produces them
    decimal = Decimal(repr(abs(number))).normalize()
    _, digit_tuple, exponent = decimal.as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    point = len(digits) + exponent

    if len(digits) <= point <= 21:
        text = digits + "0" * (point - len(digits))
    elif 0 < point <= 21:
        text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        mantissa = digits if len(digits) == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{point - 1:+d}"
    return sign + text
