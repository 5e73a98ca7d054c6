"""Precondition checks shared by the calculators and the series generator."""

from __future__ import annotations

import math

from sipcalc.core.errors import DivisionByZero, InvalidParameter


def require_finite(value: float, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(f"{field} must be a number, got {value!r}", field)
    if not math.isfinite(value):
        raise InvalidParameter(f"{field} must be finite, got {value!r}", field)
    return float(value)


def require_positive(value: float, field: str) -> float:
    value = require_finite(value, field)
    if value <= 0:
        raise InvalidParameter(f"{field} must be greater than zero, got {value}", field)
    return value


def require_whole_years(years: float, field: str = "years") -> int:
    """Accept 10 or 10.0, reject 0, negatives, fractions and booleans."""
    value = require_positive(years, field)
    if not value.is_integer():
        raise InvalidParameter(f"{field} must be a whole number of years, got {years}", field)
    return int(value)


def require_monthly_rate(monthly_rate: float, field: str) -> float:
    """A monthly rate of -1 zeroes every annuity denominator; below -1 has no meaning."""
    if monthly_rate == -1:
        raise DivisionByZero(f"{field} gives a monthly rate of -100%")
    if monthly_rate < -1:
        raise InvalidParameter(f"{field} gives a monthly rate below -100%", field)
    return monthly_rate
