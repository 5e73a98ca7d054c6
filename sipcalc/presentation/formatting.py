"""Display strings for projection results."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_CEILING, Decimal
from typing import Dict

from sipcalc import config
from sipcalc.core.errors import InvalidParameter
from sipcalc.core.projection import ProjectionResult

CURRENCY_FIELDS = (
    "total_invested",
    "total_returns",
    "total_value",
    "inflation_adjusted_value",
)


def group_indian(digits: str) -> str:
    """Group a string of digits the en-IN way: last three, then pairs (12,34,567)."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(amount: float, symbol: str = config.CURRENCY_SYMBOL) -> str:
    if not math.isfinite(amount):
        raise InvalidParameter(f"cannot display non-finite amount {amount!r}", "amount")
    # halves round towards +inf, so -1234.5 shows as -1,234
    rounded = int(Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_CEILING))
    sign = "-" if rounded < 0 else ""
    return f"{symbol}{sign}{group_indian(str(abs(rounded)))}"


def format_wealth_multiple(multiple: float) -> str:
    if not math.isfinite(multiple):
        raise InvalidParameter(f"cannot display non-finite multiple {multiple!r}", "wealth_multiple")
    return f"{multiple:.2f}x"


def format_field(field: str, value: float, symbol: str = config.CURRENCY_SYMBOL) -> str:
    if field == "wealth_multiple":
        return format_wealth_multiple(value)
    return format_currency(value, symbol)


def format_result(result: ProjectionResult, symbol: str = config.CURRENCY_SYMBOL) -> Dict[str, str]:
    display = {field: format_currency(getattr(result, field), symbol) for field in CURRENCY_FIELDS}
    display["wealth_multiple"] = format_wealth_multiple(result.wealth_multiple)
    if result.required_monthly_contribution is not None:
        display["required_monthly_contribution"] = format_currency(
            result.required_monthly_contribution, symbol
        )
    return display
