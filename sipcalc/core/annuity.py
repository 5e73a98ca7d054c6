"""Closed-form annuity-due helpers.

Contributions are made at the start of each month, so every payment earns
one extra period of growth compared with an ordinary annuity:

    FV = P * ((1 + r)^n - 1) / r * (1 + r)

At r == 0 the formula degenerates to P * n, its limit as r -> 0.
Callers validate r != -1 before calling in here.
"""

from __future__ import annotations


def monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def fisher_rate(nominal_rate: float, inflation_rate: float) -> float:
    return (1 + nominal_rate) / (1 + inflation_rate) - 1


def annuity_due_factor(months: float, rate: float) -> float:
    """Future value of 1 paid at the start of each of ``months`` periods."""
    if rate == 0:
        return months
    return ((1 + rate) ** months - 1) / rate * (1 + rate)


def annuity_due_future_value(payment: float, months: float, rate: float) -> float:
    return payment * annuity_due_factor(months, rate)


def annuity_due_payment(future_value: float, months: float, rate: float) -> float:
    """Invert the annuity-due formula: the payment that grows to ``future_value``."""
    if rate == 0:
        return future_value / months
    return future_value * rate / (((1 + rate) ** months - 1) * (1 + rate))
