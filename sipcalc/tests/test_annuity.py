from __future__ import annotations

from math import isclose

from sipcalc.core.annuity import (
    annuity_due_factor,
    annuity_due_future_value,
    annuity_due_payment,
    fisher_rate,
    monthly_rate,
)


def test_monthly_rate_from_annual_percent():
    assert isclose(monthly_rate(12), 0.01)
    assert monthly_rate(0) == 0


def test_fisher_rate_removes_inflation():
    assert isclose(fisher_rate(0.12, 0.06), 1.12 / 1.06 - 1)
    assert fisher_rate(0.05, 0.05) == 0


def test_zero_rate_factor_is_the_number_of_payments():
    assert annuity_due_factor(120, 0) == 120


def test_payment_inverts_future_value():
    future_value = annuity_due_future_value(3000, 60, 0.008)
    assert isclose(annuity_due_payment(future_value, 60, 0.008), 3000, rel_tol=1e-12)
    assert isclose(annuity_due_payment(60000, 60, 0), 1000)
