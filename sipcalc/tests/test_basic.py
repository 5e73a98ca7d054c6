from __future__ import annotations

import math
from math import isclose

import pytest

from sipcalc.core.errors import DivisionByZero, InvalidParameter
from sipcalc.core.projection import InvestmentMode, calculate_basic


def annuity_due(payment: float, months: float, rate: float) -> float:
    return payment * ((1 + rate) ** months - 1) / rate * (1 + rate)


def test_reference_scenario_matches_annuity_due_formula():
    """5000/month for 10 years at 12% with 6% inflation."""
    result = calculate_basic(5000, 10, 12, 6)

    expected_value = annuity_due(5000, 120, 0.01)
    real_monthly = ((1.12 / 1.06) - 1) / 12
    expected_real = annuity_due(5000, 120, real_monthly)

    assert result.mode == InvestmentMode.BASIC
    assert isclose(result.total_invested, 600000.0, abs_tol=1e-6)
    assert isclose(result.total_value, expected_value, rel_tol=1e-12)
    assert isclose(result.total_value, 1161695.38, abs_tol=1.0)
    assert isclose(result.total_returns, expected_value - 600000.0, rel_tol=1e-12)
    assert isclose(result.inflation_adjusted_value, expected_real, rel_tol=1e-12)
    assert isclose(result.wealth_multiple, result.total_value / 600000.0, rel_tol=1e-12)
    assert result.required_monthly_contribution is None


@pytest.mark.parametrize(
    "monthly, years, rate",
    [(100, 1, 0.5), (5000, 10, 12), (25000, 30, 18), (1, 0.5, 3)],
)
def test_positive_rate_grows_beyond_invested(monthly, years, rate):
    result = calculate_basic(monthly, years, rate, 5)

    assert result.total_value > result.total_invested
    assert result.total_returns > 0
    assert result.wealth_multiple > 1


def test_zero_rate_returns_exactly_what_was_invested():
    result = calculate_basic(1000, 5, 0, 0)

    assert result.total_invested == 60000.0
    assert result.total_value == 60000.0
    assert result.total_returns == 0.0
    assert result.inflation_adjusted_value == 60000.0
    assert result.wealth_multiple == 1.0


def test_inflation_lowers_the_real_value():
    result = calculate_basic(5000, 10, 12, 6)

    assert result.total_invested < result.inflation_adjusted_value < result.total_value


def test_negative_rate_loses_money():
    result = calculate_basic(1000, 5, -5, 0)

    assert result.total_value < result.total_invested
    assert result.total_returns < 0
    assert isclose(result.total_value, result.total_invested + result.total_returns, rel_tol=1e-12)


def test_fractional_years_are_accepted():
    result = calculate_basic(1000, 1.5, 12, 6)

    assert isclose(result.total_invested, 18000.0, abs_tol=1e-9)
    assert isclose(result.total_value, annuity_due(1000, 18, 0.01), rel_tol=1e-12)


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"monthly_investment": 0}, "monthly_investment"),
        ({"monthly_investment": -500}, "monthly_investment"),
        ({"years": 0}, "years"),
        ({"years": -2}, "years"),
        ({"annual_return_rate_percent": math.nan}, "annual_return_rate_percent"),
        ({"annual_inflation_rate_percent": math.inf}, "annual_inflation_rate_percent"),
        ({"monthly_investment": "5000"}, "monthly_investment"),
    ],
)
def test_invalid_parameters_fail_before_computing(kwargs, field):
    params = {
        "monthly_investment": 5000,
        "years": 10,
        "annual_return_rate_percent": 12,
        "annual_inflation_rate_percent": 6,
    }
    params.update(kwargs)

    with pytest.raises(InvalidParameter) as excinfo:
        calculate_basic(**params)
    assert excinfo.value.field == field


def test_minus_1200_percent_is_a_division_by_zero():
    with pytest.raises(DivisionByZero):
        calculate_basic(5000, 10, -1200, 6)


def test_minus_100_percent_inflation_is_a_division_by_zero():
    with pytest.raises(DivisionByZero):
        calculate_basic(5000, 10, 12, -100)


def test_rate_below_minus_1200_percent_is_rejected():
    with pytest.raises(InvalidParameter):
        calculate_basic(5000, 10, -1500, 6)
