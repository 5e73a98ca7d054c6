from __future__ import annotations

from math import isclose

import pytest

from sipcalc.core.errors import DivisionByZero, InvalidParameter
from sipcalc.core.projection import InvestmentMode, calculate_basic, calculate_goal


def test_required_contribution_reaches_the_inflated_target():
    goal = calculate_goal(1_000_000, 10, 12, 6)

    inflated = 1_000_000 * 1.06**10
    assert goal.mode == InvestmentMode.GOAL
    assert isclose(goal.total_value, inflated, rel_tol=1e-12)

    replay = calculate_basic(goal.required_monthly_contribution, 10, 12, 6)
    assert isclose(replay.total_value, goal.total_value, rel_tol=1e-9)
    assert isclose(replay.total_invested, goal.total_invested, rel_tol=1e-9)


def test_goal_reports_the_real_terms_target():
    goal = calculate_goal(500_000, 8, 10, 5)

    assert goal.inflation_adjusted_value == 500_000
    assert isclose(goal.total_returns, goal.total_value - goal.total_invested, rel_tol=1e-12)
    assert isclose(goal.wealth_multiple, goal.total_value / goal.total_invested, rel_tol=1e-12)


def test_zero_rate_and_inflation_split_target_evenly():
    goal = calculate_goal(120_000, 10, 0, 0)

    assert isclose(goal.required_monthly_contribution, 1000.0, rel_tol=1e-12)
    assert isclose(goal.total_invested, 120_000.0, rel_tol=1e-12)
    assert isclose(goal.total_returns, 0.0, abs_tol=1e-6)
    assert isclose(goal.wealth_multiple, 1.0, rel_tol=1e-12)


def test_higher_return_needs_smaller_contribution():
    cautious = calculate_goal(1_000_000, 15, 6, 5)
    aggressive = calculate_goal(1_000_000, 15, 14, 5)

    assert aggressive.required_monthly_contribution < cautious.required_monthly_contribution


@pytest.mark.parametrize(
    "kwargs, field",
    [
        ({"target_amount": 0}, "target_amount"),
        ({"years": -1}, "years"),
        ({"annual_inflation_rate_percent": -100}, "annual_inflation_rate_percent"),
    ],
)
def test_invalid_parameters(kwargs, field):
    params = {
        "target_amount": 1_000_000,
        "years": 10,
        "annual_return_rate_percent": 12,
        "annual_inflation_rate_percent": 6,
    }
    params.update(kwargs)

    with pytest.raises(InvalidParameter) as excinfo:
        calculate_goal(**params)
    assert excinfo.value.field == field


def test_minus_1200_percent_is_a_division_by_zero():
    with pytest.raises(DivisionByZero):
        calculate_goal(1_000_000, 10, -1200, 6)
