from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Callable, Dict, List, Literal, Optional, Union, get_args

from pydantic import BaseModel, ConfigDict, Field

from sipcalc.core.annuity import (
    annuity_due_future_value,
    annuity_due_payment,
    fisher_rate,
    monthly_rate,
)
from sipcalc.core.errors import DivisionByZero, InvalidParameter
from sipcalc.core.validation import (
    require_finite,
    require_monthly_rate,
    require_positive,
    require_whole_years,
)

logger = logging.getLogger(__name__)


class InvestmentMode(str, Enum):
    BASIC = "basic"
    STEP_UP = "step_up"
    GOAL = "goal"


# -----------------------------
# Parameters (one variant per mode)
# -----------------------------


class BasicParameters(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal["basic"] = "basic"

    monthly_investment: float = Field(gt=0, le=1e12)
    years: float = Field(gt=0, le=100)  # fractional years are allowed
    annual_return_rate_percent: float = Field(ge=-100, le=100)
    annual_inflation_rate_percent: float = Field(ge=-50, le=100)


class StepUpParameters(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal["step_up"] = "step_up"

    initial_monthly_investment: float = Field(gt=0, le=1e12)
    years: int = Field(gt=0, le=100)
    annual_return_rate_percent: float = Field(ge=-100, le=100)
    annual_step_up_percent: float = Field(ge=0, le=100)


class GoalParameters(BaseModel):
    model_config = ConfigDict(extra="forbid")

    mode: Literal["goal"] = "goal"

    target_amount: float = Field(gt=0, le=1e12)  # in today's money
    years: float = Field(gt=0, le=100)
    annual_return_rate_percent: float = Field(ge=-100, le=100)
    annual_inflation_rate_percent: float = Field(ge=-50, le=100)


SIPParameters = Annotated[
    Union[BasicParameters, StepUpParameters, GoalParameters],
    Field(discriminator="mode"),
]


class ProjectionResult(BaseModel):
    mode: InvestmentMode
    total_invested: float
    total_returns: float  # negative when the return rate is negative
    total_value: float
    inflation_adjusted_value: float
    wealth_multiple: float
    # only the goal mode solves for a contribution
    required_monthly_contribution: Optional[float] = None


def _wealth_multiple(total_value: float, total_invested: float) -> float:
    if total_invested == 0:
        raise DivisionByZero("wealth multiple is undefined when nothing is invested")
    return total_value / total_invested


# -----------------------------
# Calculators
# -----------------------------


def calculate_basic(
    monthly_investment: float,
    years: float,
    annual_return_rate_percent: float,
    annual_inflation_rate_percent: float,
) -> ProjectionResult:
    """
    Fixed monthly SIP, contributions at the start of every month.

    The inflation-adjusted value reruns the same annuity at the real rate
    given by the Fisher relation, so it is the future value expressed in
    today's money.
    """
    monthly_investment = require_positive(monthly_investment, "monthly_investment")
    years = require_positive(years, "years")
    rate_pct = require_finite(annual_return_rate_percent, "annual_return_rate_percent")
    inflation_pct = require_finite(annual_inflation_rate_percent, "annual_inflation_rate_percent")

    if inflation_pct == -100:
        raise DivisionByZero("annual_inflation_rate_percent of -100% has no real rate")

    nominal = require_monthly_rate(monthly_rate(rate_pct), "annual_return_rate_percent")
    real = require_monthly_rate(
        fisher_rate(rate_pct / 100, inflation_pct / 100) / 12,
        "annual_inflation_rate_percent",
    )
    months = years * 12

    total_invested = monthly_investment * months
    future_value = annuity_due_future_value(monthly_investment, months, nominal)
    real_value = annuity_due_future_value(monthly_investment, months, real)

    result = ProjectionResult(
        mode=InvestmentMode.BASIC,
        total_invested=total_invested,
        total_returns=future_value - total_invested,
        total_value=future_value,
        inflation_adjusted_value=real_value,
        wealth_multiple=_wealth_multiple(future_value, total_invested),
    )
    logger.debug("basic projection: %s", result)
    return result


def calculate_step_up(
    initial_monthly_investment: float,
    years: int,
    annual_return_rate_percent: float,
    annual_step_up_percent: float,
) -> ProjectionResult:
    """
    Monthly SIP that grows by a fixed percentage once a year.

    Order of operations (per year):
      1) Future value of this year's 12 start-of-month contributions.
      2) Grow the running total by one year at the annual rate, then add 1).
      3) Count this year's contributions as invested.
      4) Step the monthly contribution up for next year.

    No inflation adjustment is applied: inflation_adjusted_value equals
    total_value in this mode.
    """
    contribution = require_positive(initial_monthly_investment, "initial_monthly_investment")
    years = require_whole_years(years)
    rate_pct = require_finite(annual_return_rate_percent, "annual_return_rate_percent")
    step_up_pct = require_finite(annual_step_up_percent, "annual_step_up_percent")
    if step_up_pct < 0:
        raise InvalidParameter(
            f"annual_step_up_percent must not be negative, got {step_up_pct}",
            "annual_step_up_percent",
        )

    rate = require_monthly_rate(monthly_rate(rate_pct), "annual_return_rate_percent")
    annual_growth = 1 + rate_pct / 100

    value = 0.0
    total_invested = 0.0
    for _ in range(years):
        year_value = annuity_due_future_value(contribution, 12, rate)
        value = value * annual_growth + year_value
        total_invested += contribution * 12
        contribution *= 1 + step_up_pct / 100

    result = ProjectionResult(
        mode=InvestmentMode.STEP_UP,
        total_invested=total_invested,
        total_returns=value - total_invested,
        total_value=value,
        inflation_adjusted_value=value,
        wealth_multiple=_wealth_multiple(value, total_invested),
    )
    logger.debug("step-up projection: %s", result)
    return result


def calculate_goal(
    target_amount: float,
    years: float,
    annual_return_rate_percent: float,
    annual_inflation_rate_percent: float,
) -> ProjectionResult:
    """
    Solve for the monthly SIP that reaches ``target_amount`` (today's money)
    after ``years``.

    The target is first inflated to its nominal future value; that is what
    the contributions must grow into. inflation_adjusted_value reports the
    original, un-inflated target.
    """
    target_amount = require_positive(target_amount, "target_amount")
    years = require_positive(years, "years")
    rate_pct = require_finite(annual_return_rate_percent, "annual_return_rate_percent")
    inflation_pct = require_finite(annual_inflation_rate_percent, "annual_inflation_rate_percent")
    if inflation_pct <= -100:
        raise InvalidParameter(
            "annual_inflation_rate_percent must be above -100%",
            "annual_inflation_rate_percent",
        )

    rate = require_monthly_rate(monthly_rate(rate_pct), "annual_return_rate_percent")
    months = years * 12

    inflated_target = target_amount * (1 + inflation_pct / 100) ** years
    required = annuity_due_payment(inflated_target, months, rate)
    total_invested = required * months

    result = ProjectionResult(
        mode=InvestmentMode.GOAL,
        total_invested=total_invested,
        total_returns=inflated_target - total_invested,
        total_value=inflated_target,
        inflation_adjusted_value=target_amount,
        wealth_multiple=_wealth_multiple(inflated_target, total_invested),
        required_monthly_contribution=required,
    )
    logger.debug("goal projection: %s", result)
    return result


# -----------------------------
# Mode dispatch
# -----------------------------


def _run_basic(params: BasicParameters) -> ProjectionResult:
    return calculate_basic(
        params.monthly_investment,
        params.years,
        params.annual_return_rate_percent,
        params.annual_inflation_rate_percent,
    )


def _run_step_up(params: StepUpParameters) -> ProjectionResult:
    return calculate_step_up(
        params.initial_monthly_investment,
        params.years,
        params.annual_return_rate_percent,
        params.annual_step_up_percent,
    )


def _run_goal(params: GoalParameters) -> ProjectionResult:
    return calculate_goal(
        params.target_amount,
        params.years,
        params.annual_return_rate_percent,
        params.annual_inflation_rate_percent,
    )


_CALCULATORS: Dict[type, Callable[..., ProjectionResult]] = {
    BasicParameters: _run_basic,
    StepUpParameters: _run_step_up,
    GoalParameters: _run_goal,
}

PARAMETER_VARIANTS: List[type] = list(get_args(get_args(SIPParameters)[0]))

# a new variant without a calculator fails at import time, not on first use
_unhandled = [variant.__name__ for variant in PARAMETER_VARIANTS if variant not in _CALCULATORS]
if _unhandled:
    raise RuntimeError(f"no calculator registered for {', '.join(_unhandled)}")


def calculate(params: SIPParameters) -> ProjectionResult:
    """Run the calculator matching the parameter variant."""
    calculator = _CALCULATORS.get(type(params))
    if calculator is None:
        raise InvalidParameter(f"unsupported parameters: {type(params).__name__}", "mode")
    return calculator(params)


def available_modes() -> List[str]:
    return [variant.model_fields["mode"].default for variant in PARAMETER_VARIANTS]


__all__ = [
    "InvestmentMode",
    "BasicParameters",
    "StepUpParameters",
    "GoalParameters",
    "SIPParameters",
    "PARAMETER_VARIANTS",
    "ProjectionResult",
    "calculate_basic",
    "calculate_step_up",
    "calculate_goal",
    "calculate",
    "available_modes",
]
