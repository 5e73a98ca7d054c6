"""Per-year chart series derived from a projection result."""

from __future__ import annotations

import logging
import math
from typing import List

from pydantic import BaseModel

from sipcalc.core.errors import InvalidParameter
from sipcalc.core.projection import ProjectionResult

logger = logging.getLogger(__name__)


class YearPoint(BaseModel):
    label: str
    invested: float
    value: float


class YearlySeries(BaseModel):
    points: List[YearPoint]

    @property
    def labels(self) -> List[str]:
        return [point.label for point in self.points]

    @property
    def invested(self) -> List[float]:
        return [point.invested for point in self.points]

    @property
    def values(self) -> List[float]:
        return [point.value for point in self.points]

    def __len__(self) -> int:
        return len(self.points)


def series_years(years: float) -> int:
    """Whole number of chart years covering ``years``; fractional horizons round up."""
    if isinstance(years, bool) or not isinstance(years, (int, float)) or not math.isfinite(years):
        raise InvalidParameter(f"years must be a finite number, got {years!r}", "years")
    if years <= 0:
        raise InvalidParameter(f"years must be greater than zero, got {years}", "years")
    return int(math.ceil(years))


def generate_series(result: ProjectionResult, years: int) -> YearlySeries:
    """
    Straight line from (0, 0) at "Year 0" to the final totals at "Year N".

    This is linear interpolation, not year-by-year compounding: the real
    growth curve is convex, the chart deliberately is not.
    """
    if isinstance(years, bool) or not isinstance(years, int):
        raise InvalidParameter(f"years must be a whole number, got {years!r}", "years")
    if years <= 0:
        raise InvalidParameter(f"years must be greater than zero, got {years}", "years")

    points = [
        YearPoint(
            label=f"Year {i}",
            invested=result.total_invested * i / years,
            value=result.total_value * i / years,
        )
        for i in range(years)
    ]
    # pin the end point so it matches the totals exactly
    points.append(
        YearPoint(
            label=f"Year {years}",
            invested=result.total_invested,
            value=result.total_value,
        )
    )
    logger.debug("generated %d-point series for %s", len(points), result.mode)
    return YearlySeries(points=points)
