"""One calculation request end to end: projection, series, display, chart."""

import logging

from sipcalc import config
from sipcalc.core.projection import calculate
from sipcalc.core.series import generate_series, series_years
from sipcalc.presentation.chart import build_chart_payload
from sipcalc.presentation.formatting import format_result
from sipcalc.schemas.calculation import CalculationRequest, CalculationResponse

logger = logging.getLogger(__name__)


def run_calculation(
    request: CalculationRequest, symbol: str = config.CURRENCY_SYMBOL
) -> CalculationResponse:
    """Compute everything one panel shows; any failure aborts the whole response."""
    params = request.params
    result = calculate(params)
    series = generate_series(result, series_years(params.years))
    logger.info(
        "%s projection over %s years: invested %.2f, value %.2f",
        params.mode,
        params.years,
        result.total_invested,
        result.total_value,
    )
    return CalculationResponse(
        result=result,
        display=format_result(result, symbol),
        series=series.points,
        chart=build_chart_payload(series, symbol),
    )
