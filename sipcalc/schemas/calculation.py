"""Data contracts for the calculate endpoint."""

from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from sipcalc.core.projection import ProjectionResult, SIPParameters
from sipcalc.core.series import YearPoint
from sipcalc.presentation.chart import ChartPayload


class CalculationRequest(BaseModel):
    """Parameters of one calculator panel, tagged by ``mode``."""

    model_config = ConfigDict(extra="forbid")

    params: SIPParameters


class CalculationResponse(BaseModel):
    """Projection, its display strings and the chart data derived from it."""

    result: ProjectionResult
    display: Dict[str, str] = Field(..., description="Formatted values keyed by result field.")
    series: List[YearPoint]
    chart: ChartPayload
