"""Chart data handed to the rendering collaborator, and ownership of the live chart."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Union

from pydantic import BaseModel

from sipcalc import config
from sipcalc.core.series import YearlySeries

logger = logging.getLogger(__name__)

CHART_TITLE = "Investment Growth Over Time"


class ChartDataset(BaseModel):
    label: str
    data: List[float]
    border_color: str
    background_color: str
    fill: bool = True


class ChartPayload(BaseModel):
    """Dual-line area chart: cumulative investment against projected value."""

    type: str = "line"
    title: str = CHART_TITLE
    labels: List[str]
    datasets: List[ChartDataset]
    currency_symbol: str = config.CURRENCY_SYMBOL
    begin_at_zero: bool = True


def build_chart_payload(series: YearlySeries, symbol: str = config.CURRENCY_SYMBOL) -> ChartPayload:
    return ChartPayload(
        labels=series.labels,
        datasets=[
            ChartDataset(
                label="Investment",
                data=series.invested,
                border_color="#2c3e50",
                background_color="rgba(44, 62, 80, 0.1)",
            ),
            ChartDataset(
                label="Returns",
                data=series.values,
                border_color="#3498db",
                background_color="rgba(52, 152, 219, 0.1)",
            ),
        ],
        currency_symbol=symbol,
    )


class ChartHandle(Protocol):
    def destroy(self) -> None:
        ...


ChartFactory = Callable[[ChartPayload], ChartHandle]


class ChartSlot:
    """
    Owns at most one live chart.

    The caller creates the slot with a factory for its rendering backend and
    keeps it for as long as the chart area exists. ``replace`` always
    destroys the previous chart before building the next one, so a
    recalculation never leaks a chart instance.
    """

    def __init__(self, factory: ChartFactory, symbol: str = config.CURRENCY_SYMBOL):
        self._factory = factory
        self.symbol = symbol
        self._current: Optional[ChartHandle] = None

    @property
    def current(self) -> Optional[ChartHandle]:
        return self._current

    def replace(self, data: Union[YearlySeries, ChartPayload]) -> ChartHandle:
        payload = data if isinstance(data, ChartPayload) else build_chart_payload(data, self.symbol)
        self.destroy()
        self._current = self._factory(payload)
        logger.debug("chart rebuilt with %d points", len(payload.labels))
        return self._current

    def destroy(self) -> None:
        if self._current is None:
            return
        handle, self._current = self._current, None
        handle.destroy()

    def __enter__(self) -> "ChartSlot":
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()
