"""Seasonal decomposition of a monthly estimate into a 12-month series."""

from __future__ import annotations

from typing import TYPE_CHECKING

from homecost.data.seasonal import MONTH_LABELS, SEASONAL_WEIGHTS
from homecost.models.estimate import ChartConfig

if TYPE_CHECKING:
    from collections.abc import Sequence


def build_seasonal_series(
    base_monthly: float,
    weights: Sequence[float] = SEASONAL_WEIGHTS,
) -> list[float]:
    """Multiply ``base_monthly`` by each month's weight, January first.

    Non-finite input propagates through the multiplication unchanged.
    """
    return [base_monthly * w for w in weights]


def build_chart_config(base_monthly: float) -> ChartConfig:
    """Pair the seasonal series with month labels for a bar chart."""
    return ChartConfig(
        labels=list(MONTH_LABELS),
        values=build_seasonal_series(base_monthly),
    )
