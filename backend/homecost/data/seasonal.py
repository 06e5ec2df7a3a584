"""Seasonal monthly multipliers (Texas-like cooling-dominated shape).

Weights are normalized so their mean is 1.0; a monthly base estimate
multiplied by each weight keeps the same annual total.
"""

from __future__ import annotations

from homecost.models.enums import Month

SEASONAL_WEIGHTS: tuple[float, ...] = (
    0.829,  # Jan
    0.780,  # Feb
    0.878,  # Mar
    0.976,  # Apr
    1.073,  # May
    1.171,  # Jun
    1.268,  # Jul
    1.268,  # Aug
    1.122,  # Sep
    0.927,  # Oct
    0.878,  # Nov
    0.829,  # Dec
)

MONTH_LABELS: tuple[str, ...] = tuple(m.value for m in Month)
