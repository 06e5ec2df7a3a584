"""Cost data layer for the homecost estimator."""

from homecost.data.floor_area import FLOOR_AREA_BRACKETS
from homecost.data.reference import (
    DEFAULT_REGIONAL_SCALAR,
    REFERENCE_AVERAGE_COST,
    Z_SCORE_95,
)
from homecost.data.repository import CostDataRepository
from homecost.data.seasonal import MONTH_LABELS, SEASONAL_WEIGHTS
from homecost.data.year_built import YEAR_BUILT_BRACKETS

__all__ = [
    "DEFAULT_REGIONAL_SCALAR",
    "FLOOR_AREA_BRACKETS",
    "MONTH_LABELS",
    "REFERENCE_AVERAGE_COST",
    "SEASONAL_WEIGHTS",
    "YEAR_BUILT_BRACKETS",
    "Z_SCORE_95",
    "CostDataRepository",
]
