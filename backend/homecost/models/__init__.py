"""Domain models for the homecost estimator."""

from homecost.models.bracket import Bracket
from homecost.models.enums import BracketDimension, Month
from homecost.models.estimate import ChartConfig, CostRange, EstimateResult

__all__ = [
    "Bracket",
    "BracketDimension",
    "ChartConfig",
    "CostRange",
    "EstimateResult",
    "Month",
]
