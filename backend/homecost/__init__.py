"""homecost residential electricity cost estimator.

Usage::

    from homecost import create_default_engine, build_seasonal_series

    engine = create_default_engine()
    result = engine.estimate(1975, 1750)
    if result is not None:
        series = build_seasonal_series(result.monthly)
"""

from homecost.chart import ChartRenderer, ChartSession
from homecost.engine import CostEngine, combined_cv
from homecost.exceptions import HomeCostError, UnresolvableInputError
from homecost.factory import create_default_engine
from homecost.matching import match_bracket
from homecost.models.bracket import Bracket
from homecost.models.enums import BracketDimension, Month
from homecost.models.estimate import ChartConfig, CostRange, EstimateResult
from homecost.seasonal import build_chart_config, build_seasonal_series

__all__ = [
    "Bracket",
    "BracketDimension",
    "ChartConfig",
    "ChartRenderer",
    "ChartSession",
    "CostEngine",
    "CostRange",
    "EstimateResult",
    "HomeCostError",
    "Month",
    "UnresolvableInputError",
    "build_chart_config",
    "build_seasonal_series",
    "combined_cv",
    "create_default_engine",
    "match_bracket",
]
