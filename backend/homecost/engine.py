"""Core estimation engine for the homecost library.

The CostEngine implements a two-factor bracket estimation methodology:

1. **Bracket lookup** — Find the year-built and floor-area brackets for the
   home. Either lookup failing means no estimate is available.
2. **Size normalization** — Divide the floor-area bracket cost by the
   reference average cost to get a size factor around 1.0.
3. **Point estimate** — Year-built cost × size factor × regional scalar.
4. **Error propagation** — Convert each bracket's RSE to a coefficient of
   variation and combine them by root-sum-of-squares, treating the two
   sources as independent.
5. **Confidence interval** — Point estimate ± 1.96 standard errors (95%,
   normal approximation). Monthly figures are the annual ones over 12.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from homecost.data.reference import (
    DEFAULT_REGIONAL_SCALAR,
    MONTHS_PER_YEAR,
    REFERENCE_AVERAGE_COST,
    Z_SCORE_95,
)
from homecost.exceptions import UnresolvableInputError
from homecost.models.estimate import EstimateResult

if TYPE_CHECKING:
    from homecost.data.repository import CostDataRepository

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"
COST_DATA_VERSION = "RECS-2020"


def combined_cv(*cvs: float) -> float:
    """Root-sum-of-squares of independent coefficients of variation."""
    return math.sqrt(sum(cv**2 for cv in cvs))


class CostEngine:
    """Converts a home's construction year and floor area into a cost estimate.

    Args:
        repository: The cost data repository providing bracket lookups.
        reference_average_cost: Divisor that turns the floor-area bracket
            cost into a size factor.

    Example::

        from homecost.data import (
            FLOOR_AREA_BRACKETS,
            YEAR_BUILT_BRACKETS,
            CostDataRepository,
        )

        repo = CostDataRepository(YEAR_BUILT_BRACKETS, FLOOR_AREA_BRACKETS)
        engine = CostEngine(repo)
        result = engine.estimate(1975, 1750)
    """

    def __init__(
        self,
        repository: CostDataRepository,
        reference_average_cost: float = REFERENCE_AVERAGE_COST,
    ) -> None:
        self._repository = repository
        self._reference_average_cost = reference_average_cost

    def estimate(
        self,
        year: object,
        floor_area: object,
        regional_scalar: float = DEFAULT_REGIONAL_SCALAR,
    ) -> EstimateResult | None:
        """Estimate annual and monthly electricity cost with a 95% CI.

        Args:
            year: Construction year. Non-numeric values resolve to no bracket.
            floor_area: Floor area in square feet.
            regional_scalar: Multiplier applied to the national baseline.
                Not validated here; callers replace bad values with the
                default before calling.

        Returns:
            The estimate, or None if either input matches no bracket.
        """
        year_bracket = self._repository.get_year_bracket(year)
        area_bracket = self._repository.get_area_bracket(floor_area)
        if year_bracket is None or area_bracket is None:
            logger.info(
                "No estimate available for year=%r floor_area=%r", year, floor_area
            )
            return None

        # 1. Base model
        sqft_factor = area_bracket.cost / self._reference_average_cost
        annual = year_bracket.cost * sqft_factor * regional_scalar

        # 2. Standard error propagation
        cv = combined_cv(year_bracket.cv, area_bracket.cv)
        annual_se = annual * cv

        # 3. 95% confidence interval
        lo = annual - Z_SCORE_95 * annual_se
        hi = annual + Z_SCORE_95 * annual_se

        logger.debug(
            "Estimate for %s/%s: sqft_factor=%.4f combined_cv=%.4f annual=%.2f",
            year_bracket.label,
            area_bracket.label,
            sqft_factor,
            cv,
            annual,
        )

        return EstimateResult(
            annual=annual,
            monthly=annual / MONTHS_PER_YEAR,
            lo=lo,
            hi=hi,
            lo_month=lo / MONTHS_PER_YEAR,
            hi_month=hi / MONTHS_PER_YEAR,
            year_bracket=year_bracket.label,
            area_bracket=area_bracket.label,
            regional_scalar=regional_scalar,
            combined_cv=cv,
            standard_error=annual_se,
        )

    def estimate_or_raise(
        self,
        year: object,
        floor_area: object,
        regional_scalar: float = DEFAULT_REGIONAL_SCALAR,
    ) -> EstimateResult:
        """Like :meth:`estimate`, but raise instead of returning None.

        Raises:
            UnresolvableInputError: If either input matches no bracket.
        """
        result = self.estimate(year, floor_area, regional_scalar)
        if result is None:
            msg = f"No cost bracket for year={year!r} and floor_area={floor_area!r}"
            raise UnresolvableInputError(msg, year=year, floor_area=floor_area)
        return result
