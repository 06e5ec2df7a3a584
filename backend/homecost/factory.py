"""Factory functions for creating pre-configured CostEngine instances."""

from __future__ import annotations

from homecost.data.floor_area import FLOOR_AREA_BRACKETS
from homecost.data.repository import CostDataRepository
from homecost.data.year_built import YEAR_BUILT_BRACKETS
from homecost.engine import CostEngine


def create_default_engine() -> CostEngine:
    """Create a CostEngine wired up with the built-in bracket tables.

    Returns:
        A CostEngine ready to produce estimates.

    Example::

        from homecost import create_default_engine

        engine = create_default_engine()
        result = engine.estimate(1975, 1750)
    """
    repository = CostDataRepository(YEAR_BUILT_BRACKETS, FLOOR_AREA_BRACKETS)
    return CostEngine(repository)
