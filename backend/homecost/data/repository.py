"""Cost data repository for looking up bracket data."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from homecost.matching import match_bracket
from homecost.models.enums import BracketDimension

if TYPE_CHECKING:
    from collections.abc import Sequence

    from homecost.models.bracket import Bracket

logger = logging.getLogger(__name__)


class CostDataRepository:
    """Repository for looking up cost brackets.

    Wraps the in-memory year-built and floor-area tables. The tables are
    copied into tuples so the repository can be shared between callers.
    """

    def __init__(
        self,
        year_brackets: Sequence[Bracket],
        area_brackets: Sequence[Bracket],
    ) -> None:
        self._tables: dict[BracketDimension, tuple[Bracket, ...]] = {
            BracketDimension.YEAR_BUILT: tuple(year_brackets),
            BracketDimension.FLOOR_AREA: tuple(area_brackets),
        }

    def brackets(self, dimension: BracketDimension) -> tuple[Bracket, ...]:
        return self._tables[dimension]

    def lookup(self, dimension: BracketDimension, value: object) -> Bracket | None:
        """Find the bracket for ``value`` in the given table.

        Returns None if the value is not numeric or falls in a gap.
        """
        bracket = match_bracket(value, self._tables[dimension])
        if bracket is None:
            logger.debug("No %s bracket for value %r", dimension, value)
        else:
            logger.debug("Matched %s=%r to bracket '%s'", dimension, value, bracket.label)
        return bracket

    def get_year_bracket(self, year: object) -> Bracket | None:
        return self.lookup(BracketDimension.YEAR_BUILT, year)

    def get_area_bracket(self, floor_area: object) -> Bracket | None:
        return self.lookup(BracketDimension.FLOOR_AREA, floor_area)
