"""Annual electricity cost by construction year (RECS, South region)."""

from __future__ import annotations

from homecost.models.bracket import Bracket

YEAR_BUILT_BRACKETS: tuple[Bracket, ...] = (
    Bracket(label="Before 1950", min=None, max=1949, cost=1959, rse=2.52),
    Bracket(label="1950-1959", min=1950, max=1959, cost=1837, rse=2.46),
    Bracket(label="1960-1969", min=1960, max=1969, cost=1844, rse=1.86),
    Bracket(label="1970-1979", min=1970, max=1979, cost=1776, rse=1.86),
    Bracket(label="1980-1989", min=1980, max=1989, cost=1797, rse=1.85),
    Bracket(label="1990-1999", min=1990, max=1999, cost=1917, rse=1.73),
    Bracket(label="2000-2009", min=2000, max=2009, cost=1891, rse=1.55),
    Bracket(label="2010-2015", min=2010, max=2015, cost=1733, rse=3.01),
    Bracket(label="2016-2020+", min=2016, max=None, cost=1670, rse=2.99),
)
