"""Annual electricity cost by heated floor area in square feet."""

from __future__ import annotations

from homecost.models.bracket import Bracket

FLOOR_AREA_BRACKETS: tuple[Bracket, ...] = (
    Bracket(label="<1000", min=None, max=999, cost=1248, rse=1.58),
    Bracket(label="1000-1499", min=1000, max=1499, cost=1567, rse=1.19),
    Bracket(label="1500-1999", min=1500, max=1999, cost=1908, rse=1.06),
    Bracket(label="2000-2499", min=2000, max=2499, cost=2087, rse=1.31),
    Bracket(label="2500-2999", min=2500, max=2999, cost=2340, rse=1.53),
    Bracket(label="3000+", min=3000, max=None, cost=2772, rse=1.33),
)
