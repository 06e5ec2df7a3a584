"""Range lookup over ordered bracket tables."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from homecost.models.bracket import Bracket


def is_real_number(value: object) -> bool:
    """True for ints and floats that are not NaN. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def match_bracket(value: object, brackets: Iterable[Bracket]) -> Bracket | None:
    """Return the first bracket whose inclusive range contains ``value``.

    Returns None when ``value`` is not a real number or no bracket covers
    it. Brackets are scanned in order, so with overlapping data the
    earliest entry wins.
    """
    if not is_real_number(value):
        return None
    for bracket in brackets:
        if bracket.contains(value):  # type: ignore[arg-type]
            return bracket
    return None
