"""Formatting helpers for estimate output.

Figures are shown the way a utility bill shows them: whole dollars with
comma separators (e.g., '$2,395'). Halves round away from zero, so $2.50
displays as '$3'.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from homecost.models.estimate import CostRange

_WHOLE_DOLLAR = Decimal(1)


def format_currency(amount: float) -> str:
    """Format a dollar amount rounded to zero decimal places."""
    rounded = Decimal(amount).quantize(_WHOLE_DOLLAR, rounding=ROUND_HALF_UP)
    if rounded.is_zero():
        return "$0"
    if rounded < 0:
        return f"-${-rounded:,.0f}"
    return f"${rounded:,.0f}"


def format_cost_range(cr: CostRange) -> str:
    """Format a confidence interval as '$LOW – $HIGH'."""
    return f"{format_currency(cr.low)} – {format_currency(cr.high)}"
