"""Reference constants for normalizing and regionalizing cost estimates.

Costs are annual household electricity expenditure from the EIA
Residential Energy Consumption Survey (RECS).
"""

from __future__ import annotations

# Average annual electricity cost across all floor-area brackets.
# Floor-area costs are divided by this to get a size factor around 1.0.
REFERENCE_AVERAGE_COST: float = 1839.0

# Approximate Texas scalar relative to the South census region average.
DEFAULT_REGIONAL_SCALAR: float = 1.30

# Largest accepted regional scalar. Larger values overflow the interval math.
MAX_REGIONAL_SCALAR: float = 1e6

# Two-sided 95% normal-approximation z-score.
Z_SCORE_95: float = 1.96

MONTHS_PER_YEAR: int = 12
