"""Lenient parsing of raw form input into estimator arguments.

Form fields arrive as strings. Parsing reads the leading number and ignores
trailing text, so '1975 (approx)' still gives 1975. Anything without a
leading number parses to None, which the estimator treats as unresolvable.
"""

from __future__ import annotations

import logging
import math
import re

from homecost.data.reference import DEFAULT_REGIONAL_SCALAR, MAX_REGIONAL_SCALAR

logger = logging.getLogger(__name__)

_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_int(raw: object) -> int | None:
    """Parse the leading base-10 integer from ``raw``.

    Finite floats are truncated toward zero.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else None
    match = _INT_PREFIX.match(str(raw))
    if match is None:
        return None
    return int(match.group(1))


def parse_float(raw: object) -> float | None:
    """Parse the leading decimal number from ``raw``. NaN parses to None."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
        return None if math.isnan(value) else value
    match = _FLOAT_PREFIX.match(str(raw))
    if match is None:
        return None
    return float(match.group(1))


def resolve_regional_scalar(
    raw: object,
    default: float = DEFAULT_REGIONAL_SCALAR,
) -> float:
    """Return the parsed scalar, or ``default`` if it is missing or out of range.

    Accepted scalars are finite, positive and at most ``MAX_REGIONAL_SCALAR``.
    """
    scalar = parse_float(raw)
    if scalar is None or not 0 < scalar <= MAX_REGIONAL_SCALAR:
        if raw not in (None, ""):
            logger.warning(
                "Regional scalar %r is not a usable positive number; using %s",
                raw,
                default,
            )
        return default
    return scalar
