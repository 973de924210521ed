"""Rounding, clamping and coercion helpers shared by the engine."""

from __future__ import annotations

import math
from typing import Any, Optional


def round_half_up(value: float, decimals: int = 2) -> float:
    """Round with halves going up, as the browser calculator does.

    ``round()`` uses banker's rounding, which drifts from the published
    figures on exact halves. Non-finite values are returned untouched so
    infinite payback / ROI sentinels survive.
    """
    if not math.isfinite(value):
        return value
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor


def round_int(value: float) -> float:
    """Half-up round to a whole number; non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def coerce_number(value: Any) -> Optional[float]:
    """Coerce raw form input to a finite float, or None when unusable."""
    if value is None:
        return None
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def non_negative(value: Any) -> float:
    """Coerce a money amount, treating anything unusable as zero."""
    number = coerce_number(value)
    return max(number, 0.0) if number is not None else 0.0
