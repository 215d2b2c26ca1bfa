"""
Numeric predicates shared by the decoder and the statistics aggregator.
"""

import math
from typing import Any, Optional

# ARGO files store "no measurement" as 99999 (or larger)
FILL_VALUE_THRESHOLD = 99999.0


def as_float(value: Any) -> Optional[float]:
    """Coerce a raw value to float, returning None when it is absent or not numeric"""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def is_fill_value(value: Any) -> bool:
    """True when the value is absent, non-finite or at/above the fill threshold"""
    number = as_float(value)
    if number is None or not math.isfinite(number):
        return True
    return number >= FILL_VALUE_THRESHOLD


def valid_reading(value: Any) -> Optional[float]:
    """Return the value as a float if it is a real measurement, else None"""
    if is_fill_value(value):
        return None
    return float(value)


def within_band(value: Optional[float], lower: float, upper: float) -> bool:
    """Strict open-interval check; None and non-finite values never qualify"""
    if value is None or not math.isfinite(value):
        return False
    return lower < value < upper
