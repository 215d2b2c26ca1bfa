"""
ARGO time conversion

JULD values in ARGO profile files count days (with fractions) since
1950-01-01T00:00:00Z.
"""

import math
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from .numerics import FILL_VALUE_THRESHOLD, as_float

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

ARGO_EPOCH = datetime(1950, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_calendar(value: Optional[Any]) -> datetime:
    """
    Convert a JULD day offset to a UTC datetime.

    Unknown times (absent, non-finite or fill-valued) map to the current time.
    """
    days = as_float(value)
    if days is None or not math.isfinite(days) or days > FILL_VALUE_THRESHOLD:
        return utc_now()

    try:
        return ARGO_EPOCH + timedelta(days=days)
    except OverflowError:
        logger.warning(f"JULD value out of calendar range: {days}")
        return utc_now()
