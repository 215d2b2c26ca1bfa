"""
Catalog Statistics

Summary counts and sensor ranges over a FloatCatalog. Readings outside a
physically plausible band are ignored so that fill values that slip through
decoding never reach a report.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from .numerics import within_band
from ..catalog.models import FloatCatalog, Scalar, SensorValue, Series

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TEMPERATURE_BAND = (-5.0, 100.0)
SALINITY_BAND = (20.0, 50.0)


@dataclass(frozen=True)
class ValueRange:
    min: float
    max: float

    def to_dict(self) -> Dict[str, float]:
        return {'min': self.min, 'max': self.max}


DEFAULT_TEMPERATURE_RANGE = ValueRange(2.0, 29.0)
DEFAULT_SALINITY_RANGE = ValueRange(34.5, 35.5)


@dataclass(frozen=True)
class CatalogSummary:
    """Counts and plausible-value ranges for one catalog snapshot"""
    active_count: int
    total_count: int
    temperature_range: ValueRange
    salinity_range: ValueRange
    data_loaded: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            'active_count': self.active_count,
            'total_count': self.total_count,
            'temperature_range': self.temperature_range.to_dict(),
            'salinity_range': self.salinity_range.to_dict(),
            'data_loaded': self.data_loaded
        }


class _RangeAccumulator:
    def __init__(self, lower: float, upper: float):
        self.lower = lower
        self.upper = upper
        self.min: Optional[float] = None
        self.max: Optional[float] = None

    def add(self, value: SensorValue):
        if isinstance(value, Series):
            extrema = value.extrema()
            if extrema is None:
                return
            low, high = extrema
        elif isinstance(value, Scalar):
            low = high = value.value
        else:
            raise TypeError(f"Unsupported sensor value: {value!r}")

        # Each extremum is judged on its own
        if within_band(low, self.lower, self.upper):
            self.min = low if self.min is None else min(self.min, low)
        if within_band(high, self.lower, self.upper):
            self.max = high if self.max is None else max(self.max, high)

    def result(self, default: ValueRange) -> ValueRange:
        if self.min is None or self.max is None:
            return default
        return ValueRange(self.min, self.max)


def _range_of(values: Iterable[SensorValue], band, default: ValueRange) -> ValueRange:
    accumulator = _RangeAccumulator(*band)
    for value in values:
        accumulator.add(value)
    return accumulator.result(default)


def summarize(catalog: FloatCatalog) -> CatalogSummary:
    """Compute counts and temperature/salinity ranges for a catalog"""
    entries = catalog.entries
    summary = CatalogSummary(
        active_count=sum(1 for entry in entries if entry.is_active),
        total_count=len(entries),
        temperature_range=_range_of(
            (entry.temperature for entry in entries), TEMPERATURE_BAND, DEFAULT_TEMPERATURE_RANGE
        ),
        salinity_range=_range_of(
            (entry.salinity for entry in entries), SALINITY_BAND, DEFAULT_SALINITY_RANGE
        ),
        data_loaded=catalog.data_loaded
    )
    logger.debug(f"Catalog summary: {summary.to_dict()}")
    return summary


def format_summary(summary: CatalogSummary, catalog: FloatCatalog) -> str:
    """Plain-text report of a catalog summary"""
    if summary.data_loaded:
        provenance = f"Real NetCDF data from {len(catalog.source_float_ids)} ARGO floats"
    else:
        provenance = "Synthetic float population (no NetCDF data loaded)"

    temp = summary.temperature_range
    sal = summary.salinity_range
    lines = [
        f"ARGO float catalog (version {catalog.version})",
        f"  Source: {provenance}",
        f"  Floats: {summary.active_count} active of {summary.total_count} profiles",
        f"  Temperature: {temp.min:.1f}°C to {temp.max:.1f}°C",
        f"  Salinity: {sal.min:.2f} to {sal.max:.2f} PSU",
    ]
    return "\n".join(lines)
