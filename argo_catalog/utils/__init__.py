"""
Utilities package for the ARGO float catalog

This package provides the numeric, calendar and geography helpers and the
catalog statistics. The assembly pipeline lives in ``data_pipeline`` and is
imported from there directly, since it depends on the ingestion package.
"""

from .numerics import FILL_VALUE_THRESHOLD, is_fill_value, valid_reading, within_band
from .argo_time import ARGO_EPOCH, to_calendar
from .geo import is_ocean, region_name, exclusion_zone
from .catalog_stats import CatalogSummary, ValueRange, summarize, format_summary

__all__ = [
    'FILL_VALUE_THRESHOLD',
    'is_fill_value',
    'valid_reading',
    'within_band',
    'ARGO_EPOCH',
    'to_calendar',
    'is_ocean',
    'region_name',
    'exclusion_zone',
    'CatalogSummary',
    'ValueRange',
    'summarize',
    'format_summary'
]
