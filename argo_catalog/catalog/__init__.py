"""
Catalog package for the ARGO float catalog

This package provides the unified float schema and the holder of the
session's current catalog snapshot.
"""

from .models import (
    Scalar,
    Series,
    SensorValue,
    sensor_value,
    FloatStatus,
    FloatType,
    FloatEntry,
    FloatCatalog
)

from .store import (
    CatalogStore,
    get_catalog_store,
    reset_catalog_store
)

__all__ = [
    'Scalar',
    'Series',
    'SensorValue',
    'sensor_value',
    'FloatStatus',
    'FloatType',
    'FloatEntry',
    'FloatCatalog',
    'CatalogStore',
    'get_catalog_store',
    'reset_catalog_store'
]
