"""
Catalog Store

Holds the session's current FloatCatalog. Readers always get a complete
snapshot; the assembler builds the next catalog in full and swaps the single
reference held here.
"""

import logging
from typing import Optional

from .models import FloatCatalog
from ..exceptions import CatalogNotInitializedError

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class CatalogStore:
    """Owns the current catalog snapshot and its version counter"""

    def __init__(self):
        self._catalog: Optional[FloatCatalog] = None
        self._version = 0

    @property
    def is_initialized(self) -> bool:
        return self._catalog is not None

    def current(self) -> FloatCatalog:
        """Get the current catalog snapshot"""
        if self._catalog is None:
            raise CatalogNotInitializedError("Catalog has not been initialized")
        return self._catalog

    def initialize(self, catalog: FloatCatalog) -> FloatCatalog:
        """Set the first catalog of the session"""
        if len(catalog) == 0:
            raise ValueError("Initial catalog must contain at least one float")
        self._version = 1
        self._catalog = catalog.with_version(self._version)
        logger.info(f"Catalog initialized with {len(catalog)} floats")
        return self._catalog

    def replace(self, catalog: FloatCatalog) -> FloatCatalog:
        """Swap in a fully built catalog as the next version"""
        if len(catalog) == 0:
            raise ValueError("Replacement catalog must contain at least one float")
        self._version += 1
        self._catalog = catalog.with_version(self._version)
        logger.info(f"Catalog replaced: version {self._version}, {len(catalog)} floats")
        return self._catalog


# Global catalog store instance
catalog_store = None


def get_catalog_store() -> CatalogStore:
    """Get the global catalog store instance"""
    global catalog_store
    if catalog_store is None:
        catalog_store = CatalogStore()
    return catalog_store


def reset_catalog_store() -> CatalogStore:
    """Discard the session catalog and start a fresh store"""
    global catalog_store
    catalog_store = CatalogStore()
    return catalog_store
