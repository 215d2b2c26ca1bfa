"""
Exceptions raised by the ARGO float catalog.
"""


class ArgoCatalogError(Exception):
    """Base exception for catalog operations"""
    pass


class SourceUnavailableError(ArgoCatalogError):
    """A source file could not be retrieved (missing file, HTTP error, transport failure)"""

    def __init__(self, locator: str, reason: str):
        self.locator = locator
        self.reason = reason
        super().__init__(f"Source unavailable: {locator} ({reason})")


class CatalogNotInitializedError(ArgoCatalogError):
    """The catalog store was read before an initial catalog was set"""
    pass
