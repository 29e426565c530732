"""
Port interfaces (ABCs) for the conversion bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from timeconvert.domain.conversion.catalogs import ErrorCatalog, LocaleCatalog


class CatalogRepository(ABC):
    """Port for loading the read-only string catalogs at startup."""

    @abstractmethod
    def load_error_catalog(self) -> ErrorCatalog:
        """Return the error-message catalog.

        Raises:
            CatalogLoadError: If the catalog cannot be read or is invalid.
        """
        raise NotImplementedError

    @abstractmethod
    def load_locale_catalog(self) -> LocaleCatalog:
        """Return the readable-date locale catalog.

        Raises:
            CatalogLoadError: If the catalog cannot be read or is invalid.
        """
        raise NotImplementedError
