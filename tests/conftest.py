"""
Shared fixtures for the test suite.

Catalogs are loaded from the packaged JSON resources, exactly as
the application does at startup.
"""

import pytest

from timeconvert.application.conversion.convert_time import ConvertTimeUseCase
from timeconvert.domain.conversion.catalogs import ErrorCatalog, LocaleCatalog
from timeconvert.infrastructure.catalogs.json_catalog_loader import JsonCatalogRepository

DOCUMENTATION_URL = "https://docs.example.test/errors"


@pytest.fixture(scope="session")
def documentation_url() -> str:
    return DOCUMENTATION_URL


@pytest.fixture(scope="session")
def repository(documentation_url: str) -> JsonCatalogRepository:
    return JsonCatalogRepository(documentation_url=documentation_url)


@pytest.fixture(scope="session")
def error_catalog(repository: JsonCatalogRepository) -> ErrorCatalog:
    return repository.load_error_catalog()


@pytest.fixture(scope="session")
def locale_catalog(repository: JsonCatalogRepository) -> LocaleCatalog:
    return repository.load_locale_catalog()


@pytest.fixture
def use_case(error_catalog: ErrorCatalog, locale_catalog: LocaleCatalog) -> ConvertTimeUseCase:
    return ConvertTimeUseCase(error_catalog, locale_catalog)
