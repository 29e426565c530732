"""
Tests for the JSON catalog adapter.

Uses temporary files to exercise validation and failure paths.
"""

import json

import pytest

from timeconvert.domain.conversion.catalogs import DEFAULT_LOCALE, ErrorCatalog, LocaleCatalog
from timeconvert.domain.conversion.entities import Language
from timeconvert.domain.conversion.errors import CatalogLoadError, ErrorCode
from timeconvert.infrastructure.catalogs.json_catalog_loader import (
    JsonCatalogRepository,
    load_catalogs,
)

DOCS = "https://docs.example.test/errors"


def _write(path, payload) -> str:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


class TestPackagedCatalogs:
    """The catalogs shipped with the package are complete."""

    def test_every_code_translated(self, error_catalog: ErrorCatalog) -> None:
        """Each language has a message for every error code."""
        for language in Language:
            assert set(error_catalog.messages[language]) == set(ErrorCode)

    def test_every_language_has_a_pattern(self, locale_catalog: LocaleCatalog) -> None:
        """Each language has its own readable pattern and twelve months."""
        for language in Language:
            pattern = locale_catalog.pattern_for(language)
            assert pattern.language is language
            assert len(pattern.months) == 12

    def test_not_degraded(self, error_catalog: ErrorCatalog, locale_catalog: LocaleCatalog) -> None:
        """Successfully loaded catalogs are not flagged degraded."""
        assert not error_catalog.degraded
        assert not locale_catalog.degraded


class TestJsonCatalogRepository:
    """Tests for JsonCatalogRepository."""

    def test_loads_custom_error_catalog(self, tmp_path) -> None:
        """A valid file is loaded and frozen."""
        path = _write(tmp_path / "errors.json", {"en": {"212002": "Value please."}})
        catalog = JsonCatalogRepository(DOCS, error_catalog_path=path).load_error_catalog()
        assert catalog.lookup(ErrorCode.VALUE_MISSING, Language.EN).message == "Value please."
        assert catalog.documentation_url == DOCS

    def test_unknown_code_rejected(self, tmp_path) -> None:
        """Codes outside the taxonomy fail validation."""
        path = _write(tmp_path / "errors.json", {"en": {"999999": "?"}})
        with pytest.raises(CatalogLoadError):
            JsonCatalogRepository(DOCS, error_catalog_path=path).load_error_catalog()

    def test_unknown_language_rejected(self, tmp_path) -> None:
        """Languages outside en/es/pt fail validation."""
        path = _write(tmp_path / "errors.json", {"fr": {"212002": "Valeur ?"}})
        with pytest.raises(CatalogLoadError):
            JsonCatalogRepository(DOCS, error_catalog_path=path).load_error_catalog()

    def test_wrong_month_count_rejected(self, tmp_path) -> None:
        """A locale must list exactly twelve months."""
        path = _write(
            tmp_path / "locales.json",
            {"en": {"dateFormat": "MMMM D", "months": ["January"]}},
        )
        with pytest.raises(CatalogLoadError):
            JsonCatalogRepository(DOCS, locale_catalog_path=path).load_locale_catalog()

    def test_invalid_json_rejected(self, tmp_path) -> None:
        """Unparseable JSON raises CatalogLoadError."""
        path = tmp_path / "errors.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogLoadError) as exc_info:
            JsonCatalogRepository(DOCS, error_catalog_path=path).load_error_catalog()
        assert exc_info.value.source == str(path)

    def test_partial_locale_catalog_falls_back(self, tmp_path) -> None:
        """A language missing from the file uses the default pattern."""
        path = _write(
            tmp_path / "locales.json",
            {"es": {"dateFormat": "D MMMM YYYY", "months": ["m"] * 12}},
        )
        catalog = JsonCatalogRepository(DOCS, locale_catalog_path=path).load_locale_catalog()
        assert catalog.pattern_for(Language.PT) is DEFAULT_LOCALE


class TestLoadCatalogs:
    """Tests for load_catalogs startup behavior."""

    def test_fatal_without_degraded_mode(self, tmp_path) -> None:
        """A load failure propagates when degraded mode is off."""
        repository = JsonCatalogRepository(DOCS, locale_catalog_path=tmp_path / "missing.json")
        with pytest.raises(CatalogLoadError):
            load_catalogs(repository, DOCS, allow_degraded=False)

    def test_degraded_mode_flags_catalog(self, tmp_path) -> None:
        """In degraded mode the failing catalog is empty and flagged."""
        repository = JsonCatalogRepository(DOCS, locale_catalog_path=tmp_path / "missing.json")
        error_catalog, locale_catalog = load_catalogs(repository, DOCS, allow_degraded=True)
        assert not error_catalog.degraded
        assert locale_catalog.degraded
        assert locale_catalog.pattern_for(Language.ES) is DEFAULT_LOCALE
