"""
JSON catalog adapter.

Loads the error-message and locale catalogs from JSON files and
validates their shape with Pydantic before freezing them into
domain catalogs. Read and validation failures raise CatalogLoadError;
nothing is silently replaced with an empty catalog here.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationError

from timeconvert.domain.conversion.catalogs import ErrorCatalog, LocaleCatalog
from timeconvert.domain.conversion.entities import Language, LocalePattern
from timeconvert.domain.conversion.errors import CatalogLoadError, ErrorCode
from timeconvert.domain.conversion.ports import CatalogRepository

logger = logging.getLogger(__name__)

RESOURCES_DIR = Path(__file__).resolve().parents[2] / "resources"
DEFAULT_ERROR_CATALOG_PATH = RESOURCES_DIR / "errors.json"
DEFAULT_LOCALE_CATALOG_PATH = RESOURCES_DIR / "locales.json"


class LocaleEntry(BaseModel):
    """One language entry of ``locales.json``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    dateFormat: str = Field(..., min_length=1)
    months: list[str] = Field(..., min_length=12, max_length=12)


class LocaleCatalogFile(RootModel[dict[Language, LocaleEntry]]):
    """Shape of ``locales.json``: ``{language: {dateFormat, months}}``."""


class ErrorCatalogFile(RootModel[dict[Language, dict[ErrorCode, str]]]):
    """Shape of ``errors.json``: ``{language: {code: message}}``."""


class JsonCatalogRepository(CatalogRepository):
    """Adapter that reads catalogs from JSON files on disk.

    Args:
        documentation_url: Embedded in fallback error messages.
        error_catalog_path: Defaults to the packaged ``errors.json``.
        locale_catalog_path: Defaults to the packaged ``locales.json``.
    """

    def __init__(
        self,
        documentation_url: str,
        error_catalog_path: Optional[Union[str, Path]] = None,
        locale_catalog_path: Optional[Union[str, Path]] = None,
    ) -> None:
        self._documentation_url = documentation_url
        self._error_catalog_path = Path(error_catalog_path or DEFAULT_ERROR_CATALOG_PATH)
        self._locale_catalog_path = Path(locale_catalog_path or DEFAULT_LOCALE_CATALOG_PATH)

    def load_error_catalog(self) -> ErrorCatalog:
        """Read and validate ``errors.json``."""
        raw = self._read_json(self._error_catalog_path)
        try:
            parsed = ErrorCatalogFile.model_validate(raw)
        except ValidationError as exc:
            raise CatalogLoadError(str(self._error_catalog_path), str(exc)) from exc

        logger.info(
            "Loaded error catalog from %s (%d languages)",
            self._error_catalog_path,
            len(parsed.root),
        )
        return ErrorCatalog.build(parsed.root, self._documentation_url)

    def load_locale_catalog(self) -> LocaleCatalog:
        """Read and validate ``locales.json``."""
        raw = self._read_json(self._locale_catalog_path)
        try:
            parsed = LocaleCatalogFile.model_validate(raw)
        except ValidationError as exc:
            raise CatalogLoadError(str(self._locale_catalog_path), str(exc)) from exc

        patterns = {
            language: LocalePattern(
                language=language,
                date_format=entry.dateFormat,
                months=tuple(entry.months),
            )
            for language, entry in parsed.root.items()
        }
        logger.info(
            "Loaded locale catalog from %s (%d languages)",
            self._locale_catalog_path,
            len(patterns),
        )
        return LocaleCatalog.build(patterns)

    @staticmethod
    def _read_json(path: Path) -> object:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise CatalogLoadError(str(path), str(exc)) from exc


def load_catalogs(
    repository: CatalogRepository, documentation_url: str, allow_degraded: bool
) -> tuple[ErrorCatalog, LocaleCatalog]:
    """Load both catalogs, failing startup unless degraded mode is allowed.

    In degraded mode an unloadable catalog is replaced by an empty one
    flagged ``degraded=True``; lookups then use their fallbacks.

    Raises:
        CatalogLoadError: If a catalog cannot be loaded and
            ``allow_degraded`` is False.
    """
    try:
        error_catalog = repository.load_error_catalog()
    except CatalogLoadError:
        if not allow_degraded:
            raise
        logger.error("Error catalog unavailable; starting degraded", exc_info=True)
        error_catalog = ErrorCatalog.build({}, documentation_url, degraded=True)

    try:
        locale_catalog = repository.load_locale_catalog()
    except CatalogLoadError:
        if not allow_degraded:
            raise
        logger.error("Locale catalog unavailable; starting degraded", exc_info=True)
        locale_catalog = LocaleCatalog.build({}, degraded=True)

    return error_catalog, locale_catalog
