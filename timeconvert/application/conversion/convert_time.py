"""
Use case: Convert a calendar date or Unix timestamp.

Input: ConvertTimeCommand (type, format, value, offset, language, error_language)
Output: ConversionSuccess | ConversionFailure
Side effects: None.
Failure cases: every ErrorCode; unexpected faults become INTERNAL_ERROR.
"""

import logging
from typing import Optional

from timeconvert.application.conversion.dtos import (
    DEFAULT_OFFSET,
    ConversionFailure,
    ConversionResult,
    ConversionSuccess,
    ConvertTimeCommand,
)
from timeconvert.domain.conversion.catalogs import ErrorCatalog, LocaleCatalog
from timeconvert.domain.conversion.entities import (
    AllFormatsRecord,
    ConversionType,
    FormattedValue,
    Instant,
    Language,
    LocalePattern,
    Offset,
    OutputFormat,
)
from timeconvert.domain.conversion.errors import ConversionError, ErrorCode
from timeconvert.domain.conversion.formatter import format_instant
from timeconvert.domain.conversion.input_parser import parse_input
from timeconvert.domain.conversion.offset_parser import parse_offset

logger = logging.getLogger(__name__)


def _is_blank(raw: Optional[str]) -> bool:
    return raw is None or not raw.strip()


class ConvertTimeUseCase:
    """Orchestrates a single conversion request.

    Checks run in a fixed order and the first failure wins:
    missing fields (value, type, format), unrecognized values
    (type, format, language, error language), the input value,
    then the offset. Failures are localized through the
    ErrorCatalog before being returned.
    """

    def __init__(self, error_catalog: ErrorCatalog, locale_catalog: LocaleCatalog) -> None:
        self._error_catalog = error_catalog
        self._locale_catalog = locale_catalog

    def execute(self, command: ConvertTimeCommand) -> ConversionResult:
        """Run the conversion use case.

        Args:
            command: The raw request fields.

        Returns:
            ConversionSuccess with the formatted value, or
            ConversionFailure carrying exactly one error code.
        """
        error_language = Language.from_wire(command.error_language) or Language.default()
        try:
            value = self._convert(command)
        except ConversionError as exc:
            logger.info("Conversion rejected: code=%s", exc.code.value)
            return self._failure(exc.code, error_language)
        except Exception:
            logger.exception("Unexpected error during conversion")
            return self._failure(ErrorCode.INTERNAL_ERROR, error_language)
        return ConversionSuccess(value=value)

    def _convert(self, command: ConvertTimeCommand) -> FormattedValue:
        if _is_blank(command.value):
            raise ConversionError(ErrorCode.VALUE_MISSING)
        if _is_blank(command.type):
            raise ConversionError(ErrorCode.TYPE_MISSING)
        if _is_blank(command.format):
            raise ConversionError(ErrorCode.FORMAT_MISSING)

        kind = ConversionType.from_wire(command.type)
        if kind is None:
            raise ConversionError(ErrorCode.INVALID_TYPE)
        target = OutputFormat.from_wire(command.format)
        if target is None:
            raise ConversionError(ErrorCode.INVALID_FORMAT)
        language = self._resolve_language(command.language, ErrorCode.INVALID_LANGUAGE)
        self._resolve_language(command.error_language, ErrorCode.INVALID_ERROR_LANGUAGE)

        logger.info("Converting type=%s format=%s", kind.value, target.value)

        instant = parse_input(kind, command.value)
        raw_offset = DEFAULT_OFFSET if _is_blank(command.offset) else command.offset.strip()
        offset = parse_offset(raw_offset)
        locale = self._locale_catalog.pattern_for(language)

        if target is OutputFormat.ALL:
            return self._format_all(instant, offset, locale)
        return format_instant(instant, offset, target, locale)

    @staticmethod
    def _resolve_language(raw: Optional[str], code: ErrorCode) -> Language:
        if _is_blank(raw):
            return Language.default()
        language = Language.from_wire(raw)
        if language is None:
            raise ConversionError(code)
        return language

    @staticmethod
    def _format_all(
        instant: Instant, offset: Offset, locale: LocalePattern
    ) -> AllFormatsRecord:
        return AllFormatsRecord(
            utc=format_instant(instant, offset, OutputFormat.UTC, locale),
            readable=format_instant(instant, offset, OutputFormat.READABLE, locale),
            iso8601=format_instant(instant, offset, OutputFormat.ISO8601, locale),
            unix=format_instant(instant, offset, OutputFormat.UNIX, locale),
        )

    def _failure(self, code: ErrorCode, language: Language) -> ConversionFailure:
        resolved = self._error_catalog.lookup(code, language)
        return ConversionFailure(
            code=resolved.code,
            message=resolved.message,
            documentation_url=self._error_catalog.documentation_url,
        )
