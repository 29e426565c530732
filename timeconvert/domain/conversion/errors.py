"""
Error codes and domain errors for the conversion bounded context.

Every validation failure is identified by exactly one stable
six-digit code. Codes are independent of language; messages are
resolved later through the ErrorCatalog.
No framework imports allowed.
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Stable identifiers for every conversion failure."""

    TYPE_MISSING = "212000"
    FORMAT_MISSING = "212001"
    VALUE_MISSING = "212002"

    INVALID_TYPE = "212010"
    INVALID_FORMAT = "212011"
    INVALID_LANGUAGE = "212012"
    INVALID_ERROR_LANGUAGE = "212013"

    TIMESTAMP_NOT_NUMERIC = "212020"
    TIMESTAMP_TOO_LOW = "212021"
    TIMESTAMP_TOO_HIGH = "212022"

    DATE_MALFORMED = "212030"
    DATE_YEAR_OUT_OF_RANGE = "212031"
    DATE_MONTH_OUT_OF_RANGE = "212032"
    DATE_DAY_OUT_OF_RANGE = "212033"
    DATE_HOUR_OUT_OF_RANGE = "212034"
    DATE_MINUTE_OUT_OF_RANGE = "212035"
    DATE_SECOND_OUT_OF_RANGE = "212036"

    OFFSET_MALFORMED = "212040"
    OFFSET_OUT_OF_RANGE = "212041"

    INTERNAL_ERROR = "212090"


class ConversionDomainError(Exception):
    """Base error for all conversion domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ConversionError(ConversionDomainError):
    """Raised at the validation site that detects a bad input.

    Carries the error code only. The raw input never appears
    in the message.
    """

    def __init__(self, code: ErrorCode) -> None:
        super().__init__(f"Conversion rejected with code {code.value}")
        self.code = code


class CatalogLoadError(ConversionDomainError):
    """Raised when an error or locale catalog cannot be loaded."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Could not load catalog {source}: {reason}")
        self.source = source
        self.reason = reason
