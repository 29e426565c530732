"""
Input value parsing.

Turns either a Unix epoch numeral or a ``YYYY/MM/DD@HH:MM:SS`` calendar
string into an Instant. Calendar strings are read as UTC; the caller's
offset is applied later, at formatting time.
"""

import re

from timeconvert.domain.conversion.civil_time import days_in_month, to_epoch_seconds
from timeconvert.domain.conversion.entities import ConversionType, Instant
from timeconvert.domain.conversion.errors import ConversionError, ErrorCode

UNIX_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
TIME_PATTERN = re.compile(r"(\d{4})/(\d{2})/(\d{2})@(\d{2}):(\d{2}):(\d{2})", re.ASCII)

# 0001-01-01T00:00:00Z, the earliest proleptic Gregorian instant accepted.
MIN_INSTANT = -62_135_596_800
MAX_SAFE_INTEGER = 9_007_199_254_740_991
MAX_DIGITS = len(str(MAX_SAFE_INTEGER))

MIN_YEAR = 1
MAX_YEAR = 9999


def parse_input(kind: ConversionType, raw: str) -> Instant:
    """Parse a raw input value of the given kind.

    Raises:
        ConversionError: with the code of the first violated rule.
    """
    if kind is ConversionType.UNIX:
        return parse_unix(raw)
    if kind is ConversionType.TIME:
        return parse_time(raw)
    raise ValueError(f"Unhandled conversion type: {kind!r}")


def parse_unix(raw: str) -> Instant:
    """Parse a signed base-10 epoch-seconds value."""
    text = raw.strip()
    if not UNIX_PATTERN.fullmatch(text):
        raise ConversionError(ErrorCode.TIMESTAMP_NOT_NUMERIC)

    # int() refuses very long digit strings; those are out of range anyway.
    if len(text.lstrip("+-").lstrip("0")) > MAX_DIGITS:
        negative = text.startswith("-")
        raise ConversionError(
            ErrorCode.TIMESTAMP_TOO_LOW if negative else ErrorCode.TIMESTAMP_TOO_HIGH
        )

    seconds = int(text)
    if seconds < MIN_INSTANT:
        raise ConversionError(ErrorCode.TIMESTAMP_TOO_LOW)
    if seconds > MAX_SAFE_INTEGER:
        raise ConversionError(ErrorCode.TIMESTAMP_TOO_HIGH)
    return Instant(seconds)


def parse_time(raw: str) -> Instant:
    """Parse a ``YYYY/MM/DD@HH:MM:SS`` string as a UTC instant.

    Components are checked year, month, day, hour, minute, second;
    the first one out of range determines the error code.
    """
    match = TIME_PATTERN.fullmatch(raw.strip())
    if match is None:
        raise ConversionError(ErrorCode.DATE_MALFORMED)

    year, month, day, hour, minute, second = (int(part) for part in match.groups())

    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ConversionError(ErrorCode.DATE_YEAR_OUT_OF_RANGE)
    if not 1 <= month <= 12:
        raise ConversionError(ErrorCode.DATE_MONTH_OUT_OF_RANGE)
    if not 1 <= day <= days_in_month(year, month):
        raise ConversionError(ErrorCode.DATE_DAY_OUT_OF_RANGE)
    if not 0 <= hour <= 23:
        raise ConversionError(ErrorCode.DATE_HOUR_OUT_OF_RANGE)
    if not 0 <= minute <= 59:
        raise ConversionError(ErrorCode.DATE_MINUTE_OUT_OF_RANGE)
    if not 0 <= second <= 59:
        raise ConversionError(ErrorCode.DATE_SECOND_OUT_OF_RANGE)

    return Instant(to_epoch_seconds(year, month, day, hour, minute, second))
