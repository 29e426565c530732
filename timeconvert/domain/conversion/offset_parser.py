"""
UTC offset parsing.

Accepts ``+HHMM``, ``-HHMM``, ``+HH:MM`` and ``-HH:MM``. The sign is
mandatory. Pure functions, no side effects.
"""

import re

from timeconvert.domain.conversion.entities import Offset
from timeconvert.domain.conversion.errors import ConversionError, ErrorCode

OFFSET_PATTERN = re.compile(r"([+-])(\d{2}):?(\d{2})", re.ASCII)

MAX_OFFSET_HOURS = 14
MAX_OFFSET_MINUTES = 59


def parse_offset(raw: str) -> Offset:
    """Parse a signed UTC offset string into an Offset.

    Args:
        raw: The offset as supplied by the caller, e.g. ``"-03:30"``.

    Returns:
        The offset in signed minutes.

    Raises:
        ConversionError: OFFSET_MALFORMED if the pattern does not match,
            OFFSET_OUT_OF_RANGE if the offset is beyond ±14:00.
    """
    match = OFFSET_PATTERN.fullmatch(raw)
    if match is None:
        raise ConversionError(ErrorCode.OFFSET_MALFORMED)

    sign, hours_text, minutes_text = match.groups()
    hours = int(hours_text)
    minutes = int(minutes_text)

    if hours > MAX_OFFSET_HOURS or minutes > MAX_OFFSET_MINUTES:
        raise ConversionError(ErrorCode.OFFSET_OUT_OF_RANGE)
    if hours == MAX_OFFSET_HOURS and minutes != 0:
        raise ConversionError(ErrorCode.OFFSET_OUT_OF_RANGE)

    total = hours * 60 + minutes
    return Offset(-total if sign == "-" else total)
