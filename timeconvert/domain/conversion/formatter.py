"""
Output formatting for instants.

Renders an Instant into one of the primitive output formats. Readable
output uses a moment-style pattern taken from the LocalePattern passed
in by the caller; nothing here reads or writes process-wide locale state.
"""

import re
from typing import Union

from timeconvert.domain.conversion.civil_time import CivilDateTime, from_epoch_seconds
from timeconvert.domain.conversion.entities import (
    Instant,
    LocalePattern,
    Offset,
    OutputFormat,
)

UTC_PATTERN = "MM/DD/YYYY @ h:mm A [UTC]Z"

# Longest tokens first so "MMMM" wins over "MM" and "M".
TOKEN_PATTERN = re.compile(
    r"\[[^\]]*\]|YYYY|MMMM|MM|M|DD|D|HH|H|hh|h|mm|ss|A|ZZ|Z"
)


def format_instant(
    instant: Instant,
    offset: Offset,
    target: OutputFormat,
    locale: LocalePattern,
) -> Union[str, int]:
    """Render ``instant`` in a single primitive output format.

    Args:
        instant: The absolute instant to render.
        offset: The caller's UTC offset; only UTC and READABLE use it.
        target: One of UTC, READABLE, ISO8601 or UNIX.
        locale: Pattern and month names for READABLE output.

    Raises:
        ValueError: If ``target`` is ALL, which is not a primitive format.
    """
    if target is OutputFormat.UNIX:
        return instant.seconds
    if target is OutputFormat.ISO8601:
        return format_iso8601(instant)
    if target is OutputFormat.UTC:
        return render_pattern(UTC_PATTERN, instant, offset, locale)
    if target is OutputFormat.READABLE:
        return render_pattern(locale.date_format, instant, offset, locale)
    raise ValueError(f"Not a primitive output format: {target!r}")


def format_iso8601(instant: Instant) -> str:
    """Render as ``YYYY-MM-DDTHH:mm:ss.000Z`` in UTC."""
    fields = from_epoch_seconds(instant.seconds)
    if 0 <= fields.year <= 9999:
        year = f"{fields.year:04d}"
    else:
        # ISO 8601 expanded year representation.
        year = f"{'-' if fields.year < 0 else '+'}{abs(fields.year):06d}"
    return (
        f"{year}-{fields.month:02d}-{fields.day:02d}"
        f"T{fields.hour:02d}:{fields.minute:02d}:{fields.second:02d}.000Z"
    )


def render_pattern(
    pattern: str, instant: Instant, offset: Offset, locale: LocalePattern
) -> str:
    """Render a moment-style ``pattern`` for ``instant`` seen at ``offset``."""
    fields = from_epoch_seconds(instant.shifted(offset).seconds)
    return TOKEN_PATTERN.sub(
        lambda match: _render_token(match.group(0), fields, offset, locale),
        pattern,
    )


def _render_token(
    token: str, fields: CivilDateTime, offset: Offset, locale: LocalePattern
) -> str:
    if token.startswith("["):
        return token[1:-1]

    hour_12 = fields.hour % 12 or 12
    renderers = {
        "YYYY": lambda: _year(fields.year),
        "MMMM": lambda: locale.months[fields.month - 1],
        "MM": lambda: f"{fields.month:02d}",
        "M": lambda: str(fields.month),
        "DD": lambda: f"{fields.day:02d}",
        "D": lambda: str(fields.day),
        "HH": lambda: f"{fields.hour:02d}",
        "H": lambda: str(fields.hour),
        "hh": lambda: f"{hour_12:02d}",
        "h": lambda: str(hour_12),
        "mm": lambda: f"{fields.minute:02d}",
        "ss": lambda: f"{fields.second:02d}",
        "A": lambda: "AM" if fields.hour < 12 else "PM",
        "ZZ": offset.canonical,
        "Z": offset.colon,
    }
    return renderers[token]()


def _year(year: int) -> str:
    if 0 <= year <= 9999:
        return f"{year:04d}"
    return str(year)
