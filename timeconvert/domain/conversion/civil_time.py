"""
Proleptic Gregorian calendar arithmetic on epoch seconds.

``datetime`` stops at years 1 and 9999, but an accepted Unix value can
lie far beyond year 9999, and applying a negative offset to the year-1
floor lands in year 0. These helpers work for any integer.
"""

from dataclasses import dataclass

SECONDS_PER_DAY = 86_400
DAYS_PER_ERA = 146_097  # days in a 400-year Gregorian cycle
DAYS_FROM_CIVIL_ZERO_TO_EPOCH = 719_468  # 0000-03-01 to 1970-01-01

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class CivilDateTime:
    """Broken-down calendar fields of an instant."""

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the number of days from 1970-01-01 to the given date."""
    y = year - 1 if month <= 2 else year
    era = y // 400
    year_of_era = y - era * 400
    shifted_month = month + 9 if month <= 2 else month - 3
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    return era * DAYS_PER_ERA + day_of_era - DAYS_FROM_CIVIL_ZERO_TO_EPOCH


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Return ``(year, month, day)`` for a day count since 1970-01-01."""
    z = days + DAYS_FROM_CIVIL_ZERO_TO_EPOCH
    era = z // DAYS_PER_ERA
    day_of_era = z - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    mp = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * mp + 2) // 5 + 1
    month = mp + 3 if mp < 10 else mp - 9
    year = year_of_era + era * 400 + (1 if month <= 2 else 0)
    return year, month, day


def to_epoch_seconds(
    year: int, month: int, day: int, hour: int, minute: int, second: int
) -> int:
    """Interpret calendar fields as UTC and return epoch seconds."""
    days = days_from_civil(year, month, day)
    return days * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second


def from_epoch_seconds(seconds: int) -> CivilDateTime:
    """Break epoch seconds down into UTC calendar fields."""
    days, second_of_day = divmod(seconds, SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, rest = divmod(second_of_day, 3600)
    minute, second = divmod(rest, 60)
    return CivilDateTime(year, month, day, hour, minute, second)
