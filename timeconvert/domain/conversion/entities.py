"""
Value objects for the conversion bounded context.

Everything here is immutable. Each transformation produces a new
value instead of mutating an existing one.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class _WireEnum(str, Enum):
    """Closed enumeration parsed from a lowercase query-string value."""

    @classmethod
    def from_wire(cls, raw: Optional[str]) -> Optional["_WireEnum"]:
        """Return the member matching ``raw``, or None if there is none."""
        if raw is None:
            return None
        candidate = raw.strip().lower()
        for member in cls:
            if member.value == candidate:
                return member
        return None


class ConversionType(_WireEnum):
    """Kind of input value supplied by the caller."""

    TIME = "time"
    UNIX = "unix"


class OutputFormat(_WireEnum):
    """Requested output representation."""

    UTC = "utc"
    READABLE = "readable"
    ISO8601 = "iso8601"
    UNIX = "unix"
    ALL = "all"


class Language(_WireEnum):
    """Supported languages for readable dates and error messages."""

    EN = "en"
    ES = "es"
    PT = "pt"

    @classmethod
    def default(cls) -> "Language":
        """Return the language used when the caller does not pick one."""
        return cls.EN


@dataclass(frozen=True)
class Offset:
    """A fixed UTC offset in signed minutes."""

    minutes: int

    @property
    def sign(self) -> str:
        return "-" if self.minutes < 0 else "+"

    @property
    def hours_part(self) -> int:
        return abs(self.minutes) // 60

    @property
    def minutes_part(self) -> int:
        return abs(self.minutes) % 60

    def canonical(self) -> str:
        """Render as ``±HHMM``."""
        return f"{self.sign}{self.hours_part:02d}{self.minutes_part:02d}"

    def colon(self) -> str:
        """Render as ``±HH:MM``."""
        return f"{self.sign}{self.hours_part:02d}:{self.minutes_part:02d}"


UTC_OFFSET = Offset(0)


@dataclass(frozen=True)
class Instant:
    """An absolute point in time, as whole seconds since the Unix epoch."""

    seconds: int

    def shifted(self, offset: Offset) -> "Instant":
        """Return the wall-clock instant seen at ``offset``."""
        return Instant(self.seconds + offset.minutes * 60)


@dataclass(frozen=True)
class LocalePattern:
    """Readable date pattern and month names for one language.

    Passed explicitly into the formatter on every call; there is
    no process-wide locale.
    """

    language: Language
    date_format: str
    months: tuple[str, ...]


@dataclass(frozen=True)
class AllFormatsRecord:
    """All four primitive representations of one instant."""

    utc: str
    readable: str
    iso8601: str
    unix: int


FormattedValue = Union[str, int, AllFormatsRecord]
