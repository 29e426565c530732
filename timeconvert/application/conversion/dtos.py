"""
Data Transfer Objects for the conversion application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional, Union

from timeconvert.domain.conversion.entities import FormattedValue
from timeconvert.domain.conversion.errors import ErrorCode

DEFAULT_OFFSET = "+0000"


@dataclass(frozen=True)
class ConvertTimeCommand:
    """Input DTO for a single conversion request.

    Every field is the raw, untrusted string from the caller;
    None means the caller did not supply it.

    Attributes:
        type: "time" or "unix".
        format: "utc", "readable", "iso8601", "unix" or "all".
        value: The calendar string or epoch numeral to convert.
        offset: Signed UTC offset, e.g. "+0530" or "-03:00".
        language: Language for readable output.
        error_language: Language for error messages.
    """

    type: Optional[str] = None
    format: Optional[str] = None
    value: Optional[str] = None
    offset: Optional[str] = None
    language: Optional[str] = None
    error_language: Optional[str] = None


@dataclass(frozen=True)
class ConversionSuccess:
    """Output DTO for a successful conversion."""

    value: FormattedValue

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class ConversionFailure:
    """Output DTO for a rejected conversion.

    Attributes:
        code: Stable six-digit error code.
        message: Message localized into the requested error language.
        documentation_url: Where the error codes are documented.
    """

    code: ErrorCode
    message: str
    documentation_url: str

    @property
    def ok(self) -> bool:
        return False


ConversionResult = Union[ConversionSuccess, ConversionFailure]
