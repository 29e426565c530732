"""
Read-only catalogs of user-facing strings.

Both catalogs are built once at startup and never change afterwards.
Lookups always succeed: missing entries fall back deterministically.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from timeconvert.domain.conversion.entities import Language, LocalePattern
from timeconvert.domain.conversion.errors import ErrorCode

DEFAULT_DATE_FORMAT = "MMMM D, YYYY, HH:mm:ss [GMT]ZZ"
DEFAULT_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
DEFAULT_LOCALE = LocalePattern(
    language=Language.EN,
    date_format=DEFAULT_DATE_FORMAT,
    months=DEFAULT_MONTHS,
)

FALLBACK_MESSAGE = "Unexpected error (code {code}). See {documentation_url}"


@dataclass(frozen=True)
class ErrorMessage:
    """A resolved error: the stable code plus a localized message."""

    code: ErrorCode
    message: str


@dataclass(frozen=True)
class ErrorCatalog:
    """Error messages keyed by language, then by error code.

    Attributes:
        messages: Read-only ``{language: {code: message}}`` mapping.
        documentation_url: Embedded in the fallback message.
        degraded: True when the catalog could not be loaded and is empty.
    """

    messages: Mapping[Language, Mapping[ErrorCode, str]]
    documentation_url: str
    degraded: bool = False

    @classmethod
    def build(
        cls,
        messages: Mapping[Language, Mapping[ErrorCode, str]],
        documentation_url: str,
        degraded: bool = False,
    ) -> "ErrorCatalog":
        """Freeze ``messages`` into read-only mappings."""
        frozen = MappingProxyType(
            {lang: MappingProxyType(dict(codes)) for lang, codes in messages.items()}
        )
        return cls(frozen, documentation_url, degraded)

    def lookup(self, code: ErrorCode, language: Language) -> ErrorMessage:
        """Return the message for ``code`` in ``language``.

        Falls back to a generic message that names the code and the
        documentation URL. Never raises and never returns an empty message.
        """
        message = self.messages.get(language, {}).get(code)
        if not message:
            message = FALLBACK_MESSAGE.format(
                code=code.value, documentation_url=self.documentation_url
            )
        return ErrorMessage(code=code, message=message)


@dataclass(frozen=True)
class LocaleCatalog:
    """Readable-date patterns keyed by language."""

    patterns: Mapping[Language, LocalePattern] = field(
        default_factory=lambda: MappingProxyType({})
    )
    degraded: bool = False

    @classmethod
    def build(
        cls, patterns: Mapping[Language, LocalePattern], degraded: bool = False
    ) -> "LocaleCatalog":
        """Freeze ``patterns`` into a read-only mapping."""
        return cls(MappingProxyType(dict(patterns)), degraded)

    def pattern_for(self, language: Language) -> LocalePattern:
        """Return the pattern for ``language``.

        Falls back to English, then to the built-in default.
        """
        pattern = self.patterns.get(language)
        if pattern is None:
            pattern = self.patterns.get(Language.EN, DEFAULT_LOCALE)
        return pattern
