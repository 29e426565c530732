"""
Tests for the conversion application layer (use case).

Uses the packaged catalogs; no HTTP involved.
Each test verifies orchestration: check order, offset handling,
format dispatch and error localization.
"""

from unittest.mock import patch

import pytest

from timeconvert.application.conversion.convert_time import ConvertTimeUseCase
from timeconvert.application.conversion.dtos import (
    ConversionFailure,
    ConversionSuccess,
    ConvertTimeCommand,
)
from timeconvert.domain.conversion.entities import AllFormatsRecord
from timeconvert.domain.conversion.errors import ErrorCode


def _command(**overrides) -> ConvertTimeCommand:
    fields = {"type": "unix", "format": "unix", "value": "1700000000"}
    fields.update(overrides)
    return ConvertTimeCommand(**fields)


def _failure_code(use_case: ConvertTimeUseCase, **overrides) -> ErrorCode:
    outcome = use_case.execute(_command(**overrides))
    assert isinstance(outcome, ConversionFailure)
    return outcome.code


class TestConvertTimeSuccess:
    """Successful conversions."""

    def test_unix_round_trip(self, use_case: ConvertTimeUseCase) -> None:
        """A unix value converted to unix is returned unchanged."""
        outcome = use_case.execute(_command())
        assert outcome == ConversionSuccess(value=1_700_000_000)
        assert outcome.ok

    def test_time_to_unix(self, use_case: ConvertTimeUseCase) -> None:
        """A calendar string converts to epoch seconds as UTC."""
        outcome = use_case.execute(
            _command(type="time", format="unix", value="2024/01/01@00:00:00", offset="+0900")
        )
        assert outcome == ConversionSuccess(value=1_704_067_200)

    def test_utc_with_offset(self, use_case: ConvertTimeUseCase) -> None:
        """The UTC format applies the offset."""
        outcome = use_case.execute(_command(format="utc", offset="-03:00"))
        assert outcome == ConversionSuccess(value="11/14/2023 @ 7:13 PM UTC-03:00")

    def test_readable_in_portuguese(self, use_case: ConvertTimeUseCase) -> None:
        """Readable output uses the requested language."""
        outcome = use_case.execute(_command(format="readable", offset="-0300", language="pt"))
        assert outcome == ConversionSuccess(value="14 de novembro de 2023, 19:13:20 GMT-0300")

    def test_readable_in_spanish(self, use_case: ConvertTimeUseCase) -> None:
        """Spanish month names are lowercase, as configured."""
        outcome = use_case.execute(
            _command(type="time", format="readable", value="2024/01/01@00:00:00", language="es")
        )
        assert outcome == ConversionSuccess(value="1 de enero de 2024, 00:00:00 GMT+0000")

    def test_iso8601(self, use_case: ConvertTimeUseCase) -> None:
        """ISO-8601 output is UTC regardless of offset."""
        outcome = use_case.execute(_command(format="iso8601", offset="+14:00"))
        assert outcome == ConversionSuccess(value="2023-11-14T22:13:20.000Z")

    def test_all_matches_individual_formats(self, use_case: ConvertTimeUseCase) -> None:
        """Every field of ALL equals the value of the single format."""
        common = {"offset": "+05:45", "language": "es"}
        outcome = use_case.execute(_command(format="all", **common))
        assert isinstance(outcome, ConversionSuccess)
        record = outcome.value
        assert isinstance(record, AllFormatsRecord)

        for field_name in ("utc", "readable", "iso8601", "unix"):
            single = use_case.execute(_command(format=field_name, **common))
            assert getattr(record, field_name) == single.value

    def test_defaults(self, use_case: ConvertTimeUseCase) -> None:
        """Missing offset and language default to +0000 and English."""
        outcome = use_case.execute(_command(format="readable", offset="", language=None))
        assert outcome == ConversionSuccess(value="November 14, 2023, 22:13:20 GMT+0000")

    def test_enum_values_are_case_insensitive(self, use_case: ConvertTimeUseCase) -> None:
        """Enumerated parameters ignore case and surrounding whitespace."""
        outcome = use_case.execute(_command(type=" UNIX ", format="Unix", language="EN"))
        assert outcome == ConversionSuccess(value=1_700_000_000)


class TestConvertTimeValidationOrder:
    """First failing check wins, in a fixed order."""

    def test_missing_value_wins_over_everything(self, use_case: ConvertTimeUseCase) -> None:
        """A missing value yields VALUE_MISSING whatever else is wrong."""
        assert _failure_code(use_case, value=None) is ErrorCode.VALUE_MISSING
        assert (
            _failure_code(use_case, value="  ", type=None, format="bogus", language="xx")
            is ErrorCode.VALUE_MISSING
        )

    def test_missing_type_then_format(self, use_case: ConvertTimeUseCase) -> None:
        """Type is checked before format."""
        assert _failure_code(use_case, type=None, format=None) is ErrorCode.TYPE_MISSING
        assert _failure_code(use_case, format="") is ErrorCode.FORMAT_MISSING

    def test_invalid_type_wins_over_invalid_format(self, use_case: ConvertTimeUseCase) -> None:
        """An invalid type is reported even when the format is also invalid."""
        assert _failure_code(use_case, type="date", format="xml") is ErrorCode.INVALID_TYPE

    def test_invalid_enums(self, use_case: ConvertTimeUseCase) -> None:
        """Each enumerated parameter has its own code."""
        assert _failure_code(use_case, format="xml") is ErrorCode.INVALID_FORMAT
        assert _failure_code(use_case, language="fr") is ErrorCode.INVALID_LANGUAGE
        assert _failure_code(use_case, error_language="de") is ErrorCode.INVALID_ERROR_LANGUAGE

    def test_value_checked_before_offset(self, use_case: ConvertTimeUseCase) -> None:
        """Input parsing fails before the offset is examined."""
        assert _failure_code(use_case, value="abc", offset="bad") is ErrorCode.TIMESTAMP_NOT_NUMERIC

    def test_offset_errors(self, use_case: ConvertTimeUseCase) -> None:
        """Offset failures propagate unchanged."""
        assert _failure_code(use_case, offset="1400") is ErrorCode.OFFSET_MALFORMED
        assert _failure_code(use_case, offset="+1401") is ErrorCode.OFFSET_OUT_OF_RANGE

    def test_time_input_errors(self, use_case: ConvertTimeUseCase) -> None:
        """Calendar parsing failures propagate unchanged."""
        assert (
            _failure_code(use_case, type="time", value="2024/02/30@10:00:00")
            is ErrorCode.DATE_DAY_OUT_OF_RANGE
        )
        assert _failure_code(use_case, type="time", value="1700000000") is ErrorCode.DATE_MALFORMED


class TestConvertTimeErrorMessages:
    """Failures are localized through the error catalog."""

    @pytest.mark.parametrize(
        "language, fragment",
        [("en", "required"), ("es", "obligatorio"), ("pt", "obrigatório")],
    )
    def test_localized_message(
        self,
        use_case: ConvertTimeUseCase,
        documentation_url: str,
        language: str,
        fragment: str,
    ) -> None:
        """The error language selects the message translation."""
        outcome = use_case.execute(_command(value=None, error_language=language))
        assert isinstance(outcome, ConversionFailure)
        assert fragment in outcome.message
        assert outcome.documentation_url == documentation_url
        assert not outcome.ok

    def test_invalid_error_language_is_reported_in_english(
        self, use_case: ConvertTimeUseCase
    ) -> None:
        """An unusable error language falls back to English."""
        outcome = use_case.execute(_command(error_language="klingon"))
        assert isinstance(outcome, ConversionFailure)
        assert outcome.code is ErrorCode.INVALID_ERROR_LANGUAGE
        assert outcome.message.startswith("Invalid error language")

    def test_unexpected_fault_becomes_internal_error(self, use_case: ConvertTimeUseCase) -> None:
        """Unexpected exceptions are downgraded to INTERNAL_ERROR."""
        with patch(
            "timeconvert.application.conversion.convert_time.format_instant",
            side_effect=RuntimeError("boom"),
        ):
            outcome = use_case.execute(_command(format="utc"))
        assert isinstance(outcome, ConversionFailure)
        assert outcome.code is ErrorCode.INTERNAL_ERROR
        assert "boom" not in outcome.message
