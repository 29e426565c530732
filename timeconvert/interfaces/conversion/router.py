"""
FastAPI router for the conversion bounded context.

The route delegates to the use case. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, Depends, Query

from timeconvert.application.conversion.convert_time import ConvertTimeUseCase
from timeconvert.application.conversion.dtos import (
    ConversionFailure,
    ConvertTimeCommand,
)
from timeconvert.domain.conversion.entities import AllFormatsRecord
from timeconvert.interfaces.conversion.dependencies import get_convert_time_use_case
from timeconvert.interfaces.conversion.schemas import (
    AllFormatsItem,
    ConvertResponse,
    ErrorResponse,
)
from timeconvert.shared.errors.handlers import ConversionRejectedError

router = APIRouter(tags=["conversion"])


def _restore_plus_sign(gmt: Optional[str]) -> Optional[str]:
    """Undo form decoding of an unencoded ``+`` in ``?gmt=+0530``."""
    if gmt is not None and len(gmt) > 1 and gmt[0] == " " and gmt[1].isdigit():
        return "+" + gmt[1:]
    return gmt


@router.get(
    "/convert",
    response_model=ConvertResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Convert a date or Unix timestamp",
    description=(
        "Convert a YYYY/MM/DD@HH:MM:SS date or a Unix timestamp into "
        "utc, readable, iso8601, unix, or all four formats."
    ),
)
def convert(
    conversion_type: Optional[str] = Query(None, alias="type"),
    output_format: Optional[str] = Query(None, alias="format"),
    value: Optional[str] = Query(None),
    gmt: Optional[str] = Query(None, description="Signed UTC offset, e.g. +0530"),
    lang: Optional[str] = Query(None),
    leng: Optional[str] = Query(None, description="Alias of lang"),
    error: Optional[str] = Query(None, description="Language for error messages"),
    use_case: ConvertTimeUseCase = Depends(get_convert_time_use_case),
) -> ConvertResponse:
    """Convert a single value and return it under ``result``."""
    command = ConvertTimeCommand(
        type=conversion_type,
        format=output_format,
        value=value,
        offset=_restore_plus_sign(gmt),
        language=lang if lang is not None else leng,
        error_language=error,
    )
    outcome = use_case.execute(command)
    if isinstance(outcome, ConversionFailure):
        raise ConversionRejectedError(outcome)

    result = outcome.value
    if isinstance(result, AllFormatsRecord):
        return ConvertResponse(result=AllFormatsItem(**asdict(result)))
    return ConvertResponse(result=result)
