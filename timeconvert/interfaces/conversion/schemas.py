"""
Pydantic schemas for the conversion API responses.

Query parameters are plain optional strings; the use case
validates them and assigns the error codes.
No business logic belongs here.
"""

from typing import Union

from pydantic import BaseModel


class AllFormatsItem(BaseModel):
    """All four representations, returned for ``format=all``."""

    utc: str
    readable: str
    iso8601: str
    unix: int


class ConvertResponse(BaseModel):
    """Response schema for a successful conversion."""

    result: Union[AllFormatsItem, int, str]


class ErrorDetail(BaseModel):
    """Stable error code plus localized message."""

    code: str
    message: str


class ErrorResponse(BaseModel):
    """Response schema for a rejected conversion."""

    error: ErrorDetail
    documentation: str


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
