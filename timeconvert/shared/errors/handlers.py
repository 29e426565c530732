"""
Centralized error handlers for FastAPI.

Maps conversion failures to HTTP responses.
No stack traces or internal details are exposed to clients.
All error responses share the shape
``{"error": {"code", "message"}, "documentation"}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from timeconvert.application.conversion.dtos import ConversionFailure
from timeconvert.domain.conversion.entities import Language
from timeconvert.domain.conversion.errors import ErrorCode
from timeconvert.shared.security.headers import API_HEADERS, SECURE_HEADERS

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500


class ConversionRejectedError(Exception):
    """Raised by routes to hand a ConversionFailure to the error handlers."""

    def __init__(self, failure: ConversionFailure) -> None:
        super().__init__(failure.code.value)
        self.failure = failure


def _error_response(
    status_code: int, code: str, message: str, documentation: str
) -> JSONResponse:
    """Build a consistent JSON error response.

    Security headers are set here too, since the catch-all 500 is
    produced outside the security middleware.
    """
    body = {
        "error": {"code": code, "message": message},
        "documentation": documentation,
    }
    return JSONResponse(
        status_code=status_code,
        content=body,
        headers={**SECURE_HEADERS, **API_HEADERS},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all conversion error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance. Its ``state.error_catalog``
            is used to localize the internal error message.
    """

    @app.exception_handler(ConversionRejectedError)
    async def handle_conversion_rejected(
        _request: Request, exc: ConversionRejectedError
    ) -> JSONResponse:
        """Handle validation failures reported by the conversion use case."""
        failure = exc.failure
        status_code = HTTP_500 if failure.code is ErrorCode.INTERNAL_ERROR else HTTP_400
        return _error_response(
            status_code, failure.code.value, failure.message, failure.documentation_url
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        catalog = request.app.state.error_catalog
        language = Language.from_wire(request.query_params.get("error")) or Language.default()
        resolved = catalog.lookup(ErrorCode.INTERNAL_ERROR, language)
        return _error_response(
            HTTP_500, resolved.code.value, resolved.message, catalog.documentation_url
        )
