"""
Dependency injection for the conversion bounded context.

Wires the catalogs loaded at startup (kept on ``app.state``)
into the use case via constructor injection.
"""

from fastapi import Request

from timeconvert.application.conversion.convert_time import ConvertTimeUseCase


def get_convert_time_use_case(request: Request) -> ConvertTimeUseCase:
    """Build ConvertTimeUseCase from the application's catalogs."""
    state = request.app.state
    return ConvertTimeUseCase(
        error_catalog=state.error_catalog,
        locale_catalog=state.locale_catalog,
    )
