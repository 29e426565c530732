"""
Application entry point.

Creates the FastAPI application and wires together:
- Catalogs (loaded once, read-only for the process lifetime)
- Routers (conversion, health, documentation page)
- Error handlers (centralized failure-to-HTTP mapping)
- Security headers middleware
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from timeconvert.core.config import Settings, settings as default_settings
from timeconvert.domain.conversion.ports import CatalogRepository
from timeconvert.infrastructure.catalogs.json_catalog_loader import (
    JsonCatalogRepository,
    load_catalogs,
)
from timeconvert.interfaces.conversion.router import router as conversion_router
from timeconvert.interfaces.docs import router as docs_router
from timeconvert.interfaces.health import router as health_router
from timeconvert.shared.errors.handlers import register_error_handlers
from timeconvert.shared.logging import configure_logging
from timeconvert.shared.security.headers import SecurityHeadersMiddleware


def create_app(
    app_settings: Optional[Settings] = None,
    repository: Optional[CatalogRepository] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Loads catalogs, registers routers, error handlers, and middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to use; defaults to the environment settings.
        repository: Catalog source; defaults to the JSON files.

    Returns:
        A fully configured FastAPI application instance.
    """
    app_settings = app_settings or default_settings
    configure_logging(level=app_settings.log_level)

    if repository is None:
        repository = JsonCatalogRepository(
            documentation_url=app_settings.documentation_url,
            error_catalog_path=app_settings.error_catalog_path,
            locale_catalog_path=app_settings.locale_catalog_path,
        )
    error_catalog, locale_catalog = load_catalogs(
        repository,
        app_settings.documentation_url,
        app_settings.allow_degraded_catalogs,
    )

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/api/docs" if app_settings.debug else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if app_settings.debug else None,
    )
    app.state.error_catalog = error_catalog
    app.state.locale_catalog = locale_catalog

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(docs_router)
    app.include_router(health_router, prefix="/api")
    app.include_router(conversion_router, prefix="/api")

    return app


app = create_app()
