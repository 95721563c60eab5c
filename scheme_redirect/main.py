"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health, redirect policy)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (scheme redirect, HSTS)
- Logging configuration

No business logic belongs here.
"""

from typing import Optional

from fastapi import FastAPI

from scheme_redirect.core.config import Settings, settings
from scheme_redirect.interfaces.health import router as health_router
from scheme_redirect.interfaces.redirect_policy import router as redirect_policy_router
from scheme_redirect.shared.errors.handlers import register_error_handlers
from scheme_redirect.shared.logging import configure_logging
from scheme_redirect.shared.security.scheme_redirect import SchemeRedirectMiddleware


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Args:
        app_settings: Settings to build from. Defaults to the
            environment-loaded settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    if app_settings is None:
        app_settings = settings
    configure_logging(level=app_settings.log_level)

    # Fail at startup, not per request, on a bad policy.
    redirect_config = app_settings.to_redirect_config()

    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        docs_url="/docs" if app_settings.debug else None,
        redoc_url="/redoc" if app_settings.debug else None,
    )
    app.state.redirect_config = redirect_config

    # --- Security Middleware ---
    app.add_middleware(SchemeRedirectMiddleware, config=redirect_config)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(redirect_policy_router, prefix="/api/v1")

    return app


app = create_app()
