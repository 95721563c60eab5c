"""
Health check router.

Liveness/readiness endpoint that also reports whether the HTTPS redirect
and HSTS policies are active, so a probe can catch a deployment that
came up with redirection switched off.
"""

from fastapi import APIRouter, Request

from scheme_redirect.core.config import settings
from scheme_redirect.domain.redirect.entities import ProtocolSelector, RedirectConfig
from scheme_redirect.interfaces.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application status, version, and which HTTPS policies are active.",
)
def health_check(request: Request) -> HealthResponse:
    config: RedirectConfig = request.app.state.redirect_config
    return HealthResponse(
        status="ok",
        version=settings.version,
        redirect_enabled=config.protocols is not ProtocolSelector.NONE,
        hsts_enabled=config.hsts is not None,
    )
