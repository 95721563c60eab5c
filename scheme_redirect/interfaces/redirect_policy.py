"""
Redirect policy router.

Exposes the redirect and HSTS policy the application was started with,
so operators can check what the middleware enforces.
"""

from fastapi import APIRouter, Request

from scheme_redirect.domain.redirect.entities import RedirectConfig
from scheme_redirect.interfaces.schemas import RedirectPolicyResponse

router = APIRouter(tags=["redirect"])


@router.get(
    "/redirect-policy",
    response_model=RedirectPolicyResponse,
    summary="Active redirect policy",
    description="Returns the HTTPS redirect and HSTS policy in effect.",
)
def get_redirect_policy(request: Request) -> RedirectPolicyResponse:
    """Return the policy stored on the application at startup."""
    config: RedirectConfig = request.app.state.redirect_config
    return RedirectPolicyResponse(
        protocols=config.protocols.value,
        port=config.port,
        status_code=config.status_code,
        hsts=config.hsts_header_value,
    )
