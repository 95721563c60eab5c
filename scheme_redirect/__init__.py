"""
SchemeRedirect: HTTPS redirect and HSTS middleware for Starlette/FastAPI.

Layers:
    - domain: Redirect and HSTS policy objects, the pure redirect decision, errors.
    - core: Settings loaded from the environment.
    - shared: Cross-cutting concerns (errors, security middleware, logging).
    - interfaces: FastAPI routers and Pydantic schemas.
"""

from scheme_redirect.domain.redirect.entities import (
    HstsConfig,
    ProtocolSelector,
    RedirectConfig,
)
from scheme_redirect.shared.security.scheme_redirect import SchemeRedirectMiddleware

__all__ = [
    "HstsConfig",
    "ProtocolSelector",
    "RedirectConfig",
    "SchemeRedirectMiddleware",
]
