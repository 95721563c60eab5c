"""
Scheme redirect middleware.

Redirects insecure requests to HTTPS depending on the address family
of the peer, and adds Strict-Transport-Security to every response that
is passed through to the application.

The redirect decision itself lives in the domain layer; this module
only extracts request metadata and shapes the response.
"""

import logging
from typing import Optional
from urllib.parse import quote

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response
from starlette.types import ASGIApp

from scheme_redirect.domain.redirect.decision import classify_address, decide
from scheme_redirect.domain.redirect.entities import (
    DEFAULT_REDIRECT_STATUS,
    HstsConfig,
    ProtocolSelector,
    Redirect,
    RedirectConfig,
)
from scheme_redirect.domain.redirect.errors import InvalidHostError
from scheme_redirect.shared.errors.handlers import invalid_host_response
from scheme_redirect.shared.security.headers import apply_hsts

logger = logging.getLogger(__name__)

SECURE_SCHEMES = frozenset({"https", "wss"})


class SchemeRedirectMiddleware(BaseHTTPMiddleware):
    """Middleware that redirects insecure requests to HTTPS.

    Only requests whose peer address family is selected by
    ``protocols`` are redirected; other insecure requests pass through
    untouched. Pass-through responses get the HSTS header when an HSTS
    policy is configured.

    Either pass the policy pieces individually or a ready
    ``RedirectConfig`` through ``config``.
    """

    def __init__(
        self,
        app: ASGIApp,
        protocols: ProtocolSelector = ProtocolSelector.NONE,
        hsts: Optional[HstsConfig] = None,
        port: Optional[int] = None,
        *,
        status_code: int = DEFAULT_REDIRECT_STATUS,
        default_host: Optional[str] = None,
        trust_forwarded_headers: bool = False,
        config: Optional[RedirectConfig] = None,
    ) -> None:
        super().__init__(app)
        if config is None:
            config = RedirectConfig(
                protocols=protocols,
                port=port,
                hsts=hsts,
                status_code=status_code,
                default_host=default_host,
                trust_forwarded_headers=trust_forwarded_headers,
            )
        self.config = config
        self._hsts_value = config.hsts_header_value
        logger.info(
            "Scheme redirect enabled for %s (port=%s, hsts=%s)",
            config.protocols.value,
            config.port,
            self._hsts_value,
        )

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Redirect the request or pass it on and decorate the response."""
        client_host = request.client.host if request.client else None
        try:
            outcome = decide(
                self.config.protocols,
                self._is_secure(request),
                classify_address(client_host),
                self._host(request),
                _path_and_query(request),
                self.config.port,
            )
        except InvalidHostError as exc:
            return invalid_host_response(exc)

        if isinstance(outcome, Redirect):
            logger.debug("Redirecting insecure request to %s", outcome.location)
            return RedirectResponse(outcome.location, status_code=self.config.status_code)

        response = await call_next(request)
        return apply_hsts(response, self._hsts_value)

    def _is_secure(self, request: Request) -> bool:
        if self.config.trust_forwarded_headers:
            proto = _first_value(request.headers.get("x-forwarded-proto"))
            if proto:
                return proto.lower() in SECURE_SCHEMES
        return request.url.scheme in SECURE_SCHEMES

    def _host(self, request: Request) -> Optional[str]:
        if self.config.trust_forwarded_headers:
            forwarded_host = _first_value(request.headers.get("x-forwarded-host"))
            if forwarded_host:
                return forwarded_host
        return request.headers.get("host") or self.config.default_host


def _first_value(header: Optional[str]) -> Optional[str]:
    """Return the first entry of a comma-separated proxy header."""
    if not header:
        return None
    return header.split(",", 1)[0].strip() or None


def _path_and_query(request: Request) -> str:
    """Return the request target as sent by the client, still percent-encoded."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.decode("latin-1").split("?", 1)[0]
    else:
        path = quote(request.scope.get("path") or "/")
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path
