"""
Domain entities for the redirect bounded context.

Value objects describing the redirect policy and the outcome of a
redirect decision. They contain no framework imports and no IO.
All of them are immutable, so a single instance is shared by every
request the middleware handles.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Union

from scheme_redirect.domain.redirect.errors import (
    InvalidDefaultHostError,
    InvalidHostError,
    InvalidHstsConfigError,
    InvalidPortError,
    InvalidStatusCodeError,
    UnknownProtocolError,
)
from scheme_redirect.domain.redirect.hosts import strip_port

DEFAULT_HSTS_MAX_AGE = 300
DEFAULT_REDIRECT_STATUS = 307
HTTPS_DEFAULT_PORT = 443
REDIRECT_STATUS_CODES = frozenset({301, 302, 307, 308})


class AddressFamily(Enum):
    """Network-layer protocol family of a peer address."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"


class ProtocolSelector(Enum):
    """Which address families are subject to the HTTPS redirect."""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    BOTH = "both"
    NONE = "none"

    @classmethod
    def parse(cls, value: Union[str, "ProtocolSelector"]) -> "ProtocolSelector":
        """Parse a selector from its case-insensitive configuration name.

        Raises:
            UnknownProtocolError: If the value names no selector.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnknownProtocolError(value) from None


@dataclass(frozen=True)
class HstsConfig:
    """Strict-Transport-Security policy.

    Attributes:
        max_age: Seconds the browser should remember the policy.
        include_subdomains: Extend the policy to every subdomain.
        preload: Mark the host as eligible for browser preload lists.
            Preload-list requirements are not enforced here.
    """

    max_age: int = DEFAULT_HSTS_MAX_AGE
    include_subdomains: bool = False
    preload: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.max_age, bool) or not isinstance(self.max_age, int):
            raise InvalidHstsConfigError(self.max_age)
        if self.max_age < 0:
            raise InvalidHstsConfigError(self.max_age)

    def render(self) -> str:
        """Return the canonical Strict-Transport-Security header value."""
        value = f"max-age={self.max_age}"
        if self.include_subdomains:
            value += "; includeSubDomains"
        if self.preload:
            value += "; preload"
        return value

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class RedirectConfig:
    """Redirect policy applied by the scheme redirect middleware.

    Attributes:
        protocols: Address families whose insecure requests are redirected.
        port: HTTPS port to redirect to. None keeps the default port.
        hsts: HSTS policy for pass-through responses. None disables it.
        status_code: 3xx status of the redirect response.
        default_host: Host used when a request carries no Host header.
        trust_forwarded_headers: Honor X-Forwarded-Proto and
            X-Forwarded-Host from a trusted reverse proxy.
    """

    protocols: ProtocolSelector = ProtocolSelector.NONE
    port: Optional[int] = None
    hsts: Optional[HstsConfig] = None
    status_code: int = DEFAULT_REDIRECT_STATUS
    default_host: Optional[str] = None
    trust_forwarded_headers: bool = False

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "protocols", ProtocolSelector.parse(self.protocols))
        if self.port is not None:
            if isinstance(self.port, bool) or not isinstance(self.port, int):
                raise InvalidPortError(self.port)
            if not 1 <= self.port <= 65535:
                raise InvalidPortError(self.port)
        if self.status_code not in REDIRECT_STATUS_CODES:
            raise InvalidStatusCodeError(self.status_code)
        if self.default_host is not None:
            try:
                strip_port(self.default_host)
            except InvalidHostError:
                raise InvalidDefaultHostError(self.default_host) from None

    @property
    def hsts_header_value(self) -> Optional[str]:
        """Rendered HSTS header, or None when HSTS is not configured."""
        return self.hsts.render() if self.hsts is not None else None

    def with_port(self, port: int) -> "RedirectConfig":
        """Return a copy of this policy redirecting to ``port``."""
        return replace(self, port=port)


@dataclass(frozen=True)
class PassThrough:
    """Decision outcome: hand the request to the next handler."""


@dataclass(frozen=True)
class Redirect:
    """Decision outcome: answer with a redirect to ``location``."""

    location: str


Outcome = Union[PassThrough, Redirect]
