"""
Domain-specific errors for the redirect bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class RedirectDomainError(Exception):
    """Base error for all redirect domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class RedirectConfigError(RedirectDomainError):
    """Base error for invalid redirect or HSTS configuration."""


class InvalidHstsConfigError(RedirectConfigError):
    """Raised when the HSTS max-age is negative or not an integer."""

    def __init__(self, max_age: object) -> None:
        super().__init__(
            f"Invalid HSTS max-age: {max_age!r}. Must be a non-negative integer."
        )
        self.max_age = max_age


class InvalidPortError(RedirectConfigError):
    """Raised when the redirect port override is outside 1-65535."""

    def __init__(self, port: object) -> None:
        super().__init__(f"Invalid redirect port: {port!r}. Must be between 1 and 65535.")
        self.port = port


class InvalidStatusCodeError(RedirectConfigError):
    """Raised when the redirect status is not a supported 3xx code."""

    def __init__(self, status_code: object) -> None:
        super().__init__(
            f"Invalid redirect status code: {status_code!r}. "
            "Must be one of 301, 302, 307, 308."
        )
        self.status_code = status_code


class UnknownProtocolError(RedirectConfigError):
    """Raised when a protocol selector string cannot be parsed."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Unknown protocol selector: {value!r}. "
            "Expected one of ipv4, ipv6, both, none."
        )
        self.value = value


class InvalidHostError(RedirectDomainError):
    """Raised when a redirect is required but the host cannot be used."""

    def __init__(self, host: str | None) -> None:
        if host:
            message = f"Invalid host for redirect: {host!r}"
        else:
            message = "Missing host for redirect"
        super().__init__(message)
        self.host = host


class InvalidDefaultHostError(RedirectConfigError):
    """Raised when the configured fallback host is malformed."""

    def __init__(self, host: str) -> None:
        super().__init__(f"Invalid default host: {host!r}")
        self.host = host
