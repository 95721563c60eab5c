"""
Host header validation.

A redirect Location is only ever built from a host that passed
``strip_port``. Anything that is not a plain printable ASCII host name,
IPv4 literal, or bracketed IPv6 literal is rejected.
"""

import ipaddress
from typing import Optional

from scheme_redirect.domain.redirect.errors import InvalidHostError

_FORBIDDEN_HOST_CHARS = frozenset(" \t\r\n/\\@?#")


def strip_port(host: Optional[str]) -> str:
    """Return ``host`` without its port suffix.

    Bracketed IPv6 literals keep their brackets.

    Raises:
        InvalidHostError: If the host is empty or malformed.
    """
    if not host or not host.isascii() or not host.isprintable():
        raise InvalidHostError(host)
    if any(char in _FORBIDDEN_HOST_CHARS for char in host):
        raise InvalidHostError(host)

    if host.startswith("["):
        end = host.find("]")
        if end == -1:
            raise InvalidHostError(host)
        hostname, rest = host[: end + 1], host[end + 1 :]
        try:
            ipaddress.IPv6Address(hostname[1:-1])
        except ValueError:
            raise InvalidHostError(host) from None
        if rest and not (rest.startswith(":") and rest[1:].isdigit()):
            raise InvalidHostError(host)
        return hostname

    if "]" in host or host.count(":") > 1:
        raise InvalidHostError(host)
    hostname, _, port = host.partition(":")
    if not hostname or (port and not port.isdigit()):
        raise InvalidHostError(host)
    return hostname
