"""
Scheme redirect decision.

Pure functions deciding whether an insecure request must be redirected
to HTTPS, and building the redirect location. No framework imports,
no IO: the middleware extracts the request metadata and passes it in.
"""

import ipaddress
from typing import Optional

from scheme_redirect.domain.redirect.entities import (
    HTTPS_DEFAULT_PORT,
    AddressFamily,
    Outcome,
    PassThrough,
    ProtocolSelector,
    Redirect,
)
from scheme_redirect.domain.redirect.hosts import strip_port

_SELECTED_FAMILIES = {
    ProtocolSelector.IPV4: frozenset({AddressFamily.IPV4}),
    ProtocolSelector.IPV6: frozenset({AddressFamily.IPV6}),
    ProtocolSelector.BOTH: frozenset({AddressFamily.IPV4, AddressFamily.IPV6}),
    ProtocolSelector.NONE: frozenset(),
}


def classify_address(address: Optional[str]) -> Optional[AddressFamily]:
    """Return the address family of a peer address.

    An IPv4-mapped IPv6 address (``::ffff:a.b.c.d``) is an IPv4 client
    reaching a dual-stack socket, so it classifies as IPv4.

    Args:
        address: Peer IP literal as reported by the server, or None.

    Returns:
        The address family, or None when the address is absent or is not
        an IP literal (unix sockets, test transports).
    """
    if not address:
        return None
    try:
        ip = ipaddress.ip_address(address.strip("[]"))
    except ValueError:
        return None
    if isinstance(ip, ipaddress.IPv6Address):
        if ip.ipv4_mapped is not None:
            return AddressFamily.IPV4
        return AddressFamily.IPV6
    return AddressFamily.IPV4


def matches(selector: ProtocolSelector, family: Optional[AddressFamily]) -> bool:
    """Return True when requests of ``family`` are subject to ``selector``."""
    if family is None:
        return False
    return family in _SELECTED_FAMILIES[selector]


def build_location(host: Optional[str], path_and_query: str, port: Optional[int] = None) -> str:
    """Build the ``https://`` URL a request is redirected to.

    The port is appended only when it differs from the HTTPS default.
    """
    location = f"https://{strip_port(host)}"
    if port is not None and port != HTTPS_DEFAULT_PORT:
        location += f":{port}"
    if not path_and_query.startswith("/"):
        path_and_query = "/" + path_and_query
    return location + path_and_query


def decide(
    selector: ProtocolSelector,
    is_secure: bool,
    remote_addr: Optional[AddressFamily],
    host: Optional[str],
    path_and_query: str,
    override_port: Optional[int] = None,
) -> Outcome:
    """Decide whether a request passes through or is redirected to HTTPS.

    A secure request always passes through. An insecure request passes
    through unchanged when its address family is not selected: the
    selector is a deliberate filter, not a fallback.

    Args:
        selector: Address families subject to the redirect.
        is_secure: Whether the request arrived over a secure transport.
        remote_addr: Address family of the peer, None if unknown.
        host: Host header value, possibly with a port suffix.
        path_and_query: Request target, path plus optional ``?query``.
        override_port: HTTPS port to redirect to.

    Returns:
        PassThrough or Redirect.

    Raises:
        InvalidHostError: If a redirect is required but the host is
            missing or malformed.
    """
    if is_secure:
        return PassThrough()
    if not matches(selector, remote_addr):
        return PassThrough()
    return Redirect(location=build_location(host, path_and_query, override_port))
