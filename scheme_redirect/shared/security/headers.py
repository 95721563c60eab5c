"""
Strict-Transport-Security header decoration.

The header value is rendered once from the HSTS policy and attached
to responses that were actually served, never to redirect hops.

No business logic. Pure cross-cutting concern.
"""

from typing import Optional

from starlette.responses import Response

HSTS_HEADER = "Strict-Transport-Security"


def apply_hsts(response: Response, header_value: Optional[str]) -> Response:
    """Set or overwrite the HSTS header when a value is configured.

    Args:
        response: Outgoing response from the downstream handler.
        header_value: Rendered HSTS value, None when HSTS is disabled.

    Returns:
        The same response, for chaining.
    """
    if header_value is not None:
        response.headers[HSTS_HEADER] = header_value
    return response
