"""
Security middleware package.

HTTPS redirection and Strict-Transport-Security decoration.
"""

from scheme_redirect.shared.security.headers import HSTS_HEADER, apply_hsts
from scheme_redirect.shared.security.scheme_redirect import SchemeRedirectMiddleware

__all__ = ["HSTS_HEADER", "SchemeRedirectMiddleware", "apply_hsts"]
