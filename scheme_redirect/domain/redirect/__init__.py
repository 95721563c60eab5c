"""
Redirect bounded context.

HTTPS redirect policy, HSTS policy, and the pure redirect decision.
"""
