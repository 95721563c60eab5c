"""
Pydantic schemas for API responses.

These schemas define the API contract.
No business logic belongs here.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    redirect_enabled: bool
    hsts_enabled: bool


class RedirectPolicyResponse(BaseModel):
    """Active HTTPS redirect policy.

    Attributes:
        protocols: Address families redirected to HTTPS.
        port: HTTPS port override, null for the default port.
        status_code: Status code of redirect responses.
        hsts: Rendered Strict-Transport-Security value, null when disabled.
    """

    protocols: str = Field(..., description="ipv4, ipv6, both or none")
    port: int | None = None
    status_code: int
    hsts: str | None = None
