"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, including the redirect and
HSTS policy the middleware is built from.
"""

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from scheme_redirect.domain.redirect.entities import (
    DEFAULT_HSTS_MAX_AGE,
    DEFAULT_REDIRECT_STATUS,
    HstsConfig,
    ProtocolSelector,
    RedirectConfig,
)


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        redirect_protocols: Address families redirected to HTTPS
            (ipv4, ipv6, both, none).
        redirect_port: HTTPS port to redirect to, unset for 443.
        redirect_status_code: Status of redirect responses (301/302/307/308).
        redirect_default_host: Host used when a request has no Host header.
        trust_forwarded_headers: Honor X-Forwarded-Proto / X-Forwarded-Host.
        hsts_enabled: Attach Strict-Transport-Security to responses.
        hsts_max_age: HSTS max-age in seconds.
        hsts_include_subdomains: Add the includeSubDomains directive.
        hsts_preload: Add the preload directive.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "SchemeRedirect"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    redirect_protocols: ProtocolSelector = ProtocolSelector.NONE
    redirect_port: Optional[int] = None
    redirect_status_code: int = DEFAULT_REDIRECT_STATUS
    redirect_default_host: Optional[str] = None
    trust_forwarded_headers: bool = False

    hsts_enabled: bool = False
    hsts_max_age: int = DEFAULT_HSTS_MAX_AGE
    hsts_include_subdomains: bool = False
    hsts_preload: bool = False

    @field_validator("redirect_protocols", mode="before")
    @classmethod
    def _parse_protocols(cls, value: object) -> ProtocolSelector:
        return ProtocolSelector.parse(value)

    def to_redirect_config(self) -> RedirectConfig:
        """Build the immutable redirect policy from these settings.

        Raises:
            RedirectConfigError: If a value is out of range.
        """
        hsts = None
        if self.hsts_enabled:
            hsts = HstsConfig(
                max_age=self.hsts_max_age,
                include_subdomains=self.hsts_include_subdomains,
                preload=self.hsts_preload,
            )
        return RedirectConfig(
            protocols=self.redirect_protocols,
            port=self.redirect_port,
            hsts=hsts,
            status_code=self.redirect_status_code,
            default_host=self.redirect_default_host,
            trust_forwarded_headers=self.trust_forwarded_headers,
        )


settings = Settings()
