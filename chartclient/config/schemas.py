"""
Configuration Schemas for chartclient.

Security:
    Tokens use SecretStr to prevent accidental logging of credentials.
    Access the value with `.get_secret_value()`.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, SecretStr


class ClientSettings(BaseModel):
    """
    Application settings model.

    Used for type-safe settings access. Populated from CHARTCLIENT_*
    environment variables by `chartclient.config.get_settings`.
    """

    # Superset connection
    base_url: str = Field("http://localhost:8088", description="Superset base URL")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")

    # Authentication (SecretStr prevents accidental logging)
    access_token: SecretStr | None = Field(None, description="Bearer token for the API")
    csrf_token: SecretStr | None = Field(None, description="CSRF token for POST requests")

    # Observability
    log_requests: bool = False
    log_responses: bool = False
