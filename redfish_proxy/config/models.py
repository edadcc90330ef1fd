"""
redfish_proxy Config - Configuration models.

Pydantic models for type-safe configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from redfish_proxy.config.constants import (
    DEFAULT_MEMBERS_FIELD,
    DEFAULT_REFERENCE_FIELD,
    HTTP_DEFAULT_TIMEOUT,
    HTTP_MAX_TIMEOUT,
)


class ProxyConfig(BaseModel):
    """Wire-format settings shared by every resource of one tree."""

    model_config = {"frozen": True}

    reference_field: str = Field(
        default=DEFAULT_REFERENCE_FIELD, min_length=1, description="Key marking a link to another document"
    )
    members_field: str = Field(
        default=DEFAULT_MEMBERS_FIELD, min_length=1, description="Key holding a linked collection"
    )


class ConnectorConfig(BaseModel):
    """HTTP connector settings."""

    base_url: str = Field(default="https://localhost", description="Service root URL")
    username: str | None = Field(default=None, description="Basic auth username")
    password: str | None = Field(default=None, description="Basic auth password")
    auth_token: str | None = Field(default=None, description="Session token sent as X-Auth-Token")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")
    timeout: int = Field(
        default=HTTP_DEFAULT_TIMEOUT, ge=1, le=HTTP_MAX_TIMEOUT, description="Request timeout in seconds"
    )
    headers: dict[str, str] = Field(default_factory=dict, description="Extra request headers")


class Config(BaseModel):
    """Complete redfish_proxy configuration."""

    proxy: ProxyConfig = Field(default_factory=ProxyConfig)
    connector: ConnectorConfig = Field(default_factory=ConnectorConfig)
