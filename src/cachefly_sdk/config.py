"""
Configuration classes for CacheFly SDK.
"""

import ssl
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.cachefly.com/api/2.5"


class ClientConfig(BaseModel):
    """Configuration for CacheFly client."""
    model_config = ConfigDict(extra="forbid")

    timeout: float = Field(30.0, description="Request timeout in seconds")
    max_connections: int = Field(10, description="Maximum number of connections")
    max_retries: int = Field(0, ge=0, description="Retries after a connection failure")
    retry_backoff_factor: float = Field(1.0, description="Retry backoff factor")
    verify_ssl: bool = Field(True, description="Whether to verify SSL certificates")
    ca_bundle: Optional[str] = Field(None, description="Path to CA bundle file")
    user_agent: str = Field("cachefly-python-sdk", description="User-Agent header value")

    # Logging configuration
    log_requests: bool = Field(False, description="Whether to log HTTP requests")
    log_responses: bool = Field(False, description="Whether to log HTTP responses")

    @property
    def verify(self) -> Union[bool, ssl.SSLContext]:
        """Value for httpx's ``verify`` argument."""
        if self.verify_ssl and self.ca_bundle:
            return ssl.create_default_context(cafile=self.ca_bundle)
        return self.verify_ssl


class CacheFlySettings(BaseSettings):
    """
    Settings loaded from the environment and an optional ``.env`` file.

    Environment variables use the ``CACHEFLY_`` prefix, for example
    ``CACHEFLY_API_TOKEN`` and ``CACHEFLY_BASE_URL``.
    """

    api_token: Optional[str] = Field(None, description="CacheFly API token")
    base_url: str = Field(DEFAULT_BASE_URL, description="API base URL")
    timeout: float = Field(30.0, description="Request timeout in seconds")

    model_config = SettingsConfigDict(
        env_prefix="CACHEFLY_", env_file=".env", extra="ignore"
    )
