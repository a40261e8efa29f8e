"""
CacheFly Client

Main client class for interacting with the CacheFly API.
"""

import logging
from typing import Any, Dict, Optional, Union

import httpx
from tenacity import (
    AsyncRetrying,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .auth import AuthMethod, TokenAuth
from .config import DEFAULT_BASE_URL, CacheFlySettings, ClientConfig
from .exceptions import (
    CacheFlyError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    DecodeError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    ConnectionError as CacheFlyConnectionError,
)
from .resources import AccountsResource, ServiceOptionsResource

logger = logging.getLogger(__name__)


class CacheFlyClient:
    """
    Main client for interacting with the CacheFly API.

    Every operation is available in a blocking form and an ``a``-prefixed
    async form. Resources are exposed as attributes::

        with CacheFlyClient("token") as client:
            client.service_options.get_options("srv_123")
    """

    def __init__(
        self,
        auth: Union[AuthMethod, str],
        base_url: str = DEFAULT_BASE_URL,
        config: Optional[ClientConfig] = None,
        *,
        transport: Optional[httpx.BaseTransport] = None,
        async_transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the CacheFly client.

        Args:
            auth: Authentication method, or a bare API token
            base_url: Base URL of the CacheFly API, including the version prefix
            config: Optional client configuration
            transport: Optional httpx transport for the sync client
            async_transport: Optional httpx transport for the async client
        """
        self.base_url = base_url.rstrip("/")
        self.auth = TokenAuth(auth) if isinstance(auth, str) else auth
        self.config = config or ClientConfig()

        headers = {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "User-Agent": self.config.user_agent,
        }
        limits = httpx.Limits(
            max_keepalive_connections=self.config.max_connections,
            max_connections=self.config.max_connections,
        )

        self._client = httpx.Client(
            base_url=self.base_url,
            headers=headers,
            timeout=self.config.timeout,
            limits=limits,
            verify=self.config.verify,
            transport=transport,
        )
        self._async_client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=self.config.timeout,
            limits=limits,
            verify=self.config.verify,
            transport=async_transport,
        )

        self.accounts = AccountsResource(self)
        self.service_options = ServiceOptionsResource(self)

    @classmethod
    def from_env(
        cls,
        settings: Optional[CacheFlySettings] = None,
        config: Optional[ClientConfig] = None,
        **kwargs: Any,
    ) -> "CacheFlyClient":
        """
        Build a client from ``CACHEFLY_*`` environment variables or ``.env``.

        Raises:
            ConfigurationError: if no API token is configured
        """
        settings = settings or CacheFlySettings()
        if not settings.api_token:
            raise ConfigurationError("CACHEFLY_API_TOKEN environment variable is required")

        config = config or ClientConfig(timeout=settings.timeout)
        return cls(
            TokenAuth(settings.api_token),
            base_url=settings.base_url,
            config=config,
            **kwargs,
        )

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()

    def close(self):
        """Close the HTTP client."""
        self._client.close()

    async def aclose(self):
        """Close the async HTTP client."""
        await self._async_client.aclose()

    def _retry_policy(self) -> Dict[str, Any]:
        # Only connection failures are retried; HTTP errors surface at once.
        return {
            "stop": stop_after_attempt(self.config.max_retries + 1),
            "wait": wait_exponential(multiplier=self.config.retry_backoff_factor, max=10),
            "retry": retry_if_exception_type(CacheFlyConnectionError),
            "reraise": True,
        }

    def _make_request(
        self,
        method: str,
        endpoint: str,
        **kwargs,
    ) -> httpx.Response:
        """Make a synchronous HTTP request."""
        for attempt in Retrying(**self._retry_policy()):
            with attempt:
                response = self._send(method, endpoint, **kwargs)
        return response

    async def _make_async_request(
        self,
        method: str,
        endpoint: str,
        **kwargs,
    ) -> httpx.Response:
        """Make an asynchronous HTTP request."""
        async for attempt in AsyncRetrying(**self._retry_policy()):
            with attempt:
                response = await self._asend(method, endpoint, **kwargs)
        return response

    def _send(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        headers.update(self.auth.get_headers())
        self._log_request(method, endpoint)

        try:
            response = self._client.request(
                method=method,
                url=endpoint,
                headers=headers,
                **kwargs,
            )
        except httpx.RequestError as e:
            logger.error(f"Request failed: {e}")
            raise CacheFlyConnectionError(f"Failed to connect to CacheFly API: {e}")

        self._log_response(response)
        self._handle_response(response)
        return response

    async def _asend(self, method: str, endpoint: str, **kwargs) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        headers.update(self.auth.get_headers())
        self._log_request(method, endpoint)

        try:
            response = await self._async_client.request(
                method=method,
                url=endpoint,
                headers=headers,
                **kwargs,
            )
        except httpx.RequestError as e:
            logger.error(f"Async request failed: {e}")
            raise CacheFlyConnectionError(f"Failed to connect to CacheFly API: {e}")

        self._log_response(response)
        self._handle_response(response)
        return response

    def _log_request(self, method: str, endpoint: str) -> None:
        if self.config.log_requests:
            logger.debug(f"{method} {self.base_url}{endpoint}")

    def _log_response(self, response: httpx.Response) -> None:
        if self.config.log_responses:
            logger.debug(
                f"{response.request.method} {response.request.url} -> "
                f"{response.status_code} ({len(response.content)} bytes)"
            )

    def _handle_response(self, response: httpx.Response) -> None:
        """Handle HTTP response and raise appropriate exceptions."""
        if response.is_success:
            return

        try:
            error_data = response.json()
        except ValueError:
            error_data = {"message": response.text}

        if isinstance(error_data, dict):
            message = error_data.get("message") or error_data.get("error") or "Unknown error"
        else:
            message = str(error_data)
        status = response.status_code

        if status == 401:
            raise AuthenticationError(message, status_code=status)
        elif status == 403:
            raise AuthorizationError(message, status_code=status)
        elif status == 404:
            raise NotFoundError(message, status_code=status)
        elif status in (400, 422):
            raise ValidationError(message, status_code=status)
        elif status == 429:
            raise RateLimitError(message, status_code=status)
        else:
            raise CacheFlyError(f"HTTP {status}: {message}", status_code=status)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        """Decode a successful response body; empty bodies decode to None."""
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise DecodeError(
                f"Invalid JSON in response from {response.request.url}: {e}",
                status_code=response.status_code,
            )
