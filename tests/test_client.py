"""
Tests for client transport, configuration and authentication
"""

import logging
import ssl

import certifi
import httpx
import pytest

from cachefly_sdk import (
    AuthenticationError,
    AuthorizationError,
    BasicAuth,
    CacheFlyClient,
    CacheFlyError,
    CacheFlySettings,
    ClientConfig,
    ConfigurationError,
    ConnectionError,
    DecodeError,
    NotFoundError,
    RateLimitError,
    TokenAuth,
    ValidationError,
)

from conftest import BASE_URL


def make_client(handler, **config):
    transport = httpx.MockTransport(handler)
    return CacheFlyClient(
        "test-token",
        base_url=BASE_URL,
        config=ClientConfig(**config),
        transport=transport,
        async_transport=transport,
    )


class TestRequests:
    """Request construction"""

    def test_default_headers(self, client, api):
        api.add("GET", "/services/svc-1/options", json={})

        client.service_options.get_options("svc-1")

        request = api.requests[0]
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == "cachefly-python-sdk"
        assert str(request.url) == f"{BASE_URL}/services/svc-1/options"

    def test_custom_auth_method(self, api):
        api.add("GET", "/accounts/me", json={"_id": "acc-1"})
        transport = httpx.MockTransport(api)

        with CacheFlyClient(BasicAuth("user", "pass"), base_url=BASE_URL, transport=transport) as client:
            client.accounts.get_current()

        assert api.requests[0].headers["Authorization"] == "Basic dXNlcjpwYXNz"

    def test_trailing_slash_in_base_url(self, api):
        api.add("GET", "/accounts/me", json={"_id": "acc-1"})
        transport = httpx.MockTransport(api)

        with CacheFlyClient("t", base_url=BASE_URL + "/", transport=transport) as client:
            client.accounts.get_current()

        assert api.calls == [("GET", "/accounts/me")]


class TestResponseHandling:
    """Status code mapping and decoding"""

    @pytest.mark.parametrize(
        "status, error",
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, AuthorizationError),
            (404, NotFoundError),
            (422, ValidationError),
            (429, RateLimitError),
        ],
    )
    def test_status_codes(self, client, api, status, error):
        api.add("GET", "/services/svc-1/options", json={"message": "nope"}, status_code=status)

        with pytest.raises(error) as exc_info:
            client.service_options.get_options("svc-1")

        assert exc_info.value.message == "nope"
        assert exc_info.value.status_code == status

    def test_server_error(self, client, api):
        api.add("GET", "/services/svc-1/options", content=b"upstream down", status_code=502)

        with pytest.raises(CacheFlyError, match="HTTP 502: upstream down"):
            client.service_options.get_options("svc-1")

    def test_error_field_used_as_message(self, client, api):
        api.add("GET", "/services/svc-1/options", json={"error": "bad token"}, status_code=401)

        with pytest.raises(AuthenticationError, match="bad token"):
            client.service_options.get_options("svc-1")

    def test_invalid_json_body(self, client, api):
        api.add("GET", "/services/svc-1/options", content=b"<html>", status_code=200)

        with pytest.raises(DecodeError):
            client.service_options.get_options("svc-1")

    def test_empty_success_body_decodes_to_none(self, client, api):
        api.add("DELETE", "/services/svc-1/options/apikey", status_code=200)

        assert client.service_options.delete_legacy_api_key("svc-1") is None


class TestRetries:
    """Connection failures and retry policy"""

    def test_connection_error_not_retried_by_default(self):
        calls = []

        def handler(request):
            calls.append(request)
            raise httpx.ConnectError("refused", request=request)

        with make_client(handler) as client:
            with pytest.raises(ConnectionError):
                client.service_options.get_options("svc-1")

        assert len(calls) == 1

    def test_connection_error_retried_when_configured(self):
        calls = []

        def handler(request):
            calls.append(request)
            if len(calls) == 1:
                raise httpx.ConnectError("refused", request=request)
            return httpx.Response(200, json={"cors": True})

        with make_client(handler, max_retries=2, retry_backoff_factor=0) as client:
            assert client.service_options.get_options("svc-1") == {"cors": True}

        assert len(calls) == 2

    def test_http_errors_are_not_retried(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500, json={"message": "boom"})

        with make_client(handler, max_retries=3, retry_backoff_factor=0) as client:
            with pytest.raises(CacheFlyError):
                client.service_options.get_options("svc-1")

        assert len(calls) == 1

    @pytest.mark.asyncio
    async def test_async_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(ConnectionError):
                await client.service_options.aget_options("svc-1")
        client.close()


class TestLogging:
    """Request and response logging"""

    def test_requests_logged_when_enabled(self, api, caplog):
        api.add("GET", "/accounts/me", json={"_id": "acc-1"})

        with make_client(api, log_requests=True, log_responses=True) as client:
            with caplog.at_level(logging.DEBUG, logger="cachefly_sdk"):
                client.accounts.get_current()

        assert f"GET {BASE_URL}/accounts/me" in caplog.text
        assert "-> 200" in caplog.text

    def test_requests_not_logged_by_default(self, client, api, caplog):
        api.add("GET", "/accounts/me", json={"_id": "acc-1"})

        with caplog.at_level(logging.DEBUG, logger="cachefly_sdk"):
            client.accounts.get_current()

        assert "/accounts/me" not in caplog.text


class TestConfiguration:
    """ClientConfig and environment settings"""

    def test_config_rejects_unknown_fields(self):
        with pytest.raises(Exception):
            ClientConfig(enable_caching=True)

    def test_verify_uses_ca_bundle(self):
        assert isinstance(ClientConfig(ca_bundle=certifi.where()).verify, ssl.SSLContext)
        assert ClientConfig(verify_ssl=False, ca_bundle="/tmp/ca.pem").verify is False
        assert ClientConfig().verify is True

        with CacheFlyClient("t", config=ClientConfig(ca_bundle=certifi.where())) as client:
            assert client.config.ca_bundle == certifi.where()

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("CACHEFLY_API_TOKEN", "env-token")
        monkeypatch.setenv("CACHEFLY_BASE_URL", "https://example.test/api/2.5")
        monkeypatch.setenv("CACHEFLY_TIMEOUT", "12.5")

        settings = CacheFlySettings(_env_file=None)

        assert settings.api_token == "env-token"
        assert settings.base_url == "https://example.test/api/2.5"
        assert settings.timeout == 12.5

    def test_settings_from_env_file(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CACHEFLY_API_TOKEN", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("CACHEFLY_API_TOKEN=file-token\n")

        settings = CacheFlySettings(_env_file=env_file)

        assert settings.api_token == "file-token"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("CACHEFLY_API_TOKEN", "env-token")

        with CacheFlyClient.from_env(CacheFlySettings(_env_file=None)) as client:
            assert isinstance(client.auth, TokenAuth)
            assert client.auth.token == "env-token"
            assert client.base_url == "https://api.cachefly.com/api/2.5"

    def test_from_env_requires_token(self, monkeypatch):
        monkeypatch.delenv("CACHEFLY_API_TOKEN", raising=False)

        with pytest.raises(ConfigurationError, match="CACHEFLY_API_TOKEN"):
            CacheFlyClient.from_env(CacheFlySettings(_env_file=None))


class TestAuth:
    """Authentication methods"""

    def test_token_auth_headers(self):
        assert TokenAuth("abc").get_headers() == {"Authorization": "Bearer abc"}

    def test_token_auth_requires_token(self):
        with pytest.raises(ValueError):
            TokenAuth("")

    def test_token_not_in_repr(self):
        assert "abc" not in repr(TokenAuth("abc"))

    def test_basic_auth_headers(self):
        assert BasicAuth("user", "pass").get_headers() == {"Authorization": "Basic dXNlcjpwYXNz"}
