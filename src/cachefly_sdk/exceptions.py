"""
Exception classes for CacheFly SDK.
"""

from typing import List, Optional

from .models import ValidationErrorEntry


class CacheFlyError(Exception):
    """
    Root of every error raised by the SDK.

    ``status_code`` is set when the error came from an HTTP response.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code


class AuthenticationError(CacheFlyError):
    """The API token was missing, malformed or rejected (HTTP 401)."""


class AuthorizationError(CacheFlyError):
    """The token may not act on this account or service (HTTP 403)."""


class NotFoundError(CacheFlyError):
    """Unknown account, service or path (HTTP 404)."""


class ValidationError(CacheFlyError):
    """The request body was refused, by the API (HTTP 400/422) or before sending."""


class RateLimitError(CacheFlyError):
    """CacheFly throttled the token (HTTP 429)."""


class ConnectionError(CacheFlyError):
    """The request never got an HTTP response (DNS, TLS, timeout, refused)."""


class DecodeError(CacheFlyError):
    """A 2xx body was not JSON, or did not match the expected model."""


class ConfigurationError(CacheFlyError):
    """Client settings are incomplete, e.g. no CACHEFLY_API_TOKEN."""


class MissingIdentifierError(CacheFlyError, ValueError):
    """A required resource identifier was empty."""

    def __init__(self, message: str = "id is required"):
        super().__init__(message, error_code="ID_REQUIRED")


class OptionsValidationError(ValidationError):
    """
    One or more supplied service options are not available for the service.

    Raised before any update request is sent. ``errors`` holds one entry per
    rejected option, in the order the options were supplied.
    """

    def __init__(self, errors: List[ValidationErrorEntry]):
        self.errors = list(errors)
        fields = ", ".join(error.field for error in self.errors)
        super().__init__(
            f"Service options validation failed: {fields}",
            error_code="OPTIONS_VALIDATION_FAILED",
        )

    @property
    def fields(self) -> List[str]:
        """Names of the rejected options."""
        return [error.field for error in self.errors]
