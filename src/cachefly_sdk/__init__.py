"""
CacheFly Python SDK

Python client for the CacheFly CDN API.
Provides account access, service options management with metadata
validation, and legacy API key handling.
"""

from .client import CacheFlyClient
from .auth import AuthMethod, TokenAuth, BasicAuth
from .exceptions import (
    CacheFlyError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
    RateLimitError,
    ConnectionError,
    DecodeError,
    ConfigurationError,
    MissingIdentifierError,
    OptionsValidationError,
)
from .models import (
    Account,
    AccountList,
    LegacyAPIKey,
    OptionMetadataEntry,
    OptionsMetadata,
    ServiceOptions,
    ValidationErrorEntry,
)
from .config import CacheFlySettings, ClientConfig
from .resources import validate_options

__version__ = "1.0.0"

__all__ = [
    "CacheFlyClient",
    "AuthMethod",
    "TokenAuth",
    "BasicAuth",
    "CacheFlyError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ValidationError",
    "RateLimitError",
    "ConnectionError",
    "DecodeError",
    "ConfigurationError",
    "MissingIdentifierError",
    "OptionsValidationError",
    "Account",
    "AccountList",
    "LegacyAPIKey",
    "OptionMetadataEntry",
    "OptionsMetadata",
    "ServiceOptions",
    "ValidationErrorEntry",
    "CacheFlySettings",
    "ClientConfig",
    "validate_options",
]
