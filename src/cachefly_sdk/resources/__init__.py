"""
Resource wrappers for the CacheFly API.
"""

from .accounts import AccountsResource
from .service_options import ServiceOptionsResource, validate_options

__all__ = [
    "AccountsResource",
    "ServiceOptionsResource",
    "validate_options",
]
