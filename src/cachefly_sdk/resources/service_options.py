"""
Service options resource.

Covers reading and updating a service's options, the options metadata
schema, and the per-service legacy API key.
"""

import logging
from typing import Any, Dict, List, Mapping
from urllib.parse import quote

from ..exceptions import OptionsValidationError
from ..models import (
    OPTION_NOT_AVAILABLE,
    LegacyAPIKey,
    OptionsMetadata,
    OptionValue,
    ValidationErrorEntry,
)
from .base import BaseResource

logger = logging.getLogger(__name__)


def validate_options(
    metadata: OptionsMetadata,
    options: Mapping[str, OptionValue],
) -> List[ValidationErrorEntry]:
    """
    Check supplied option names against a service's options metadata.

    Returns one entry per option name that the metadata does not declare,
    in the iteration order of ``options``. An empty list means every option
    may be sent.
    """
    available = metadata.names()
    return [
        ValidationErrorEntry(
            field=name,
            code=OPTION_NOT_AVAILABLE,
            message=f"Option '{name}' is not available for this service",
        )
        for name in options
        if name not in available
    ]


class ServiceOptionsResource(BaseResource):
    """Options, options metadata and legacy API key of a service."""

    @staticmethod
    def _path(service_id: str, suffix: str = "") -> str:
        return f"/services/{quote(service_id, safe='')}/options{suffix}"

    # Options

    def get_options(self, service_id: str) -> Dict[str, Any]:
        """Get the current option values of a service."""
        service_id = self._require_id(service_id)
        return self._request("GET", self._path(service_id))

    async def aget_options(self, service_id: str) -> Dict[str, Any]:
        """Get the current option values of a service (async)."""
        service_id = self._require_id(service_id)
        return await self._arequest("GET", self._path(service_id))

    def get_options_metadata(self, service_id: str) -> OptionsMetadata:
        """Get the options a service supports."""
        service_id = self._require_id(service_id)
        return self._request_model(OptionsMetadata, "GET", self._path(service_id, "/metadata"))

    async def aget_options_metadata(self, service_id: str) -> OptionsMetadata:
        """Get the options a service supports (async)."""
        service_id = self._require_id(service_id)
        return await self._arequest_model(OptionsMetadata, "GET", self._path(service_id, "/metadata"))

    def update_options(
        self,
        service_id: str,
        options: Mapping[str, OptionValue],
    ) -> Dict[str, Any]:
        """
        Update a service's options after validating them.

        The options metadata is fetched first and every supplied name is
        checked against it. If any name is unknown, nothing is sent.

        Args:
            service_id: Service identifier
            options: Option name to value mapping; sent as a whole

        Returns:
            The service's options as reported after the update

        Raises:
            MissingIdentifierError: if ``service_id`` is empty
            OptionsValidationError: if any option is not available
        """
        service_id = self._require_id(service_id)
        metadata = self.get_options_metadata(service_id)
        self._raise_for_invalid(service_id, metadata, options)
        return self._request("PUT", self._path(service_id), json=dict(options))

    async def aupdate_options(
        self,
        service_id: str,
        options: Mapping[str, OptionValue],
    ) -> Dict[str, Any]:
        """Update a service's options after validating them (async)."""
        service_id = self._require_id(service_id)
        metadata = await self.aget_options_metadata(service_id)
        self._raise_for_invalid(service_id, metadata, options)
        return await self._arequest("PUT", self._path(service_id), json=dict(options))

    @staticmethod
    def _raise_for_invalid(
        service_id: str,
        metadata: OptionsMetadata,
        options: Mapping[str, OptionValue],
    ) -> None:
        errors = validate_options(metadata, options)
        if errors:
            logger.warning(
                f"Rejected options for service {service_id}: "
                f"{', '.join(error.field for error in errors)}"
            )
            raise OptionsValidationError(errors)

    # Legacy API key

    def get_legacy_api_key(self, service_id: str) -> LegacyAPIKey:
        """Get the legacy API key of a service."""
        service_id = self._require_id(service_id)
        return self._request_model(LegacyAPIKey, "GET", self._path(service_id, "/apikey"))

    async def aget_legacy_api_key(self, service_id: str) -> LegacyAPIKey:
        """Get the legacy API key of a service (async)."""
        service_id = self._require_id(service_id)
        return await self._arequest_model(LegacyAPIKey, "GET", self._path(service_id, "/apikey"))

    def regenerate_legacy_api_key(self, service_id: str) -> LegacyAPIKey:
        """Generate a new legacy API key, replacing the current one."""
        service_id = self._require_id(service_id)
        return self._request_model(LegacyAPIKey, "POST", self._path(service_id, "/apikey"))

    async def aregenerate_legacy_api_key(self, service_id: str) -> LegacyAPIKey:
        """Generate a new legacy API key, replacing the current one (async)."""
        service_id = self._require_id(service_id)
        return await self._arequest_model(LegacyAPIKey, "POST", self._path(service_id, "/apikey"))

    def delete_legacy_api_key(self, service_id: str) -> None:
        """Revoke the legacy API key of a service."""
        service_id = self._require_id(service_id)
        self._request("DELETE", self._path(service_id, "/apikey"))

    async def adelete_legacy_api_key(self, service_id: str) -> None:
        """Revoke the legacy API key of a service (async)."""
        service_id = self._require_id(service_id)
        await self._arequest("DELETE", self._path(service_id, "/apikey"))
