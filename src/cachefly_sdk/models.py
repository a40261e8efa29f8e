"""
Data models for CacheFly SDK.
"""

from datetime import datetime
from typing import Dict, List, Optional, Set, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


OptionValue = Union[bool, int, float, str]
"""Value of a single service option as sent by the client."""

ServiceOptions = Dict[str, OptionValue]
"""Mapping of option name to value, as supplied to an options update."""

OPTION_NOT_AVAILABLE = "OPTION_NOT_AVAILABLE"


class OptionProperty(BaseModel):
    """Underlying property backing a service option."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., description="Property name")
    type: str = Field(..., description="Property value type, e.g. boolean")


class OptionMetadataEntry(BaseModel):
    """Declared schema of one option a service supports."""
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(
        "",
        validation_alias=AliasChoices("_id", "id"),
        description="Opaque option identifier",
    )
    name: str = Field(..., description="Option name used as the key in options maps")
    title: Optional[str] = Field(None, description="Display title")
    type: str = Field("", description="Declared option type tag")
    read_only: bool = Field(False, alias="readOnly", description="Whether the option is read-only")
    property: Optional[OptionProperty] = Field(None, description="Backing property")


class OptionsMetadataMeta(BaseModel):
    """Metadata collection counters."""
    model_config = ConfigDict(extra="ignore")

    count: int = Field(0, description="Number of options reported")


class OptionsMetadata(BaseModel):
    """Options a service supports at the time of the request."""
    model_config = ConfigDict(extra="ignore")

    meta: OptionsMetadataMeta = Field(default_factory=OptionsMetadataMeta)
    data: List[OptionMetadataEntry] = Field(default_factory=list)

    def names(self) -> Set[str]:
        """Return the set of valid option names."""
        return {entry.name for entry in self.data}


class ValidationErrorEntry(BaseModel):
    """A single rejected field in a client-side validation failure."""
    model_config = ConfigDict(frozen=True)

    field: str = Field(..., description="Name of the rejected field")
    code: str = Field(..., description="Stable error code")
    message: str = Field(..., description="Human readable message")


class LegacyAPIKey(BaseModel):
    """Per-service legacy API key."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    api_key: str = Field(..., alias="apiKey", description="Legacy API key value")


class Account(BaseModel):
    """CacheFly account."""
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(
        ...,
        validation_alias=AliasChoices("_id", "id"),
        description="Account identifier",
    )
    company_name: Optional[str] = Field(None, alias="companyName", description="Company name")
    website: Optional[str] = Field(None, description="Company website")
    email: Optional[str] = Field(None, description="Contact email")
    phone: Optional[str] = Field(None, description="Contact phone")
    status: Optional[str] = Field(None, description="Account status")
    created_at: Optional[datetime] = Field(None, alias="createdAt", description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt", description="Last update timestamp")


class ListMeta(BaseModel):
    """Pagination counters for list responses."""
    model_config = ConfigDict(extra="ignore")

    count: int = Field(0, description="Total number of items")
    limit: Optional[int] = Field(None, description="Page size")
    offset: Optional[int] = Field(None, description="Page offset")


class AccountList(BaseModel):
    """Page of accounts."""
    model_config = ConfigDict(extra="ignore")

    meta: ListMeta = Field(default_factory=ListMeta)
    data: List[Account] = Field(default_factory=list)
