"""Pydantic DTOs for PagerDuty extensions."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

from .base import APIObject, APIListObject

class Extension(APIObject):
    """
    A single PagerDuty extension.

    Extensions attach third-party integrations (webhooks, chat tools, ...)
    to services. ``config`` depends on the extension schema and is kept as
    an opaque JSON value.
    """

    name: Optional[str] = Field(None, description="Display name of the extension")
    endpoint_url: Optional[str] = Field(None, description="URL the extension calls")
    extension_objects: List[APIObject] = Field(
        default_factory=list,
        description="Objects the extension is attached to",
    )
    extension_schema: Optional[APIObject] = Field(
        None,
        description="Reference to the extension schema (vendor)",
    )
    config: JsonValue = Field(None, description="Schema specific configuration")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("extension_objects", mode="before")
    @classmethod
    def _null_objects_as_empty(cls, value):
        return [] if value is None else value

    def to_payload(self) -> dict:
        """Serialize the fields that were set, using API field names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

class ExtensionEnvelope(BaseModel):
    """Singular response wrapper: ``{"extension": {...}}``."""

    extension: Optional[Extension] = None

class ListExtensionOptions(APIListObject):
    """Query parameters for listing extensions."""

    extension_object_id: Optional[str] = Field(None, description="Filter by attached object")
    extension_schema_id: Optional[str] = Field(None, description="Filter by extension schema")
    query: Optional[str] = Field(None, description="Filter by name")

class ListExtensionResponse(APIListObject):
    """A page of extensions, in the order returned by the API."""

    extensions: List[Extension] = Field(default_factory=list)

    @field_validator("extensions", mode="before")
    @classmethod
    def _null_extensions_as_empty(cls, value):
        return [] if value is None else value
