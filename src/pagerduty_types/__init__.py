"""PagerDuty Types - Pydantic DTOs for the PagerDuty REST API."""

__version__ = "0.1.0"

from .base import (
    APIObject,
    APIListObject,
)
from .extensions import (
    Extension,
    ExtensionEnvelope,
    ListExtensionOptions,
    ListExtensionResponse,
)

__all__ = [
    "APIObject",
    "APIListObject",
    "Extension",
    "ExtensionEnvelope",
    "ListExtensionOptions",
    "ListExtensionResponse",
]
