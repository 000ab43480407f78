"""Pydantic schemas for JSON:API."""

from .resource import (
    JSONAPIDocument,
    JSONAPIError,
    JSONAPIErrorDocument,
    JSONAPIRelationship,
    JSONAPIResource,
    JSONAPIResourceIdentifier,
)

__all__ = [
    "JSONAPIDocument",
    "JSONAPIError",
    "JSONAPIErrorDocument",
    "JSONAPIRelationship",
    "JSONAPIResource",
    "JSONAPIResourceIdentifier",
]
