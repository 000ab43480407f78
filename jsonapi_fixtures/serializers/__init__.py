"""Serializers mapping annotated records to JSON:API resources."""

from .base import FixtureSerializer
from .descriptors import FieldDescriptor, ResourceDescriptor, describe, jsonapi_field

__all__ = [
    "FieldDescriptor",
    "FixtureSerializer",
    "ResourceDescriptor",
    "describe",
    "jsonapi_field",
]
