"""Map annotated fixture records into JSON:API resource objects."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from enum import Enum
from typing import Any

from jsonapi_fixtures.core.exceptions import FixtureContractError, RecordTypeError
from jsonapi_fixtures.core.tags import ATTR, PRIMARY, RELATION

from .descriptors import ResourceDescriptor, describe_record

logger = logging.getLogger(__name__)


class FixtureSerializer:
    """Serialize annotated records into JSON:API resource objects.

    Field roles come from each record type's annotations (see
    :mod:`jsonapi_fixtures.serializers.descriptors`). Single resources carry
    relationships; collections carry identity and attributes only.
    """

    def to_resource(self, instance: Any) -> dict[str, Any]:
        """Serialize one record into a resource object with relationships."""
        descriptor = self.get_descriptor(instance)
        resource = self._identity_and_attributes(instance, descriptor)
        relationships = self.get_relationships(instance, descriptor)
        if relationships:
            resource["relationships"] = relationships
        return resource

    def to_many(self, instances: Any) -> list[dict[str, Any]]:
        """Serialize a sequence of records, without relationships."""
        if not self.is_sequence(instances):
            raise FixtureContractError(
                f"expected a sequence of records, got {type(instances).__qualname__}"
            )
        resources = []
        for instance in instances:
            if instance is None:
                resources.append({"type": "", "id": "", "attributes": {}})
                continue
            descriptor = self.get_descriptor(instance)
            resources.append(self._identity_and_attributes(instance, descriptor))
        logger.debug("Serialized %d resource(s) for a collection", len(resources))
        return resources

    def get_descriptor(self, instance: Any) -> ResourceDescriptor:
        """Return the mapping descriptor of a record, rejecting unannotated values."""
        descriptor = describe_record(instance)
        if descriptor is None:
            raise RecordTypeError(instance)
        return descriptor

    def get_identity(
        self, instance: Any, descriptor: ResourceDescriptor
    ) -> tuple[str, str]:
        """Return ``(type, id)`` from the primary field; the last one wins."""
        type_name = ""
        resource_id = ""
        for field in descriptor:
            if field.role != PRIMARY:
                continue
            if field.name is not None:
                type_name = field.name
            resource_id = self.format_id(field.value(instance))
        return type_name, resource_id

    def get_attributes(
        self, instance: Any, descriptor: ResourceDescriptor
    ) -> dict[str, Any]:
        """Return attribute values keyed by wire name, skipping unset ones."""
        attributes: dict[str, Any] = {}
        for field in descriptor:
            if field.role != ATTR or field.name is None:
                continue
            value = field.value(instance)
            if value is None:
                continue
            attributes[field.name] = value
        return attributes

    def get_relationships(
        self, instance: Any, descriptor: ResourceDescriptor
    ) -> dict[str, Any]:
        """Return to-one relationship objects for related records that have an identity."""
        relationships: dict[str, Any] = {}
        for field in descriptor:
            if field.role != RELATION or field.name is None:
                continue
            related = field.value(instance)
            if related is None:
                continue
            identifier = self.get_identifier(related)
            if identifier is None:
                logger.debug(
                    "Skipping relationship %r: related value has no primary field",
                    field.name,
                )
                continue
            relationships[field.name] = {"data": identifier}
        return relationships

    def get_identifier(self, related: Any) -> dict[str, str] | None:
        """Return ``{type, id}`` from the first named primary field of a related record."""
        descriptor = describe_record(related)
        if descriptor is None:
            return None
        for field in descriptor:
            if field.role == PRIMARY and field.name is not None:
                return {"type": field.name, "id": self.format_id(field.value(related))}
        return None

    def format_id(self, value: Any) -> str:
        """Return the resource id as a string."""
        if value is None:
            return ""
        if isinstance(value, Enum):
            value = value.value
        return str(value)

    @staticmethod
    def is_sequence(value: Any) -> bool:
        return isinstance(value, Sequence) and not isinstance(
            value, (str, bytes, bytearray)
        )

    def _identity_and_attributes(
        self, instance: Any, descriptor: ResourceDescriptor
    ) -> dict[str, Any]:
        type_name, resource_id = self.get_identity(instance, descriptor)
        return {
            "type": type_name,
            "id": resource_id,
            "attributes": self.get_attributes(instance, descriptor),
        }
