"""Per-type mapping descriptors for annotated fixture records.

A descriptor is the ordered list of annotated fields of a record type, each
paired with an accessor. It is built once per type from whichever annotation
style the type uses:

- dataclasses: ``field(metadata={"jsonapi": "attr,name"})``
- pydantic models: ``Field(json_schema_extra={"jsonapi": "attr,name"})``
- SQLAlchemy mapped classes: ``info={"jsonapi": "attr,name"}`` on the
  column or relationship
- anything else: a ``__jsonapi__`` class attribute mapping attribute names
  to annotation strings
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from functools import lru_cache
from operator import attrgetter
from typing import Any, Callable, Iterator, Mapping

from pydantic import BaseModel
from sqlalchemy import inspect as sa_inspect

from jsonapi_fixtures.core.tags import TAG_KEY, FieldTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FieldDescriptor:
    """One annotated field: its parsed role, name and value accessor."""

    attribute: str
    tag: FieldTag
    accessor: Callable[[Any], Any]

    @property
    def role(self) -> str:
        return self.tag.role

    @property
    def name(self) -> str | None:
        return self.tag.name

    def value(self, record: Any) -> Any:
        """Read this field's current value from a record."""
        return self.accessor(record)


@dataclass(frozen=True)
class ResourceDescriptor:
    """Ordered annotated fields of one record type."""

    record_type: type
    fields: tuple[FieldDescriptor, ...]

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


def jsonapi_field(tag: str, **kwargs: Any) -> Any:
    """Return a dataclass field carrying a JSON:API annotation.

    Extra keyword arguments are passed to :func:`dataclasses.field`, so
    ``jsonapi_field("attr,description", default=None)`` declares an optional
    attribute.
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[TAG_KEY] = tag
    return dataclasses.field(metadata=metadata, **kwargs)


def _dataclass_tags(record_type: type) -> list[tuple[str, str]]:
    return [
        (field.name, field.metadata.get(TAG_KEY, ""))
        for field in dataclasses.fields(record_type)
    ]


def _pydantic_tags(record_type: type[BaseModel]) -> list[tuple[str, str]]:
    tags = []
    for name, field_info in record_type.model_fields.items():
        extra = field_info.json_schema_extra
        tag = extra.get(TAG_KEY, "") if isinstance(extra, Mapping) else ""
        tags.append((name, tag))
    return tags


def _sqlalchemy_tags(mapper: Any) -> list[tuple[str, str]]:
    tags = []
    for prop in mapper.attrs:
        tag = prop.info.get(TAG_KEY, "")
        if not tag:
            for column in getattr(prop, "columns", ()):
                tag = column.info.get(TAG_KEY, "")
                if tag:
                    break
        tags.append((prop.key, tag))
    return tags


def _explicit_tags(record_type: type) -> list[tuple[str, str]] | None:
    declared = getattr(record_type, "__jsonapi__", None)
    if not isinstance(declared, Mapping):
        return None
    return list(declared.items())


def _raw_tags(record_type: type) -> list[tuple[str, str]] | None:
    explicit = _explicit_tags(record_type)
    if explicit is not None:
        return explicit
    # Mapped dataclasses keep their annotations in column info, not field metadata.
    mapper = sa_inspect(record_type, raiseerr=False)
    if mapper is not None and hasattr(mapper, "attrs"):
        return _sqlalchemy_tags(mapper)
    if dataclasses.is_dataclass(record_type):
        return _dataclass_tags(record_type)
    if issubclass(record_type, BaseModel):
        return _pydantic_tags(record_type)
    return None


@lru_cache(maxsize=None)
def describe(record_type: type) -> ResourceDescriptor | None:
    """Return the descriptor for a record type, or None if it has no annotations."""
    raw_tags = _raw_tags(record_type)
    if raw_tags is None:
        return None
    fields = []
    for attribute, raw_tag in raw_tags:
        tag = FieldTag.parse(raw_tag)
        if tag is None:
            continue
        fields.append(
            FieldDescriptor(attribute=attribute, tag=tag, accessor=attrgetter(attribute))
        )
    logger.debug(
        "Described %s with %d annotated field(s)", record_type.__qualname__, len(fields)
    )
    return ResourceDescriptor(record_type=record_type, fields=tuple(fields))


def describe_record(record: Any) -> ResourceDescriptor | None:
    """Return the descriptor for a record instance's type."""
    if record is None or isinstance(record, type):
        return None
    return describe(type(record))
