"""Core JSON:API document, error and annotation helpers."""

from .document import JSONAPIDocumentBuilder
from .errors import JSONAPIErrorBuilder
from .exceptions import (
    DocumentEncodingError,
    FixtureContractError,
    FixtureError,
    HandlerFailedError,
    RecordTypeError,
)
from .tags import FieldTag, split_tag

__all__ = [
    "DocumentEncodingError",
    "FieldTag",
    "FixtureContractError",
    "FixtureError",
    "HandlerFailedError",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "RecordTypeError",
    "split_tag",
]
