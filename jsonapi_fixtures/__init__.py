"""JSON:API fixture generator and mock server for client-library tests."""

from .core.document import JSONAPIDocumentBuilder
from .core.errors import JSONAPIErrorBuilder
from .core.exceptions import (
    DocumentEncodingError,
    FixtureContractError,
    FixtureError,
    HandlerFailedError,
    RecordTypeError,
)
from .responses import error_response, json_response, resource_list_response, resource_response
from .routers.base import FixtureRouter
from .routers.request import FixtureRequest
from .serializers.base import FixtureSerializer
from .serializers.descriptors import jsonapi_field
from .server import FixtureServer, ServerConfig

__all__ = [
    "DocumentEncodingError",
    "FixtureContractError",
    "FixtureError",
    "FixtureRequest",
    "FixtureRouter",
    "FixtureSerializer",
    "FixtureServer",
    "HandlerFailedError",
    "JSONAPIDocumentBuilder",
    "JSONAPIErrorBuilder",
    "RecordTypeError",
    "ServerConfig",
    "error_response",
    "json_response",
    "jsonapi_field",
    "resource_list_response",
    "resource_response",
]
