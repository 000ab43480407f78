"""JSON:API error objects for fixture responses."""

from typing import Any

from .document import JSONAPIDocumentBuilder


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    document_builder_class: type = JSONAPIDocumentBuilder

    def error_object(self, *, status: int | str, detail: str) -> dict[str, Any]:
        """Return a JSON:API error object with the status rendered as text."""
        return {"detail": detail, "status": str(status)}

    def error_document(self, status: int | str, detail: str) -> dict[str, Any]:
        """Return a JSON:API document with a single-entry errors array."""
        builder = self.document_builder_class()
        return builder.build_error([self.error_object(status=status, detail=detail)])
