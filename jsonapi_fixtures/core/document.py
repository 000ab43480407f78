"""JSON:API document envelopes for fixture responses."""

from typing import Any, Iterable, Mapping


class JSONAPIDocumentBuilder:
    """Build top-level JSON:API documents from mapped resources."""

    def build_single(self, resource: Mapping[str, Any]) -> dict[str, Any]:
        """Return a JSON:API document for a single resource object."""
        return {"data": dict(resource)}

    def build_collection(self, resources: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document for a collection of resources."""
        return {"data": [dict(item) for item in resources]}

    def build_error(self, errors: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API error document from error objects."""
        return {"errors": [dict(error) for error in errors]}
