"""Pydantic schemas for the JSON:API documents fixtures exchange."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel


class JSONAPIResourceIdentifier(BaseModel):
    """Resource identifier object: type + id."""

    type: str
    id: str


class JSONAPIRelationship(BaseModel):
    """To-one relationship object."""

    data: Optional[JSONAPIResourceIdentifier] = None


class JSONAPIResource(BaseModel):
    """Resource object with attributes and relationships."""

    type: str
    id: Optional[str] = None
    attributes: Dict[str, Any] = {}
    relationships: Optional[Dict[str, JSONAPIRelationship]] = None


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document for one resource or a collection."""

    data: Union[JSONAPIResource, List[JSONAPIResource], None] = None


class JSONAPIError(BaseModel):
    """Error object in the fixture error shape."""

    detail: str
    status: str


class JSONAPIErrorDocument(BaseModel):
    """Top-level JSON:API error document."""

    errors: List[JSONAPIError]
