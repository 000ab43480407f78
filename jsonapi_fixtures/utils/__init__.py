"""Utility helpers for JSON:API headers."""

from .content_negotiation import is_jsonapi_media_type, parse_jsonapi_media_type

__all__ = ["is_jsonapi_media_type", "parse_jsonapi_media_type"]
