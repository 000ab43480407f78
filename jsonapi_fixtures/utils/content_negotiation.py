"""Helpers for checking JSON:API media types on recorded requests."""

from __future__ import annotations

from typing import Any

from jsonapi_fixtures.responses.base import JSONAPI_MEDIA_TYPE


def _split_parameters(value: str) -> list[str]:
    return [part.strip() for part in value.split(";") if part.strip()]


def _parse_param_value(value: str) -> list[str]:
    value = value.strip('"')
    return value.split(" ") if value else []


def parse_jsonapi_media_type(content_type: str) -> dict[str, Any]:
    """Split a Content-Type header into media type, ext/profile and other params."""
    parts = _split_parameters(content_type)
    params: dict[str, Any] = {
        "media_type": parts[0].lower() if parts else "",
        "ext": [],
        "profile": [],
        "other_params": {},
    }
    for param in parts[1:]:
        name, sep, raw_value = param.partition("=")
        if not sep:
            continue
        name = name.strip().lower()
        if name in {"ext", "profile"}:
            params[name] = _parse_param_value(raw_value.strip())
        else:
            params["other_params"][name] = raw_value.strip()
    return params


def is_jsonapi_media_type(content_type: str | None) -> bool:
    """Return True for ``application/vnd.api+json`` with no foreign parameters."""
    if not content_type:
        return False
    parsed = parse_jsonapi_media_type(content_type)
    return parsed["media_type"] == JSONAPI_MEDIA_TYPE and not parsed["other_params"]
