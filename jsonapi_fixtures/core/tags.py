"""Field annotation parsing for JSON:API fixture records."""

from __future__ import annotations

from dataclasses import dataclass

TAG_KEY = "jsonapi"

PRIMARY = "primary"
ATTR = "attr"
RELATION = "relation"


def split_tag(tag: str) -> list[str]:
    """Split an annotation string like ``"attr,name"`` into its tokens.

    Tokens are positional: no trimming, quoting or validation. Empty tokens
    between commas are kept, a trailing empty token is dropped, and an empty
    string yields an empty list.
    """
    parts = tag.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


@dataclass(frozen=True)
class FieldTag:
    """Parsed annotation: role kind, optional name and trailing options."""

    role: str
    name: str | None = None
    options: tuple[str, ...] = ()

    @classmethod
    def parse(cls, tag: str) -> FieldTag | None:
        """Return the parsed tag, or None when the field has no role."""
        parts = split_tag(tag)
        if not parts:
            return None
        name = parts[1] if len(parts) > 1 else None
        return cls(role=parts[0], name=name, options=tuple(parts[2:]))
