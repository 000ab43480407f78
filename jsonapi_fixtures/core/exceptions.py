"""Exceptions raised while building and serving fixtures."""

from __future__ import annotations

from typing import Any


class FixtureError(Exception):
    """Base class for fixture generation errors."""


class FixtureContractError(FixtureError, TypeError):
    """The caller passed a payload of the wrong shape."""


class RecordTypeError(FixtureContractError):
    """The record type carries no JSON:API field annotations to map."""

    def __init__(self, record: Any) -> None:
        self.record_type = type(record)
        super().__init__(
            f"{self.record_type.__qualname__} is not an annotated JSON:API record"
        )


class DocumentEncodingError(FixtureError, ValueError):
    """The document tree could not be encoded as JSON."""


class HandlerFailedError(FixtureError):
    """One or more fixture handlers raised while serving a request."""

    def __init__(self, failures: list[Any]) -> None:
        self.failures = list(failures)
        lines = [f"{len(self.failures)} fixture handler(s) failed:"]
        lines.extend(f"  {failure}" for failure in self.failures)
        super().__init__("\n".join(lines))
