"""Record exceptions raised by fixture handlers so the owning test can fail."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HandlerFailure:
    """An exception raised while serving one request."""

    method: str
    path: str
    exception: BaseException

    def __str__(self) -> str:
        return f"{self.method} {self.path}: {type(self.exception).__name__}: {self.exception}"


class HandlerFailureMiddleware:
    """Append handler exceptions to a shared list, then re-raise them.

    The server error middleware above this one still answers with a 500, so
    the client sees a failed request while the test sees the real cause.
    """

    def __init__(self, app: Any, failures: list[HandlerFailure]) -> None:
        """Store the ASGI app and the list that collects failures."""
        self.app = app
        self.failures = failures

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            failure = HandlerFailure(
                method=scope.get("method", ""),
                path=scope.get("path", ""),
                exception=exc,
            )
            logger.error("Fixture handler failed: %s", failure)
            self.failures.append(failure)
            raise
