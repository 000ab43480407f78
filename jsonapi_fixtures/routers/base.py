"""Router that registers fixture handlers by ``"METHOD /path"`` pattern."""

from __future__ import annotations

import inspect
import logging
import re
from typing import Any, Callable

from fastapi import APIRouter
from starlette.requests import Request
from starlette.responses import Response

from .request import FixtureRequest

logger = logging.getLogger(__name__)

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

_REST_WILDCARD = re.compile(r"\{(\w+)\.\.\.\}")

_EXACT_METHOD, _IMPLIED_HEAD, _ANY_METHOD = range(3)

FixtureHandler = Callable[[FixtureRequest], Any]


def parse_pattern(pattern: str) -> tuple[list[str], str]:
    """Split ``"GET /items/{id}"`` into methods and a route path.

    A pattern without a method matches every method. ``{name...}`` captures
    the rest of the path and ``{$}`` anchors a trailing slash.
    """
    method, sep, path = pattern.strip().partition(" ")
    if not sep:
        methods, path = list(ALL_METHODS), method
    else:
        methods, path = [method.upper()], path.strip()
    if not path.startswith("/"):
        raise ValueError(f"Route pattern {pattern!r} must contain a path starting with '/'.")
    path = _REST_WILDCARD.sub(r"{\1:path}", path).replace("{$}", "")
    return methods, path


class FixtureRouter(APIRouter):
    """APIRouter that wraps plain fixture handlers as endpoints.

    Routes are kept ordered by specificity: a method-specific pattern is
    tried before the ``HEAD`` route implied by a ``GET`` pattern, and both
    before a pattern that matches every method.
    """

    def __init__(
        self,
        *,
        on_request: Callable[[FixtureRequest], None] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.on_request = on_request
        self._patterns: set[tuple[str | None, str]] = set()

    def handle(self, pattern: str, handler: FixtureHandler) -> None:
        """Register a handler for a ``"METHOD /path"`` pattern.

        The handler gets a :class:`FixtureRequest` and returns a response,
        usually one built by :mod:`jsonapi_fixtures.responses`. It may be a
        plain function or a coroutine function. A ``GET`` pattern also
        answers ``HEAD``. ``"GET /x"`` and ``"/x"`` may both be registered;
        the method-specific one wins. Registering the same pattern twice
        raises :class:`ValueError`.

        Examples:
            router.handle("GET /api/v1/organization/{org_id}/workspace", list_workspaces)
            router.handle("/health", lambda request: json_response(200, {"ok": True}))
        """
        methods, path = parse_pattern(pattern)
        key = (methods[0] if len(methods) == 1 else None, path)
        if key in self._patterns:
            raise ValueError(f"A handler for {pattern.strip()!r} is already registered.")
        self._patterns.add(key)

        async def endpoint(request: Request) -> Response:
            fixture_request = await FixtureRequest.from_request(request)
            if self.on_request is not None:
                self.on_request(fixture_request)
            result = handler(fixture_request)
            if inspect.isawaitable(result):
                result = await result
            return result

        if key[0] is None:
            self._add_route(path, endpoint, methods, pattern, _ANY_METHOD)
        else:
            self._add_route(path, endpoint, methods, pattern, _EXACT_METHOD)
            if key[0] == "GET":
                self._add_route(path, endpoint, ["HEAD"], pattern, _IMPLIED_HEAD)
        logger.debug("Registered fixture handler %s %s", ",".join(methods), path)

    def _add_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        methods: list[str],
        name: str,
        rank: int,
    ) -> None:
        self.add_api_route(
            path,
            endpoint,
            methods=methods,
            name=name,
            include_in_schema=False,
        )
        self.routes[-1].fixture_rank = rank
        self.routes.sort(key=lambda route: getattr(route, "fixture_rank", _EXACT_METHOD))
