"""
Pytest fixtures for JSON:API mock servers.

Registered as a pytest plugin through the ``pytest11`` entry point in
pyproject.toml, so installing the package makes ``jsonapi_server`` available::

    def test_get_widget(jsonapi_server):
        jsonapi_server.handle(
            "GET /widgets/42", lambda request: resource_response(200, widget)
        )
        client = WidgetClient(base_url=jsonapi_server.start())
        assert client.get("42").name == "bolt"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from jsonapi_fixtures.server import FixtureServer, ServerConfig

if TYPE_CHECKING:
    from collections.abc import Generator


def fail_on_handler_errors(server: FixtureServer) -> None:
    """Fail the current test if any of the server's handlers raised."""
    if server.failures:
        lines = "\n".join(f"  {failure}" for failure in server.failures)
        pytest.fail(f"jsonapi_fixtures: handler(s) failed:\n{lines}", pytrace=False)


@pytest.fixture()
def jsonapi_server_config() -> ServerConfig:
    """Settings for ``jsonapi_server``; override to change host or timeouts."""
    return ServerConfig.from_env()


@pytest.fixture()
def jsonapi_server(
    jsonapi_server_config: ServerConfig,
) -> Generator[FixtureServer, None, None]:
    """A fresh fixture server, torn down at the end of the test.

    Any exception raised by a registered handler fails the test during
    teardown, even if the client under test swallowed the 500 it caused.

    Yields:
        FixtureServer serving in process; call ``start()`` for a real URL.
    """
    server = FixtureServer(jsonapi_server_config)
    yield server
    server.close()
    fail_on_handler_errors(server)
