"""Tests for the fixture mock server."""

from __future__ import annotations

import socket

import httpx
import pytest

from jsonapi_fixtures.core.exceptions import FixtureContractError, HandlerFailedError
from jsonapi_fixtures.responses import (
    JSONAPI_MEDIA_TYPE,
    error_response,
    json_response,
    resource_list_response,
    resource_response,
)
from jsonapi_fixtures.routers import FixtureRequest, parse_pattern
from jsonapi_fixtures.server import base as server_base
from jsonapi_fixtures.server import FixtureServer, ServerConfig
from records import Owner, Team, Widget


class TestParsePattern:
    def test_method_and_path(self) -> None:
        assert parse_pattern("GET /api/v1/organization/{org_id}") == (
            ["GET"],
            "/api/v1/organization/{org_id}",
        )

    def test_method_is_uppercased(self) -> None:
        assert parse_pattern("patch /items/{id}")[0] == ["PATCH"]

    def test_path_only_matches_every_method(self) -> None:
        methods, path = parse_pattern("/health")
        assert path == "/health"
        assert {"GET", "POST", "DELETE"} <= set(methods)

    def test_rest_wildcard(self) -> None:
        assert parse_pattern("GET /files/{name...}")[1] == "/files/{name:path}"

    def test_exact_trailing_slash(self) -> None:
        assert parse_pattern("GET /{$}")[1] == "/"

    def test_missing_path_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_pattern("GET items")


@pytest.fixture()
def server():
    with FixtureServer(ServerConfig()) as srv:
        yield srv


class TestInProcess:
    def test_single_resource(self, server: FixtureServer) -> None:
        server.handle(
            "GET /widgets/42",
            lambda request: resource_response(200, Widget(id="42", name="bolt")),
        )
        response = server.client.get("/widgets/42")
        assert response.status_code == 200
        assert response.headers["content-type"] == JSONAPI_MEDIA_TYPE
        assert response.json() == {
            "data": {"type": "widgets", "id": "42", "attributes": {"name": "bolt"}}
        }

    def test_url_defaults_to_testserver(self, server: FixtureServer) -> None:
        assert server.url == "http://testserver"
        assert not server.is_live

    def test_path_params_reach_the_handler(self, server: FixtureServer) -> None:
        def get_owner(request: FixtureRequest):
            return resource_response(200, Owner(id=request.path_params["owner_id"]))

        server.handle("GET /owners/{owner_id}", get_owner)
        assert server.client.get("/owners/abc").json()["data"]["id"] == "abc"

    def test_async_handler(self, server: FixtureServer) -> None:
        async def list_owners(request: FixtureRequest):
            return resource_list_response(200, [Owner(id="1"), Owner(id="2")])

        server.handle("GET /owners", list_owners)
        data = server.client.get("/owners").json()["data"]
        assert [item["id"] for item in data] == ["1", "2"]

    def test_error_fixture(self, server: FixtureServer) -> None:
        server.handle("GET /widgets/missing", lambda request: error_response(404, "not found"))
        response = server.client.get("/widgets/missing")
        assert response.status_code == 404
        assert response.json() == {"errors": [{"detail": "not found", "status": "404"}]}

    def test_method_mismatch(self, server: FixtureServer) -> None:
        server.handle("POST /widgets", lambda request: json_response(201, {}))
        assert server.client.get("/widgets").status_code == 405

    def test_unregistered_path(self, server: FixtureServer) -> None:
        assert server.client.get("/nothing").status_code == 404

    def test_duplicate_registration_is_rejected(self, server: FixtureServer) -> None:
        server.handle("GET /widgets", lambda request: json_response(200, []))
        with pytest.raises(ValueError):
            server.handle("GET /widgets", lambda request: json_response(200, []))

    def test_get_route_answers_head(self, server: FixtureServer) -> None:
        server.handle("GET /widgets/42", lambda request: resource_response(200, Widget(id="42")))
        assert server.client.head("/widgets/42").status_code == 200
        assert server.requests[-1].method == "HEAD"
        assert server.client.post("/widgets/42").status_code == 405

    def test_explicit_head_route_wins_over_get(self, server: FixtureServer) -> None:
        server.handle("GET /widgets", lambda request: json_response(200, []))
        server.handle("HEAD /widgets", lambda request: json_response(202, {}))
        assert server.client.head("/widgets").status_code == 202
        assert server.client.get("/widgets").status_code == 200

    @pytest.mark.parametrize(
        "patterns",
        [["GET /health", "/health"], ["/health", "GET /health"]],
    )
    def test_method_pattern_wins_over_any_method(
        self, server: FixtureServer, patterns: list[str]
    ) -> None:
        for pattern in patterns:
            which = "get" if pattern.startswith("GET") else "any"
            server.handle(pattern, lambda request, which=which: json_response(200, {"which": which}))
        assert server.client.get("/health").json() == {"which": "get"}
        assert server.client.post("/health").json() == {"which": "any"}

    def test_any_method_pattern_registered_twice_is_rejected(self, server: FixtureServer) -> None:
        server.handle("/health", lambda request: json_response(200, {}))
        with pytest.raises(ValueError):
            server.handle("/health", lambda request: json_response(200, {}))

    def test_trailing_slash_is_not_redirected(self, server: FixtureServer) -> None:
        server.handle("GET /widgets", lambda request: json_response(200, []))
        response = server.client.get("/widgets/", follow_redirects=False)
        assert response.status_code == 404
        assert [r.path for r in server.requests] == []

    def test_requests_are_recorded(self, server: FixtureServer) -> None:
        def create_team(request: FixtureRequest):
            assert request.is_jsonapi()
            assert request.attribute("manageState") is False
            return resource_response(201, Team(id="t1", name=request.attribute("name")))

        server.handle("POST /teams", create_team)
        response = server.client.post(
            "/teams?include=none",
            content=b'{"data": {"type": "team", "attributes": {"name": "core", "manageState": false}}}',
            headers={"Content-Type": JSONAPI_MEDIA_TYPE, "Authorization": "Bearer test-token"},
        )
        assert response.status_code == 201
        assert response.json()["data"]["attributes"]["name"] == "core"

        recorded = server.requests[-1]
        assert recorded.method == "POST"
        assert recorded.path == "/teams"
        assert recorded.query_params["include"] == "none"
        assert recorded.headers["authorization"] == "Bearer test-token"
        assert recorded.json()["data"]["type"] == "team"


class TestHandlerFailures:
    def test_contract_violation_is_recorded(self) -> None:
        server = FixtureServer(ServerConfig())
        server.handle(
            "GET /widgets",
            lambda request: resource_list_response(200, Widget(id="1")),
        )
        response = server.client.get("/widgets")
        server.close()

        assert response.status_code == 500
        assert len(server.failures) == 1
        failure = server.failures[0]
        assert (failure.method, failure.path) == ("GET", "/widgets")
        assert isinstance(failure.exception, FixtureContractError)
        with pytest.raises(HandlerFailedError, match="GET /widgets"):
            server.raise_for_failures()

    def test_context_manager_raises_on_exit(self) -> None:
        def broken(request: FixtureRequest):
            raise RuntimeError("boom")

        with pytest.raises(HandlerFailedError, match="boom"):
            with FixtureServer(ServerConfig()) as server:
                server.handle("GET /broken", broken)
                assert server.client.get("/broken").status_code == 500

    def test_no_failures_is_quiet(self, server: FixtureServer) -> None:
        server.handle("GET /ok", lambda request: json_response(200, {"ok": True}))
        server.client.get("/ok")
        server.raise_for_failures()


def test_live_server() -> None:
    with FixtureServer(ServerConfig(startup_timeout=10.0)) as server:
        server.handle("GET /owners/{owner_id}", lambda request: resource_response(
            200, Owner(id=request.path_params["owner_id"], name="ada")
        ))
        url = server.start()
        assert server.is_live
        assert url.startswith("http://127.0.0.1:")
        assert server.url == url

        with httpx.Client(trust_env=False) as client:
            response = client.get(f"{url}/owners/7")
        assert response.status_code == 200
        assert response.json()["data"] == {
            "type": "owners",
            "id": "7",
            "attributes": {"name": "ada"},
        }
        assert server.client.get("/owners/8").json()["data"]["id"] == "8"
    assert not server.is_live


def test_start_closes_socket_when_port_is_taken(monkeypatch: pytest.MonkeyPatch) -> None:
    created = []

    class TrackingSocket(socket.socket):
        def __init__(self, *args, **kwargs) -> None:
            super().__init__(*args, **kwargs)
            created.append(self)

    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as blocker:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen()
        port = blocker.getsockname()[1]

        monkeypatch.setattr(server_base.socket, "socket", TrackingSocket)
        server = FixtureServer(ServerConfig(port=port))
        with pytest.raises(OSError):
            server.start()
        monkeypatch.undo()

    assert not server.is_live
    assert len(created) == 1
    assert created[0].fileno() == -1
