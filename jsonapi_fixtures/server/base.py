"""Mock JSON:API server for client-library tests."""

from __future__ import annotations

import logging
import socket
import threading
import time
from typing import Any

import httpx
import uvicorn
from fastapi import FastAPI
from fastapi.testclient import TestClient

from jsonapi_fixtures.core.exceptions import HandlerFailedError
from jsonapi_fixtures.middleware.failures import HandlerFailure, HandlerFailureMiddleware
from jsonapi_fixtures.routers.base import FixtureHandler, FixtureRouter
from jsonapi_fixtures.routers.request import FixtureRequest

from .config import ServerConfig

logger = logging.getLogger(__name__)


class FixtureServer:
    """A FastAPI app serving registered fixture handlers.

    Requests are served in process through :attr:`client` until
    :meth:`start` binds a real socket; after that :attr:`url` points at the
    live uvicorn server so any HTTP client can reach it.

    Example::

        with FixtureServer() as server:
            server.handle("GET /widgets/42", lambda request: resource_response(200, widget))
            response = server.client.get("/widgets/42")
    """

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config = config or ServerConfig.from_env()
        self.requests: list[FixtureRequest] = []
        self.failures: list[HandlerFailure] = []
        self.router = FixtureRouter(
            on_request=self.requests.append, redirect_slashes=False
        )
        self.app = FastAPI(
            title="JSON:API fixtures",
            docs_url=None,
            redoc_url=None,
            openapi_url=None,
            redirect_slashes=False,
        )
        self.app.add_middleware(HandlerFailureMiddleware, failures=self.failures)
        self.app.mount("", self.router)
        self._client: httpx.Client | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._live_url: str | None = None

    def __enter__(self) -> FixtureServer:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
        if exc_type is None:
            self.raise_for_failures()

    def handle(self, pattern: str, handler: FixtureHandler) -> None:
        """Register a handler; see :meth:`FixtureRouter.handle`."""
        self.router.handle(pattern, handler)

    @property
    def url(self) -> str:
        """Base URL of the running instance."""
        return self._live_url or self.config.testserver_url

    @property
    def is_live(self) -> bool:
        return self._server is not None

    @property
    def client(self) -> httpx.Client:
        """An httpx client bound to :attr:`url`."""
        if self._client is None:
            if self.is_live:
                self._client = httpx.Client(base_url=self.url, trust_env=False)
            else:
                self._client = TestClient(
                    self.app, base_url=self.url, raise_server_exceptions=False
                )
        return self._client

    def start(self) -> str:
        """Serve the app on a real socket in a background thread and return its URL."""
        if self._server is not None:
            return self.url

        sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        try:
            sock.bind((self.config.host, self.config.port))
        except OSError:
            sock.close()
            raise
        host, port = sock.getsockname()[:2]

        server = uvicorn.Server(
            uvicorn.Config(
                self.app,
                host=host,
                port=port,
                log_level=self.config.log_level,
                lifespan="off",
            )
        )
        thread = threading.Thread(
            target=server.run,
            kwargs={"sockets": [sock]},
            name=f"jsonapi-fixtures-{port}",
            daemon=True,
        )
        thread.start()

        deadline = time.monotonic() + self.config.startup_timeout
        while not server.started:
            if not thread.is_alive() or time.monotonic() > deadline:
                server.should_exit = True
                sock.close()
                raise RuntimeError(f"Fixture server did not start on {host}:{port}.")
            time.sleep(0.01)

        self._close_client()
        self._server = server
        self._thread = thread
        self._live_url = f"http://{host}:{port}"
        logger.info("Started fixture server at %s", self._live_url)
        return self._live_url

    def close(self) -> None:
        """Close the client and stop the live server, if any."""
        self._close_client()
        if self._server is None:
            return
        self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(self.config.shutdown_timeout)
            if self._thread.is_alive():
                logger.warning("Fixture server at %s did not stop in time", self._live_url)
        logger.info("Stopped fixture server at %s", self._live_url)
        self._server = None
        self._thread = None
        self._live_url = None

    def raise_for_failures(self) -> None:
        """Raise :class:`HandlerFailedError` if any handler raised."""
        if self.failures:
            raise HandlerFailedError(self.failures)

    def _close_client(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
