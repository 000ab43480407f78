"""Fixture server settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "JSONAPI_FIXTURES_"


@dataclass(frozen=True)
class ServerConfig:
    """Settings for a :class:`~jsonapi_fixtures.server.FixtureServer`.

    Args:
        host: Interface the live server binds to.
        port: Port for the live server; 0 picks a free one.
        startup_timeout: Seconds to wait for the live server to accept requests.
        shutdown_timeout: Seconds to wait for the live server thread to exit.
        log_level: uvicorn log level for the live server.
        testserver_url: Base URL used when serving in process.
    """

    host: str = "127.0.0.1"
    port: int = 0
    startup_timeout: float = 5.0
    shutdown_timeout: float = 5.0
    log_level: str = "warning"
    testserver_url: str = "http://testserver"

    @classmethod
    def from_env(cls) -> ServerConfig:
        """Build a config from ``JSONAPI_FIXTURES_*`` environment variables."""
        defaults = cls()
        env = os.environ
        return cls(
            host=env.get(f"{ENV_PREFIX}HOST", defaults.host),
            port=int(env.get(f"{ENV_PREFIX}PORT", defaults.port)),
            startup_timeout=float(
                env.get(f"{ENV_PREFIX}STARTUP_TIMEOUT", defaults.startup_timeout)
            ),
            shutdown_timeout=float(
                env.get(f"{ENV_PREFIX}SHUTDOWN_TIMEOUT", defaults.shutdown_timeout)
            ),
            log_level=env.get(f"{ENV_PREFIX}LOG_LEVEL", defaults.log_level),
            testserver_url=env.get(f"{ENV_PREFIX}TESTSERVER_URL", defaults.testserver_url),
        )
