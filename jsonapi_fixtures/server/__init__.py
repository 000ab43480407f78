"""Mock server for JSON:API fixtures."""

from .base import FixtureServer
from .config import ServerConfig

__all__ = ["FixtureServer", "ServerConfig"]
