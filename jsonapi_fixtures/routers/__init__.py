"""Routing for fixture handlers."""

from .base import FixtureRouter, parse_pattern
from .request import FixtureRequest

__all__ = ["FixtureRequest", "FixtureRouter", "parse_pattern"]
