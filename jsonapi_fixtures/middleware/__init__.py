"""Middleware for fixture servers."""

from .failures import HandlerFailure, HandlerFailureMiddleware

__all__ = ["HandlerFailure", "HandlerFailureMiddleware"]
