"""
=============================================================================
MIDDLEWARE
=============================================================================

Wrappers that run around every dispatched resource call.

LoggingMiddleware:
    One access log line per request, with timing and X-Request-ID.

JSONPMiddleware:
    Pads bodies as callback(body) when ?callback=name is present.

FunctionMiddleware / function_middleware:
    Turn a plain (request, next) function into middleware.

=============================================================================
"""

from .base import Middleware, MiddlewarePipeline, FunctionMiddleware, function_middleware
from .logging import LoggingMiddleware, RequestLog
from .jsonp import JSONPMiddleware

__all__ = [
    # Base classes
    "Middleware",
    "MiddlewarePipeline",
    "FunctionMiddleware",
    "function_middleware",

    # Built-in middleware
    "LoggingMiddleware",
    "RequestLog",
    "JSONPMiddleware",
]
