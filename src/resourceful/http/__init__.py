"""
=============================================================================
HTTP VALUE TYPES
=============================================================================

The request/response shapes shared by the router, the resources and the
middleware:

    request.py      - Request, parse_query
    response.py     - Response, respond() and canned error responses
    handler.py      - Handler protocol, ensure_handler
    status_codes.py - HTTPStatus enum and reason phrases

=============================================================================
"""

from .status_codes import HTTPStatus, reason_phrase
from .request import Request, parse_query
from .response import (
    Response,
    DEFAULT_HEADERS,
    respond,
    not_found,
    unprocessable,
    internal_error,
    not_implemented,
)
from .handler import Handler, HandlerFunc, ensure_handler

__all__ = [
    "HTTPStatus",
    "reason_phrase",
    "Request",
    "parse_query",
    "Response",
    "DEFAULT_HEADERS",
    "respond",
    "not_found",
    "unprocessable",
    "internal_error",
    "not_implemented",
    "Handler",
    "HandlerFunc",
    "ensure_handler",
]
