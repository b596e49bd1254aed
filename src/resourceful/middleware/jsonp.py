"""
=============================================================================
JSON-P MIDDLEWARE
=============================================================================

Wraps response bodies in a JavaScript function call when the request asks
for it through a query parameter:

    GET /posts/5?callback=show

    before:  {"id": "5", "title": "Hello"}
    after:   show({"id": "5", "title": "Hello"})

Content-Type becomes application/javascript and Content-Length is
recomputed for the padded body.

Only identifier-like callback names are honoured (letters, digits, "_",
"$", dotted paths such as "app.render"). Anything else is ignored and the
response passes through untouched, which keeps arbitrary script out of
the padded body.

=============================================================================
"""

import re

from .base import Middleware, NextHandler
from ..http.request import Request
from ..http.response import Response, byte_length


class JSONPMiddleware(Middleware):
    """Pads responses as callback(body) when the callback parameter is present."""

    CALLBACK_PATTERN = re.compile(r"[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*", re.ASCII)
    CONTENT_TYPE = "application/javascript"

    def __init__(self, param: str = "callback"):
        self.param = param

    def __call__(self, request: Request, next: NextHandler) -> Response:
        response = next(request)

        callback = request.get_query(self.param)
        if not callback or not self.CALLBACK_PATTERN.fullmatch(callback):
            return response

        return self.pad(callback, response)

    def pad(self, callback: str, response: Response) -> Response:
        """Return response with its body wrapped as callback(body)."""
        body = f"{callback}({response.body})"
        padded = response.with_headers({
            "Content-Type": self.CONTENT_TYPE,
            "Content-Length": str(byte_length(body)),
        })
        return padded.replace(body=body)
