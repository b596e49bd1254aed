"""
=============================================================================
RESPONSE
=============================================================================

The single value every dispatch produces: a status code, an ordered
header mapping and a text body.

=============================================================================
HEADER MERGE ORDER
=============================================================================

respond() builds the headers of every successful resource response in
three layers, later layers winning on conflict:

    1. DEFAULT_HEADERS            {"Content-Type": "text/html"}
    2. computed length            {"Content-Length": "<utf-8 byte length>"}
    3. caller headers             whatever the action passed in

    respond("café")
        → 200, {"Content-Type": "text/html", "Content-Length": "5"}, "café"

    respond("{}", headers={"Content-Type": "application/json"})
        → 200, {"Content-Type": "application/json", "Content-Length": "2"}, "{}"

Note the length is the ENCODED byte length, not len(body): "café" is four
characters but five bytes in UTF-8.

=============================================================================
IMMUTABILITY
=============================================================================

Responses are frozen. Middleware that needs to change one builds a new
Response with replace() or with_headers() instead of mutating it.

=============================================================================
"""

from dataclasses import dataclass, field, replace as dataclass_replace
from types import MappingProxyType
from typing import Mapping, Optional, Dict, List, Tuple

from .status_codes import HTTPStatus, reason_phrase


# Base headers merged under every respond() call
DEFAULT_HEADERS: Mapping[str, str] = MappingProxyType({"Content-Type": "text/html"})

ENCODING = "utf-8"


def byte_length(body: str) -> int:
    """Length of body in bytes once encoded for the wire."""
    return len(body.encode(ENCODING))


@dataclass(frozen=True)
class Response:
    """
    An immutable HTTP response.

    Attributes:
        status:  Integer status code, 100-599
        headers: Header name → value, insertion order preserved
        body:    Response body text (encoded as UTF-8 on the wire)

    Raises:
        ValueError: If status is outside 100-599.
    """

    status: int = HTTPStatus.OK
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self):
        if not 100 <= int(self.status) <= 599:
            raise ValueError(f"Invalid status code: {self.status}. Must be 100-599.")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def status_line(self) -> str:
        """Status line as written by an HTTP/1.1 transport."""
        return f"HTTP/1.1 {int(self.status)} {reason_phrase(self.status)}"

    @property
    def wsgi_status(self) -> str:
        """Status string in the form WSGI's start_response expects ("200 OK")."""
        return f"{int(self.status)} {reason_phrase(self.status)}"

    @property
    def content_length(self) -> int:
        """Byte length of the encoded body."""
        return byte_length(self.body)

    def header_items(self) -> List[Tuple[str, str]]:
        """Headers as a list of (name, value) pairs, in order."""
        return [(name, str(value)) for name, value in self.headers.items()]

    def replace(self, **changes) -> "Response":
        """Return a copy of this response with the given fields changed."""
        return dataclass_replace(self, **changes)

    def with_headers(self, headers: Mapping[str, str]) -> "Response":
        """Return a copy with headers merged over the existing ones."""
        merged = dict(self.headers)
        merged.update(headers)
        return self.replace(headers=merged)

    def to_bytes(self) -> bytes:
        """
        Serialize to raw HTTP/1.1 bytes.

        Adds Content-Length when the headers do not carry one.
        """
        headers = dict(self.headers)
        if "Content-Length" not in headers:
            headers["Content-Length"] = str(self.content_length)

        lines = [self.status_line]
        lines.extend(f"{name}: {value}" for name, value in headers.items())
        lines.append("")

        return "\r\n".join(lines).encode(ENCODING) + b"\r\n" + self.body.encode(ENCODING)


# =============================================================================
# RESPONSE CONSTRUCTION
# =============================================================================

def respond(
    body: str = "OK",
    status: int = HTTPStatus.OK,
    headers: Optional[Mapping[str, str]] = None,
) -> Response:
    """
    Build a response with the default headers and a computed Content-Length.

    Args:
        body: Response body text
        status: Status code (default 200)
        headers: Caller headers; these override the defaults and the
                 computed Content-Length

    Returns:
        The constructed Response
    """
    merged: Dict[str, str] = dict(DEFAULT_HEADERS)
    merged["Content-Length"] = str(byte_length(body))
    if headers:
        merged.update(headers)
    return Response(status=status, headers=merged, body=body)


def not_found() -> Response:
    """404 - the action found nothing to return."""
    return respond("Not Found", status=HTTPStatus.NOT_FOUND)


def unprocessable() -> Response:
    """422 - the action refused the submitted parameters."""
    return respond("Unprocessable Entity", status=HTTPStatus.UNPROCESSABLE_ENTITY)


def internal_error() -> Response:
    """500 - generic body, never carries exception details."""
    return respond("Internal Server Error", status=HTTPStatus.INTERNAL_SERVER_ERROR)


def not_implemented() -> Response:
    """501 - no action for this verb, or the resource does not define it."""
    return respond("Not Implemented", status=HTTPStatus.NOT_IMPLEMENTED)
