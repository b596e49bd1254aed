"""
=============================================================================
HANDLER CONTRACT
=============================================================================

A handler is anything with a handle(request) -> Response method. There is
no base class to inherit from: Resource subclasses satisfy the contract,
and so does any plain object with the right method.

    class Ping:
        def handle(self, request):
            return respond("pong")

    ensure_handler(Ping())      # ok
    ensure_handler(object())    # NotAHandler

The check happens when a request is dispatched, not when a factory is
registered, so a registry can hold factories whose products are only
known at call time.

=============================================================================
"""

from typing import Callable, Protocol, runtime_checkable

from .request import Request
from .response import Response
from ..errors import NotAHandler


@runtime_checkable
class Handler(Protocol):
    """Structural type for request handlers."""

    def handle(self, request: Request) -> Response:
        ...


# The function form of a handler, used by the middleware pipeline
HandlerFunc = Callable[[Request], Response]


def ensure_handler(candidate: object) -> Handler:
    """
    Check that candidate satisfies the handler contract.

    Args:
        candidate: Object produced by a resource factory

    Returns:
        The same object, typed as a Handler

    Raises:
        NotAHandler: If candidate has no callable handle attribute.
    """
    if not callable(getattr(candidate, "handle", None)):
        raise NotAHandler(candidate)
    return candidate
