"""
=============================================================================
BASE MIDDLEWARE INTERFACE
=============================================================================

Defines the middleware protocol and the pipeline that chains middleware
around the application's dispatch function.

=============================================================================
CHAIN OF RESPONSIBILITY
=============================================================================

Each middleware receives the request and the next handler in the chain.
It may answer directly (short-circuit) or call next and post-process what
comes back:

    Request ─────────────────────────────────────────────►

    ┌──────────┐    ┌──────────┐    ┌──────────────────┐
    │ Logging  │───►│  JSONP   │───►│ resource.handle  │
    └──────────┘    └──────────┘    └──────────────────┘

    ◄───────────────────────────────────────────── Response

Responses are immutable: post-processing returns a new Response (see
Response.replace / Response.with_headers) rather than editing in place.

=============================================================================
"""

import logging
from abc import ABC, abstractmethod
from typing import Callable, Iterator, List, Optional

from ..http.handler import HandlerFunc
from ..http.request import Request
from ..http.response import Response


logger = logging.getLogger(__name__)

# The next handler in the chain: takes a request, returns a response
NextHandler = HandlerFunc


class Middleware(ABC):
    """
    Abstract base class for middleware.

        class Stamp(Middleware):
            def __call__(self, request, next):
                response = next(request)
                return response.with_headers({"X-Stamp": "1"})
    """

    @abstractmethod
    def __call__(self, request: Request, next: NextHandler) -> Response:
        """
        Process the request.

        Args:
            request: The incoming request
            next: The next handler in the chain

        Returns:
            Response from next() or a short-circuited one
        """

    @property
    def name(self) -> str:
        """Get the middleware name for logging."""
        return self.__class__.__name__


class MiddlewarePipeline:
    """
    Chains middleware together around a final handler.

    First added is outermost: with [A, B] and handler h, a request runs
    A → B → h and the response flows back h → B → A.

        pipeline = MiddlewarePipeline()
        pipeline.use(LoggingMiddleware(), JSONPMiddleware())
        handler = pipeline.wrap(app.call_resource)
    """

    def __init__(self):
        self._middleware: List[Middleware] = []

    def add(self, middleware: Middleware) -> "MiddlewarePipeline":
        """
        Add middleware to the pipeline.

        Returns:
            Self for method chaining
        """
        self._middleware.append(middleware)
        logger.debug(f"Added middleware: {middleware.name}")
        return self

    def use(self, *middleware: Middleware) -> "MiddlewarePipeline":
        """Add several middleware at once, in order."""
        for mw in middleware:
            self.add(mw)
        return self

    def wrap(self, handler: NextHandler) -> NextHandler:
        """
        Wrap handler with all middleware in the pipeline.

        Wraps in reverse order so the first-added middleware ends up
        outermost: A(B(C(handler))).
        """
        current = handler
        for middleware in reversed(self._middleware):
            current = self._create_wrapped_handler(middleware, current)
        return current

    def _create_wrapped_handler(
        self,
        middleware: Middleware,
        next_handler: NextHandler
    ) -> NextHandler:
        def wrapped(request: Request) -> Response:
            return middleware(request, next_handler)

        return wrapped

    def __len__(self) -> int:
        return len(self._middleware)

    def __iter__(self) -> Iterator[Middleware]:
        return iter(self._middleware)


class FunctionMiddleware(Middleware):
    """
    Wraps a plain function (request, next) → response as middleware.

        pipeline.add(FunctionMiddleware(my_func, name="my_func"))
    """

    def __init__(
        self,
        func: Callable[[Request, NextHandler], Response],
        name: Optional[str] = None
    ):
        self._func = func
        self._name = name or func.__name__

    def __call__(self, request: Request, next: NextHandler) -> Response:
        return self._func(request, next)

    @property
    def name(self) -> str:
        return self._name


def function_middleware(
    func: Callable[[Request, NextHandler], Response]
) -> FunctionMiddleware:
    """
    Decorator to create middleware from a function.

        @function_middleware
        def powered_by(request, next):
            return next(request).with_headers({"X-Powered-By": "resourceful"})

        app.use(powered_by)
    """
    return FunctionMiddleware(func)
