"""
=============================================================================
APPLICATION
=============================================================================

Ties the pieces together: the path router, the resource registry, the
middleware pipeline and the resources themselves.

=============================================================================
REQUEST FLOW
=============================================================================

    dispatch("/posts/5", "GET", "page=2")
        │
        ├── PathRouter.parse            → ("Posts", "5")   or RouteNotFound
        ├── ResourceRegistry.lookup     → Posts            or RouteNotFound
        ├── Request(...)
        ▼
    middleware pipeline (first added = outermost)
        ▼
    factory("5", {"page": "2"})         → a fresh Posts resource
    ensure_handler(resource)            →                  or NotAHandler
    resource.handle(request)            → Response (never raises)

RouteNotFound and NotAHandler are the only errors dispatch() raises; a
failing action is already a 500 response by the time it leaves handle().

=============================================================================
WSGI
=============================================================================

An Application is also a WSGI callable, so any WSGI server can host it:

    app = create_app()
    app.register(Posts)

    from wsgiref.simple_server import make_server
    make_server("127.0.0.1", 8080, app).serve_forever()

The WSGI layer is where dispatch errors become responses: RouteNotFound
answers 404, NotAHandler answers 500.

=============================================================================
"""

import logging
from typing import Callable, Iterable, List, Optional, Tuple

from .config import AppConfig
from .errors import RouteNotFound, NotAHandler
from .http.handler import HandlerFunc, ensure_handler
from .http.request import Request, parse_query
from .http.response import Response, ENCODING, not_found, internal_error
from .middleware import MiddlewarePipeline, Middleware, LoggingMiddleware, JSONPMiddleware
from .router import PathRouter, ResourceRegistry, ResourceFactory


logger = logging.getLogger(__name__)

StartResponse = Callable[[str, List[Tuple[str, str]]], object]


class Application:
    """
    Resource-oriented request dispatcher.

        app = Application()

        @app.resource
        class Posts(Resource):
            def list(self):
                return "all posts"

        app.dispatch("/posts", "GET", "").status   # 200
    """

    def __init__(
        self,
        config: Optional[AppConfig] = None,
        registry: Optional[ResourceRegistry] = None,
        router: Optional[PathRouter] = None,
    ):
        """
        Args:
            config: Application settings; defaults are used if omitted
            registry: Resource registry to share, or a new empty one
            router: Path router, or the default flat router
        """
        self.config = config or AppConfig()
        self.config.validate()

        self.registry = registry if registry is not None else ResourceRegistry()
        self.router = router or PathRouter()
        self._middleware = MiddlewarePipeline()

    # =========================================================================
    # CONFIGURATION
    # =========================================================================

    def register(self, factory: ResourceFactory, name: Optional[str] = None) -> ResourceFactory:
        """Register a resource factory; see ResourceRegistry.register."""
        return self.registry.register(factory, name)

    def resource(self, factory: ResourceFactory) -> ResourceFactory:
        """Decorator registering a resource under its own name."""
        return self.registry.resource(factory)

    def use(self, middleware: Middleware) -> "Application":
        """
        Add middleware around every resource call.

        Returns:
            Self for method chaining
        """
        self._middleware.add(middleware)
        return self

    @property
    def middleware(self) -> MiddlewarePipeline:
        return self._middleware

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def dispatch(self, raw_path: str, method: str, query_string: str = "") -> Response:
        """
        Route a request to a fresh resource and return its response.

        Args:
            raw_path: Request path without query string
            method: HTTP method
            query_string: Raw query string without "?"

        Returns:
            Exactly one Response

        Raises:
            RouteNotFound: If the path does not name a registered resource.
            NotAHandler: If the resource factory produced something
                         without a callable handle().
        """
        name, identifier = self.router.parse(raw_path)
        factory = self.registry.lookup(name)

        query = parse_query(query_string)
        request = Request(
            method=method,
            path=raw_path,
            query=query,
            identifier=identifier,
            parameters=query,
        )

        return self._middleware.wrap(self._resource_handler(factory))(request)

    def _resource_handler(self, factory: ResourceFactory) -> HandlerFunc:
        def call_resource(request: Request) -> Response:
            handler = ensure_handler(factory(request.identifier, request.parameters))
            return handler.handle(request)

        return call_resource

    # =========================================================================
    # WSGI
    # =========================================================================

    def __call__(self, environ: dict, start_response: StartResponse) -> Iterable[bytes]:
        """WSGI entry point."""
        path = environ.get("PATH_INFO", "")
        method = environ.get("REQUEST_METHOD", "GET")

        try:
            response = self.dispatch(path, method, environ.get("QUERY_STRING", ""))
        except RouteNotFound as e:
            logger.info(f"{method} {path}: {e}")
            response = not_found()
        except NotAHandler:
            logger.exception(f"{method} {path}: resource is not a handler")
            response = internal_error()

        start_response(response.wsgi_status, response.header_items())
        return [response.body.encode(ENCODING)]


def create_app(
    config: Optional[AppConfig] = None,
    registry: Optional[ResourceRegistry] = None,
) -> Application:
    """
    Create an Application with the middleware config asks for.

    Access logging is always installed; JSON-P padding when config.jsonp.
    """
    app = Application(config, registry=registry)
    app.use(LoggingMiddleware(log_format=app.config.log_format))
    if app.config.jsonp:
        app.use(JSONPMiddleware(param=app.config.jsonp_param))
    return app
