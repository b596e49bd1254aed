"""
=============================================================================
RESOURCEFUL - Resource-Oriented Request Dispatch
=============================================================================

Map HTTP verbs onto CRUD-style actions of small per-request resource
objects:

    GET    /posts      → Posts().list()
    GET    /posts/5    → Posts("5").read("5")
    PUT    /posts      → Posts().create()
    POST   /posts/5    → Posts("5").update("5")
    DELETE /posts/5    → Posts("5").delete("5")

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    resourceful/
    ├── app.py          Application: dispatch(), middleware, WSGI
    ├── router.py       PathRouter, ResourceRegistry
    ├── dispatch.py     Action, resolve_action (verb table)
    ├── resource.py     Resource base class
    ├── errors.py       RouteNotFound, NotAHandler, ActionNotDefined
    ├── config.py       AppConfig, configure_logging
    ├── http/           Request, Response, Handler, HTTPStatus
    └── middleware/     pipeline, access logging, JSON-P

=============================================================================
QUICK START
=============================================================================

    from resourceful import Resource, create_app

    app = create_app()

    @app.resource
    class Posts(Resource):
        def list(self):
            return "first post, second post"

        def read(self, id):
            return f"post {id}"

    response = app.dispatch("/posts/5", "GET", "")
    response.status     # 200
    response.body       # "post 5"

=============================================================================
"""

__version__ = "0.1.0"

from .app import Application, create_app
from .config import AppConfig, configure_logging
from .dispatch import Action, resolve_action
from .errors import DispatchError, RouteNotFound, NotAHandler, ActionNotDefined
from .http import Request, Response, Handler, HTTPStatus, respond, ensure_handler
from .resource import Resource
from .router import PathRouter, ResourceRegistry

__all__ = [
    "Application",
    "create_app",
    "AppConfig",
    "configure_logging",
    "Action",
    "resolve_action",
    "DispatchError",
    "RouteNotFound",
    "NotAHandler",
    "ActionNotDefined",
    "Request",
    "Response",
    "Handler",
    "HTTPStatus",
    "respond",
    "ensure_handler",
    "Resource",
    "PathRouter",
    "ResourceRegistry",
    "__version__",
]
