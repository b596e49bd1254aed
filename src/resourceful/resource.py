"""
=============================================================================
RESOURCE BASE
=============================================================================

A Resource is created for one request, bound to the identifier and the
parameters of that request, runs exactly one action and is discarded.

    class Posts(Resource):
        def list(self):
            return ", ".join(store.titles())

        def read(self, id):
            post = store.get(id)
            return post and self.respond(post.to_json(),
                                         headers={"Content-Type": "application/json"})

    Posts("5", {}).handle(Request("GET", "/posts/5", identifier="5"))

=============================================================================
ACTION INVOCATION
=============================================================================

    resolve_action(method, has id)
        │
        ├── None ───────────────────────────────► 501 Not Implemented
        ▼
    action_table()[action]
        │
        ├── not defined (ActionNotDefined) ─────► 501 Not Implemented
        ▼
    action(id) or action()
        │
        ├── raises ─────────────────────────────► 500 Internal Server Error
        ├── returns falsy ──────────────────────► 404 Not Found
        ├── returns Response ───────────────────► as is
        └── returns str ────────────────────────► respond(str)

Every failure inside handle() becomes a response; nothing propagates to
the caller. 500 responses use a fixed body so exception text never leaks
to the client; the traceback goes to the log instead.

=============================================================================
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from .dispatch import Action, resolve_action
from .errors import ActionNotDefined
from .http.request import Request
from .http.response import (
    Response,
    respond,
    not_found,
    unprocessable,
    internal_error,
    not_implemented,
)
from .http.status_codes import HTTPStatus


logger = logging.getLogger(__name__)


class Resource:
    """
    Base class for resources.

    Subclasses define any of list(), read(id), create() / create(id),
    update(id) and delete(id). Only the actions a subclass defines are
    reachable; the rest answer 501.
    """

    def __init__(self, identifier: Optional[str] = None, parameters: Optional[Mapping[str, str]] = None):
        self._id = identifier
        self._params: Dict[str, str] = dict(parameters or {})
        self.request: Optional[Request] = None

    @property
    def id(self) -> Optional[str]:
        """Identifier from the request path, or None."""
        return self._id

    @property
    def params(self) -> Dict[str, str]:
        """Parameters bound to this resource."""
        return self._params

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r})"

    # =========================================================================
    # DISPATCH
    # =========================================================================

    def action_table(self) -> Dict[Action, Callable[..., Any]]:
        """
        Map each action this resource defines to its bound method.

        Attributes inherited from Resource itself are never actions, so a
        subclass only answers the verbs it implements.
        """
        table = {}
        for action in Action:
            if hasattr(Resource, action.value):
                continue
            method = getattr(self, action.value, None)
            if callable(method):
                table[action] = method
        return table

    def invoke(self, action: Action) -> Any:
        """
        Run an action with the identifier, when there is one.

        Raises:
            ActionNotDefined: If this resource does not define the action.
        """
        method = self.action_table().get(action)
        if method is None:
            raise ActionNotDefined(type(self).__name__, action.value)

        if self._id is None:
            return method()
        return method(self._id)

    def handle(self, request: Request) -> Response:
        """
        Run the action for request and normalise its result.

        Never raises; every failure is converted to a response.
        """
        self.request = request
        action = resolve_action(request.method, self._id is not None)
        if action is None:
            logger.debug(f"No action for {request.method} {request.path}")
            return self.not_implemented()

        try:
            return self._to_response(self.invoke(action))
        except ActionNotDefined as e:
            logger.debug(str(e))
            return self.not_implemented()
        except Exception:
            logger.exception(f"{type(self).__name__}.{action.value} failed for {request.method} {request.path}")
            return self.internal_error()

    def _to_response(self, result: Any) -> Response:
        if not result:
            return self.not_found()
        if isinstance(result, Response):
            return result
        if isinstance(result, str):
            return self.respond(result)
        raise TypeError(
            f"{type(self).__name__} action returned {type(result).__name__}, "
            f"expected Response or str"
        )

    # =========================================================================
    # RESPONSE HELPERS
    # =========================================================================

    def respond(
        self,
        body: str = "OK",
        status: int = HTTPStatus.OK,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Response:
        """Build a response; see resourceful.http.response.respond."""
        return respond(body, status=status, headers=headers)

    def not_found(self) -> Response:
        return not_found()

    def unprocessable(self) -> Response:
        return unprocessable()

    def internal_error(self) -> Response:
        return internal_error()

    def not_implemented(self) -> Response:
        return not_implemented()
