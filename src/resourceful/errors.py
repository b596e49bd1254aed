"""
=============================================================================
DISPATCH ERRORS
=============================================================================

Errors raised while turning a raw path into a resource call.

    DispatchError                   base, carries an HTTP status_code
    ├── RouteNotFound     (404)     bad path shape or unknown resource
    └── NotAHandler       (500)     resolved object cannot handle requests

    ActionNotDefined                resource lacks the resolved action;
                                    never escapes Resource.handle (-> 501)

RouteNotFound and NotAHandler surface to the caller of dispatch(); they
are errors of the application wiring, not of a single request's action.
Like HTTPParseError in a socket server, they carry the status a transport
should answer with if it chooses to convert them.

=============================================================================
"""

from typing import Optional


class DispatchError(Exception):
    """Base class for errors raised at dispatch time."""

    status_code = 500

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class RouteNotFound(DispatchError):
    """
    Raised when a path does not name a registered resource.

    Covers both a path that does not have the /resource[/identifier]
    shape and a well-formed path whose resource name is not registered.
    """

    status_code = 404

    def __init__(self, path: str, reason: str = "no route matches"):
        super().__init__(f"{reason}: {path!r}")
        self.path = path


class NotAHandler(DispatchError, TypeError):
    """Raised when a resolved object has no callable handle()."""

    def __init__(self, candidate: object):
        super().__init__(
            f"{type(candidate).__name__} object is not a handler "
            f"(missing callable 'handle')"
        )
        self.candidate = candidate


class ActionNotDefined(Exception):
    """Raised when a resource does not define the resolved action."""

    def __init__(self, resource: str, action: str):
        super().__init__(f"{resource} does not define action {action!r}")
        self.resource = resource
        self.action = action
