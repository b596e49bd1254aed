"""
=============================================================================
VERB DISPATCHER
=============================================================================

Maps an HTTP method plus "does the path carry an identifier?" to the name
of the resource action that should run.

=============================================================================
DISPATCH TABLE
=============================================================================

    method   identifier   action
    ──────   ──────────   ──────
    GET      no           list
    GET      yes          read
    PUT      either       create
    POST     yes          update
    POST     no           -
    DELETE   yes          delete
    DELETE   no           -
    other    either       -

"-" means no action: the lookup returns None and the resource answers
501 Not Implemented. resolve_action() itself never raises.

=============================================================================
"""

from enum import Enum
from typing import Dict, Optional, Tuple


class Action(Enum):
    """Resource actions; the value is the method name on the resource."""

    LIST = "list"
    READ = "read"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


# (method, identifier present) → action. PUT is listed for both states.
DISPATCH_TABLE: Dict[Tuple[str, bool], Action] = {
    ("GET", False): Action.LIST,
    ("GET", True): Action.READ,
    ("PUT", False): Action.CREATE,
    ("PUT", True): Action.CREATE,
    ("POST", True): Action.UPDATE,
    ("DELETE", True): Action.DELETE,
}


def resolve_action(method: str, identifier_present: bool) -> Optional[Action]:
    """
    Resolve the action for a request.

    Args:
        method: HTTP method, any case
        identifier_present: Whether the path carried an identifier

    Returns:
        The Action to run, or None when the combination has no action
    """
    return DISPATCH_TABLE.get((method.upper(), bool(identifier_present)))
