"""
=============================================================================
REQUEST
=============================================================================

The request a resource sees: method, path, parsed query string, the
identifier taken from the path, and the parameters bound to the resource.

=============================================================================
REQUEST LIFECYCLE
=============================================================================

    dispatch("/posts/5", "GET", "page=2")
        │
        ├── parse_query("page=2")          → {"page": "2"}
        ├── PathRouter.parse("/posts/5")   → ("Posts", "5")
        │
        ▼
    Request(method="GET", path="/posts/5", query={"page": "2"},
            identifier="5", parameters={"page": "2"})

A Request is immutable once constructed: the dataclass is frozen and the
mappings are exposed read-only, so middleware and resources can share it
without copying.

=============================================================================
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Dict
from urllib.parse import parse_qsl


def parse_query(query_string: Optional[str]) -> Dict[str, str]:
    """
    Parse a query string into a flat name → value mapping.

    Percent-escapes and "+" are decoded, blank values are kept, and when a
    name repeats the last value wins:

        parse_query("a=1&b=&a=2")  →  {"a": "2", "b": ""}

    Args:
        query_string: Raw query string without the leading "?" (may be
                      None or empty).

    Returns:
        Dictionary of parameter names to values, in first-seen order.
    """
    if not query_string:
        return {}

    params: Dict[str, str] = {}
    for name, value in parse_qsl(query_string, keep_blank_values=True):
        params[name] = value
    return params


@dataclass(frozen=True)
class Request:
    """
    An incoming request bound for a single resource.

    Attributes:
        method:     HTTP method, upper-cased on construction
        path:       Raw request path ("/posts/5")
        query:      Parsed query string
        identifier: Identifier segment of the path, or None
        parameters: Parameters handed to the resource
    """

    method: str
    path: str
    query: Mapping[str, str] = field(default_factory=dict)
    identifier: Optional[str] = None
    parameters: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        # frozen=True blocks normal assignment, so normalise via object.__setattr__
        object.__setattr__(self, "method", self.method.upper())
        object.__setattr__(self, "query", MappingProxyType(dict(self.query)))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    @property
    def has_identifier(self) -> bool:
        """True when the path carried an identifier segment."""
        return self.identifier is not None

    def get_query(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get a query parameter value, or default if absent."""
        return self.query.get(name, default)
