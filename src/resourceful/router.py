"""
=============================================================================
PATH ROUTER
=============================================================================

Resolves a raw path to a resource factory and an optional identifier.

=============================================================================
PATH SHAPE
=============================================================================

The namespace is flat: one resource segment and at most one identifier.

    /posts          → ("Posts", None)
    /posts/5        → ("Posts", "5")
    posts/5/        → ("Posts", "5")        leading/trailing slash optional
    /               → RouteNotFound
    /posts/5/edit   → RouteNotFound         no nested segments

Segments are word characters only ([A-Za-z0-9_]). The resource segment is
normalised to a type name with str.capitalize(), so "posts" and "POSTS"
both name the "Posts" resource.

=============================================================================
REGISTRY
=============================================================================

Resources are not looked up by scanning modules or globals. They are
registered up front, under their normalised name:

    registry = ResourceRegistry()

    @registry.resource
    class Posts(Resource):
        ...

    registry.register(Comments)                 # same, without decorator
    registry.register(make_feed, name="feed")   # any factory(id, params)

Registration happens at startup; afterwards the registry is only read, so
it is safe to share across request threads.

=============================================================================
"""

import logging
import re
from typing import Callable, Dict, List, Mapping, Optional, Tuple

from .errors import RouteNotFound


logger = logging.getLogger(__name__)

# Factory signature: (identifier, parameters) → handler (normally a Resource)
ResourceFactory = Callable[[Optional[str], Mapping[str, str]], object]


def normalize_name(name: str) -> str:
    """Turn a path segment or class name into a registry key ("posts" → "Posts")."""
    return name.capitalize()


class PathRouter:
    """
    Splits a path into (resource name, identifier).

    The pattern is fixed: group 1 is the resource segment, group 3 the
    identifier. Anything that does not match the whole path is rejected.
    """

    PATH_PATTERN = re.compile(r"/?(\w+)(/(\w+))?/?", re.ASCII)

    def parse(self, path: str) -> Tuple[str, Optional[str]]:
        """
        Parse a raw path.

        Args:
            path: Request path without query string

        Returns:
            Tuple of (normalised resource name, identifier or None)

        Raises:
            RouteNotFound: If the path is not /resource or /resource/id.
        """
        match = self.PATH_PATTERN.fullmatch(path or "")
        if not match:
            raise RouteNotFound(path, "path does not name a resource")

        resource, _, identifier = match.groups()
        return normalize_name(resource), identifier


class ResourceRegistry:
    """
    Explicit mapping from resource name to factory.

    Lookups are by exact (normalised) name.
    """

    def __init__(self):
        self._factories: Dict[str, ResourceFactory] = {}

    def register(self, factory: ResourceFactory, name: Optional[str] = None) -> ResourceFactory:
        """
        Register a factory under name, or under the factory's own name.

        Args:
            factory: Resource class or any callable(identifier, parameters)
            name: Resource name; defaults to factory.__name__

        Returns:
            The factory, unchanged

        Raises:
            ValueError: If no name can be derived or it is already taken.
        """
        key = normalize_name(name or getattr(factory, "__name__", ""))
        if not key:
            raise ValueError(f"Cannot derive a resource name for {factory!r}")
        if key in self._factories:
            raise ValueError(f"Resource {key!r} is already registered")

        self._factories[key] = factory
        logger.debug(f"Registered resource {key}")
        return factory

    def resource(self, factory: ResourceFactory) -> ResourceFactory:
        """Decorator form of register() using the factory's own name."""
        return self.register(factory)

    def lookup(self, name: str) -> ResourceFactory:
        """
        Get the factory registered under name.

        Raises:
            RouteNotFound: If no resource is registered under name.
        """
        try:
            return self._factories[name]
        except KeyError:
            raise RouteNotFound(name, "unknown resource") from None

    def names(self) -> List[str]:
        """Registered resource names, in registration order."""
        return list(self._factories)

    def __contains__(self, name: str) -> bool:
        return name in self._factories

    def __len__(self) -> int:
        return len(self._factories)
