"""
pytest configuration and fixtures.
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from resourceful import Application, Resource, ResourceRegistry, Request
from resourceful.demo import PostStore, demo_registry


class Widgets(Resource):
    """Resource exercising every outcome of Resource.handle."""

    def list(self):
        return "all widgets"

    def read(self, id):
        if id == "boom":
            raise RuntimeError("database password is hunter2")
        if id == "missing":
            return None
        return self.respond(f"widget {id}", headers={"X-Widget": id})

    def create(self, id=None):
        return self.respond("created", status=201)

    def delete(self, id):
        return ""


class Gadgets(Resource):
    """Resource that only defines read."""

    def read(self, id):
        return f"gadget {id}"


def make_request(method: str, path: str = "/widgets", identifier=None, **query) -> Request:
    """Helper to create a request for testing."""
    return Request(method=method, path=path, query=query, identifier=identifier, parameters=query)


@pytest.fixture
def registry() -> ResourceRegistry:
    """Registry with Widgets and Gadgets."""
    registry = ResourceRegistry()
    registry.register(Widgets)
    registry.register(Gadgets)
    return registry


@pytest.fixture
def app(registry: ResourceRegistry) -> Application:
    """Bare application (no middleware) over the test registry."""
    return Application(registry=registry)


@pytest.fixture
def post_store() -> PostStore:
    """Fresh, empty post store."""
    return PostStore()


@pytest.fixture
def posts_app(post_store: PostStore) -> Application:
    """Application serving the demo Posts resource on its own store."""
    return Application(registry=demo_registry(post_store))
