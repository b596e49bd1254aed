"""
=============================================================================
DEMO: IN-MEMORY POSTS
=============================================================================

A complete resource backed by an in-memory store, served by
`python -m resourceful`:

    curl -X PUT    'localhost:8080/posts?title=Hello&body=First'
    curl           'localhost:8080/posts'
    curl           'localhost:8080/posts/1'
    curl -X POST   'localhost:8080/posts/1?title=Hi'
    curl -X DELETE 'localhost:8080/posts/1'

=============================================================================
"""

import itertools
import json
import threading
from dataclasses import dataclass, asdict
from typing import Dict, List, Mapping, Optional

from .resource import Resource
from .router import ResourceRegistry


JSON_HEADERS = {"Content-Type": "application/json"}


@dataclass
class Post:
    id: str
    title: str
    body: str = ""

    def to_json(self) -> str:
        return json.dumps(asdict(self))


class PostStore:
    """Thread-safe in-memory post storage with sequential ids."""

    def __init__(self):
        self._posts: Dict[str, Post] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def all(self) -> List[Post]:
        with self._lock:
            return list(self._posts.values())

    def find(self, post_id: str) -> Optional[Post]:
        with self._lock:
            return self._posts.get(post_id)

    def create(self, params: Mapping[str, str]) -> Optional[Post]:
        """Create a post; returns None when the title is missing."""
        title = params.get("title", "").strip()
        if not title:
            return None
        with self._lock:
            post = Post(id=str(next(self._ids)), title=title, body=params.get("body", ""))
            self._posts[post.id] = post
            return post

    def update(self, post: Post, params: Mapping[str, str]) -> bool:
        """Apply title/body from params; an explicitly blank title is rejected."""
        if "title" in params and not params["title"].strip():
            return False
        with self._lock:
            post.title = params.get("title", post.title).strip()
            post.body = params.get("body", post.body)
        return True

    def destroy(self, post_id: str) -> bool:
        with self._lock:
            return self._posts.pop(post_id, None) is not None


class Posts(Resource):
    """CRUD over a PostStore, JSON bodies."""

    store = PostStore()

    def list(self):
        body = json.dumps([asdict(post) for post in self.store.all()])
        return self.respond(body, headers=JSON_HEADERS)

    def read(self, id):
        post = self.store.find(id)
        return post and self.respond(post.to_json(), headers=JSON_HEADERS)

    def create(self, id=None):
        post = self.store.create(self.params)
        if post is None:
            return self.unprocessable()
        return self.respond(post.to_json(), status=201, headers=JSON_HEADERS)

    def update(self, id):
        post = self.store.find(id)
        if post is None:
            return None
        if not self.store.update(post, self.params):
            return self.unprocessable()
        return self.respond(post.to_json(), headers=JSON_HEADERS)

    def delete(self, id):
        return self.store.destroy(id) and self.respond()


def demo_registry(store: Optional[PostStore] = None) -> ResourceRegistry:
    """Registry holding the Posts resource, optionally bound to its own store."""
    registry = ResourceRegistry()
    if store is None:
        registry.register(Posts)
    else:
        registry.register(type("Posts", (Posts,), {"store": store}))
    return registry
