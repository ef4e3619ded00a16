"""
In‑memory storage for posts.

``PostStore`` keeps every post in a dictionary keyed by its
identifier.  Posts are only ever added; there is no update or delete.
The dictionary lives as long as the store object, which the posts
application creates once at startup.
"""

import logging
from threading import Lock
from typing import Any, Dict

from ..core.errors import ValidationError
from ..schemas.post import PostRead
from .ids import DEFAULT_ID_BYTES, generate_id


class PostStore:
    """Mapping of post identifier to post.

    Every read and write holds the store's lock, so one store may be
    shared between threads.
    """

    def __init__(self, id_bytes: int = DEFAULT_ID_BYTES, strict: bool = False) -> None:
        self.id_bytes = id_bytes
        self.strict = strict
        self._posts: Dict[str, PostRead] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def __contains__(self, post_id: object) -> bool:
        with self._lock:
            return post_id in self._posts

    def list_posts(self) -> Dict[str, PostRead]:
        """Return a snapshot of all posts keyed by identifier."""
        with self._lock:
            return dict(self._posts)

    def create_post(self, title: Any = None) -> PostRead:
        """Create a post with a fresh identifier and return it.

        ``title`` is stored as given, including ``None``.  In strict
        mode a missing title raises ``ValidationError``.
        """
        if self.strict and title is None:
            raise ValidationError("Field 'title' is required")
        logger = logging.getLogger(__name__)
        with self._lock:
            post_id = generate_id(self.id_bytes, taken=self._posts)
            post = PostRead(id=post_id, title=title)
            self._posts[post_id] = post
        logger.info("Created post %s", post_id)
        return post
