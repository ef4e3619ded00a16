"""
In‑memory storage for comments.

``CommentStore`` groups comments by post identifier.  Each group is an
append‑only list kept in creation order.  The post identifier is an
opaque key: comments can be added under any identifier, whether or
not such a post exists.
"""

import logging
from threading import Lock
from typing import Any, Dict, List

from ..core.errors import ValidationError
from ..schemas.comment import CommentRead
from .ids import DEFAULT_ID_BYTES, generate_id


class CommentStore:
    """Mapping of post identifier to its ordered list of comments.

    Guarded by a lock in the same way as ``PostStore``.
    """

    def __init__(self, id_bytes: int = DEFAULT_ID_BYTES, strict: bool = False) -> None:
        self.id_bytes = id_bytes
        self.strict = strict
        self._comments_by_post_id: Dict[str, List[CommentRead]] = {}
        self._lock = Lock()

    def __len__(self) -> int:
        """Number of post identifiers that have at least one comment."""
        with self._lock:
            return len(self._comments_by_post_id)

    def list_comments(self, post_id: str) -> List[CommentRead]:
        """Return the comments for ``post_id``, oldest first.

        Unknown identifiers yield an empty list and are not added to
        the store.
        """
        with self._lock:
            return list(self._comments_by_post_id.get(post_id, []))

    def add_comment(self, post_id: str, content: Any = None) -> List[CommentRead]:
        """Append a comment under ``post_id`` and return the full list.

        The returned list is equal to what ``list_comments`` gives
        right afterwards.
        """
        if self.strict and content is None:
            raise ValidationError("Field 'content' is required")
        logger = logging.getLogger(__name__)
        with self._lock:
            existing = self._comments_by_post_id.get(post_id, [])
            comment_id = generate_id(self.id_bytes, taken={c.id for c in existing})
            comments = self._comments_by_post_id.setdefault(post_id, existing)
            comments.append(CommentRead(id=comment_id, content=content))
            snapshot = list(comments)
        logger.info("Added comment %s to post %s", comment_id, post_id)
        return snapshot
