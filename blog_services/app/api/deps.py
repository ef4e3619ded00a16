"""Dependencies resolving the store owned by the current application."""

import logging

from fastapi import Request

from ..core.errors import StoreUnavailableError
from ..services.comment_store import CommentStore
from ..services.post_store import PostStore

logger = logging.getLogger(__name__)


def get_post_store(request: Request) -> PostStore:
    store = getattr(request.app.state, "post_store", None)
    if not isinstance(store, PostStore):
        logger.error("Post store not initialised on this application.")
        raise StoreUnavailableError("Post store unavailable")
    return store


def get_comment_store(request: Request) -> CommentStore:
    store = getattr(request.app.state, "comment_store", None)
    if not isinstance(store, CommentStore):
        logger.error("Comment store not initialised on this application.")
        raise StoreUnavailableError("Comment store unavailable")
    return store
