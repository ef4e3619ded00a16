"""
Post endpoints.

``GET /posts`` returns every post as an object keyed by identifier and
``POST /posts`` creates a post from ``{"title": ...}``.  Fields that are
absent on a record are left out of the response.
"""

from typing import Dict, Optional

from fastapi import APIRouter, Depends, status

from ...schemas.post import PostCreate, PostRead
from ...services.post_store import PostStore
from ..deps import get_post_store

router = APIRouter()


@router.get("/posts", response_model=Dict[str, PostRead], response_model_exclude_none=True)
async def list_posts(store: PostStore = Depends(get_post_store)) -> Dict[str, PostRead]:
    """Return all posts keyed by identifier."""
    return store.list_posts()


@router.post(
    "/posts",
    response_model=PostRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_post(
    post_in: Optional[PostCreate] = None,
    store: PostStore = Depends(get_post_store),
) -> PostRead:
    """Create a post and return it.

    A missing body is treated like an empty object, so the post is
    created without a title.
    """
    title = post_in.title if post_in is not None else None
    return store.create_post(title)
