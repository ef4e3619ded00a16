"""
Comment endpoints.

Comments are addressed through the post they belong to.  Creating a
comment answers with the whole list for that post, so clients do not
need a second request to refresh it.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from ...schemas.comment import CommentCreate, CommentRead
from ...services.comment_store import CommentStore
from ..deps import get_comment_store

router = APIRouter()


@router.get(
    "/posts/{post_id}/comments",
    response_model=List[CommentRead],
    response_model_exclude_none=True,
)
async def list_comments(
    post_id: str,
    store: CommentStore = Depends(get_comment_store),
) -> List[CommentRead]:
    """Return the comments of a post, oldest first (empty if none)."""
    return store.list_comments(post_id)


@router.post(
    "/posts/{post_id}/comments",
    response_model=List[CommentRead],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    comment_in: Optional[CommentCreate] = None,
    store: CommentStore = Depends(get_comment_store),
) -> List[CommentRead]:
    """Add a comment to a post and return all of its comments."""
    content = comment_in.content if comment_in is not None else None
    return store.add_comment(post_id, content)
