"""
Pydantic schemas for comments.

Comments are grouped by the identifier of the post they belong to.
The post identifier is part of the URL, not of the payload, and is
never checked against the posts service.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Schema for adding a comment to a post."""

    content: Any = Field(None, description="Text of the comment")


class CommentRead(BaseModel):
    """Schema for reading a comment."""

    id: str = Field(..., description="8 character hex identifier")
    content: Any = None

    model_config = ConfigDict(frozen=True)
