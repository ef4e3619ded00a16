"""
Pydantic schemas for posts.

A post is an identifier generated by the service and a free‑text
title supplied by the client.  Both are immutable once created.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    """Schema for creating a new post."""

    title: Any = Field(None, description="Title of the post")


class PostRead(BaseModel):
    """Schema for reading a post."""

    id: str = Field(..., description="8 character hex identifier")
    title: Any = None

    model_config = ConfigDict(frozen=True)
