# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Community, post and comment schemas."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field


class CommunityCreate(BaseModel):
    """Schema for creating a community."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None


class CommunityUpdate(BaseModel):
    """Schema for updating a community."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None


class CommunityResponse(BaseModel):
    """Schema for community response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    description: str | None
    created_at: datetime.datetime
    created_by_id: uuid.UUID | None


class PostCreate(BaseModel):
    """Schema for creating a post."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)


class PostUpdate(BaseModel):
    """Schema for updating a post."""

    title: str | None = Field(None, min_length=1, max_length=200)
    content: str | None = Field(None, min_length=1)


class PostResponse(BaseModel):
    """Schema for post response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    community_id: uuid.UUID
    title: str
    content: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
    created_by_id: uuid.UUID | None
    updated_by_id: uuid.UUID | None


class CommentCreate(BaseModel):
    """Schema for creating a comment."""

    content: str = Field(..., min_length=1, max_length=1000)


class CommentUpdate(BaseModel):
    """Schema for updating a comment."""

    content: str = Field(..., min_length=1, max_length=1000)


class CommentResponse(BaseModel):
    """Schema for comment response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    post_id: uuid.UUID
    content: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
    created_by_id: uuid.UUID | None
    updated_by_id: uuid.UUID | None
