# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Community, post and comment queries."""

import uuid

from sqlalchemy.orm import Session

from src.models import Comment, Community, Post
from src.schemas.community import CommentCreate, PostCreate


def get_community(db: Session, community_id: uuid.UUID) -> Community | None:
    """Get a community unless it has been soft-deleted."""
    return (
        db.query(Community)
        .filter(Community.id == community_id, Community.deleted_at.is_(None))
        .first()
    )


def list_posts(db: Session, community_id: uuid.UUID) -> list[Post]:
    """List visible posts of a community, newest first."""
    return (
        db.query(Post)
        .filter(Post.community_id == community_id, Post.deleted_at.is_(None))
        .order_by(Post.created_at.desc())
        .all()
    )


def get_post(
    db: Session,
    community_id: uuid.UUID,
    post_id: uuid.UUID,
) -> Post | None:
    """Get a post of a community unless it has been soft-deleted."""
    return (
        db.query(Post)
        .filter(
            Post.id == post_id,
            Post.community_id == community_id,
            Post.deleted_at.is_(None),
        )
        .first()
    )


def create_post(
    db: Session,
    community_id: uuid.UUID,
    data: PostCreate,
    created_by_id: uuid.UUID,
) -> Post:
    """Create a post owned by ``created_by_id``."""
    post = Post(
        community_id=community_id,
        title=data.title,
        content=data.content,
        created_by_id=created_by_id,
    )
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def list_comments(db: Session, post_id: uuid.UUID) -> list[Comment]:
    """List visible comments of a post, oldest first."""
    return (
        db.query(Comment)
        .filter(Comment.post_id == post_id, Comment.deleted_at.is_(None))
        .order_by(Comment.created_at)
        .all()
    )


def get_comment(
    db: Session,
    post_id: uuid.UUID,
    comment_id: uuid.UUID,
) -> Comment | None:
    """Get a comment of a post unless it has been soft-deleted."""
    return (
        db.query(Comment)
        .filter(
            Comment.id == comment_id,
            Comment.post_id == post_id,
            Comment.deleted_at.is_(None),
        )
        .first()
    )


def create_comment(
    db: Session,
    post_id: uuid.UUID,
    data: CommentCreate,
    created_by_id: uuid.UUID,
) -> Comment:
    """Create a comment owned by ``created_by_id``."""
    comment = Comment(
        post_id=post_id,
        content=data.content,
        created_by_id=created_by_id,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment
