# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Community, post and comment API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require
from src.models import Comment, Community, Post
from src.rbac.access import CallerContext, OwnershipFact
from src.rbac.guard import enforce, policy
from src.rbac.permissions import Permission
from src.schemas.community import (
    CommentCreate,
    CommentResponse,
    CommentUpdate,
    CommunityCreate,
    CommunityResponse,
    CommunityUpdate,
    PostCreate,
    PostResponse,
    PostUpdate,
)
from src.services import community_service, crud_service

router = APIRouter()

COMMUNITIES_LIST = policy("communities.list", Permission.COMMUNITIES_READ, resource="communities")
COMMUNITIES_CREATE = policy("communities.create", Permission.COMMUNITIES_CREATE, resource="communities")
COMMUNITIES_UPDATE = policy("communities.update", Permission.COMMUNITIES_UPDATE, resource="communities")
COMMUNITIES_DELETE = policy("communities.delete", Permission.COMMUNITIES_DELETE, resource="communities")

POSTS_LIST = policy("posts.list", Permission.POSTS_READ, resource="posts")
POSTS_CREATE = policy("posts.create", Permission.POSTS_CREATE, resource="posts")
POSTS_UPDATE = policy(
    "posts.update", Permission.POSTS_UPDATE, Permission.POSTS_OWN_UPDATE, resource="posts"
)
POSTS_DELETE = policy(
    "posts.delete", Permission.POSTS_DELETE, Permission.POSTS_OWN_DELETE, resource="posts"
)

COMMENTS_LIST = policy("comments.list", Permission.COMMENTS_READ, resource="comments")
COMMENTS_CREATE = policy("comments.create", Permission.COMMENTS_CREATE, resource="comments")
COMMENTS_UPDATE = policy(
    "comments.update",
    Permission.COMMENTS_UPDATE,
    Permission.COMMENTS_OWN_UPDATE,
    resource="comments",
)
COMMENTS_DELETE = policy(
    "comments.delete",
    Permission.COMMENTS_DELETE,
    Permission.COMMENTS_OWN_DELETE,
    resource="comments",
)


def _get_community_or_404(db: Session, community_id: uuid.UUID) -> Community:
    community = community_service.get_community(db, community_id)
    if not community:
        raise HTTPException(status_code=404, detail="Community not found")
    return community


def _get_post_or_404(db: Session, community_id: uuid.UUID, post_id: uuid.UUID) -> Post:
    _get_community_or_404(db, community_id)
    post = community_service.get_post(db, community_id, post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post


def _get_comment_or_404(
    db: Session,
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    comment_id: uuid.UUID,
) -> Comment:
    _get_post_or_404(db, community_id, post_id)
    comment = community_service.get_comment(db, post_id, comment_id)
    if not comment:
        raise HTTPException(status_code=404, detail="Comment not found")
    return comment


# Communities


@router.get("", response_model=list[CommunityResponse])
def list_communities(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMUNITIES_LIST)),
) -> list[CommunityResponse]:
    """List all communities."""
    return crud_service.list_active(db, Community, order_by=Community.name)


@router.get("/{community_id}", response_model=CommunityResponse)
def get_community(
    community_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMUNITIES_LIST)),
) -> CommunityResponse:
    """Get a community by ID."""
    return _get_community_or_404(db, community_id)


@router.post("", response_model=CommunityResponse, status_code=status.HTTP_201_CREATED)
def create_community(
    community_in: CommunityCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMUNITIES_CREATE)),
) -> CommunityResponse:
    """Create a new community."""
    return crud_service.create(db, Community, community_in, caller.user_id)


@router.put("/{community_id}", response_model=CommunityResponse)
def update_community(
    community_id: uuid.UUID,
    community_in: CommunityUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMUNITIES_UPDATE)),
) -> CommunityResponse:
    """Update a community."""
    community = _get_community_or_404(db, community_id)
    return crud_service.update(db, community, community_in, caller.user_id)


@router.delete("/{community_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_community(
    community_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMUNITIES_DELETE)),
) -> None:
    """Delete a community. Its posts become unreachable with it."""
    community = _get_community_or_404(db, community_id)
    crud_service.soft_delete(db, community, caller.user_id)


# Posts


@router.get("/{community_id}/posts", response_model=list[PostResponse])
def list_posts(
    community_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(POSTS_LIST)),
) -> list[PostResponse]:
    """List the posts of a community, newest first."""
    _get_community_or_404(db, community_id)
    return community_service.list_posts(db, community_id)


@router.get("/{community_id}/posts/{post_id}", response_model=PostResponse)
def get_post(
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(POSTS_LIST)),
) -> PostResponse:
    """Get a post by ID."""
    return _get_post_or_404(db, community_id, post_id)


@router.post(
    "/{community_id}/posts",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_post(
    community_id: uuid.UUID,
    post_in: PostCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(POSTS_CREATE)),
) -> PostResponse:
    """Create a post. The caller becomes its owner."""
    _get_community_or_404(db, community_id)
    return community_service.create_post(db, community_id, post_in, caller.user_id)


@router.put("/{community_id}/posts/{post_id}", response_model=PostResponse)
def update_post(
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    post_in: PostUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(POSTS_UPDATE)),
) -> PostResponse:
    """Update a post.

    Requires POSTS_UPDATE, or POSTS_OWN_UPDATE for posts the caller created.
    """
    post = _get_post_or_404(db, community_id, post_id)
    enforce(caller, POSTS_UPDATE, OwnershipFact.of(post))
    return crud_service.update(db, post, post_in, caller.user_id)


@router.delete(
    "/{community_id}/posts/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_post(
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(POSTS_DELETE)),
) -> None:
    """Delete a post.

    Requires POSTS_DELETE, or POSTS_OWN_DELETE for posts the caller created.
    """
    post = _get_post_or_404(db, community_id, post_id)
    enforce(caller, POSTS_DELETE, OwnershipFact.of(post))
    crud_service.soft_delete(db, post, caller.user_id)


# Comments


@router.get(
    "/{community_id}/posts/{post_id}/comments",
    response_model=list[CommentResponse],
)
def list_comments(
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMENTS_LIST)),
) -> list[CommentResponse]:
    """List the comments of a post, oldest first."""
    _get_post_or_404(db, community_id, post_id)
    return community_service.list_comments(db, post_id)


@router.post(
    "/{community_id}/posts/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_comment(
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    comment_in: CommentCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMENTS_CREATE)),
) -> CommentResponse:
    """Comment on a post. The caller becomes the comment's owner."""
    _get_post_or_404(db, community_id, post_id)
    return community_service.create_comment(db, post_id, comment_in, caller.user_id)


@router.put(
    "/{community_id}/posts/{post_id}/comments/{comment_id}",
    response_model=CommentResponse,
)
def update_comment(
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    comment_id: uuid.UUID,
    comment_in: CommentUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMENTS_UPDATE)),
) -> CommentResponse:
    """Update a comment.

    Requires COMMENTS_UPDATE, or COMMENTS_OWN_UPDATE for comments the caller
    created.
    """
    comment = _get_comment_or_404(db, community_id, post_id, comment_id)
    enforce(caller, COMMENTS_UPDATE, OwnershipFact.of(comment))
    return crud_service.update(db, comment, comment_in, caller.user_id)


@router.delete(
    "/{community_id}/posts/{post_id}/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_comment(
    community_id: uuid.UUID,
    post_id: uuid.UUID,
    comment_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(COMMENTS_DELETE)),
) -> None:
    """Delete a comment.

    Requires COMMENTS_DELETE, or COMMENTS_OWN_DELETE for comments the caller
    created.
    """
    comment = _get_comment_or_404(db, community_id, post_id, comment_id)
    enforce(caller, COMMENTS_DELETE, OwnershipFact.of(comment))
    crud_service.soft_delete(db, comment, caller.user_id)
