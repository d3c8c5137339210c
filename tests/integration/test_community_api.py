# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for community, post and comment endpoints."""

import uuid

import pytest

from conftest import auth_headers
from src.models import Comment, Community, Post
from src.rbac.permissions import Permission
from src.services import grant_service


@pytest.fixture
def community(db_session, admin_user) -> Community:
    community = Community(name="Study Abroad", created_by_id=admin_user.id)
    db_session.add(community)
    db_session.commit()
    db_session.refresh(community)
    return community


@pytest.fixture
def post(db_session, community, student_user) -> Post:
    post = Post(
        community_id=community.id,
        title="Visa tips",
        content="Book the appointment early.",
        created_by_id=student_user.id,
    )
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post


@pytest.fixture
def comment(db_session, post, student_user) -> Comment:
    comment = Comment(
        post_id=post.id,
        content="Thanks!",
        created_by_id=student_user.id,
    )
    db_session.add(comment)
    db_session.commit()
    db_session.refresh(comment)
    return comment


def comment_url(community, post, comment=None) -> str:
    url = f"/api/v1/communities/{community.id}/posts/{post.id}/comments"
    return f"{url}/{comment.id}" if comment else url


class TestCommunityEndpoints:
    """Tests for /api/v1/communities."""

    def test_requires_authentication(self, client):
        response = client.get("/api/v1/communities")
        assert response.status_code == 401

    def test_malformed_identity(self, client):
        response = client.get(
            "/api/v1/communities", headers={"X-Authenticated-User": "not-a-uuid"}
        )
        assert response.status_code == 401

    def test_unknown_identity(self, client):
        response = client.get(
            "/api/v1/communities", headers={"X-Authenticated-User": str(uuid.uuid4())}
        )
        assert response.status_code == 401

    def test_inactive_user(self, client, db_session, student_user):
        student_user.is_active = False
        db_session.commit()
        response = client.get("/api/v1/communities", headers=auth_headers(student_user))
        assert response.status_code == 401

    def test_student_lists_communities(self, client, community, student_user):
        response = client.get("/api/v1/communities", headers=auth_headers(student_user))
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Study Abroad"]

    def test_student_cannot_create_community(self, client, student_user):
        response = client.post(
            "/api/v1/communities",
            json={"name": "New"},
            headers=auth_headers(student_user),
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: communities.create"

    def test_admin_creates_community(self, client, admin_user):
        response = client.post(
            "/api/v1/communities",
            json={"name": "Alumni", "description": "Former students"},
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 201
        assert response.json()["created_by_id"] == str(admin_user.id)

    def test_deleted_community_is_hidden(self, client, community, admin_user, student_user):
        response = client.delete(
            f"/api/v1/communities/{community.id}", headers=auth_headers(admin_user)
        )
        assert response.status_code == 204

        response = client.get(
            f"/api/v1/communities/{community.id}", headers=auth_headers(student_user)
        )
        assert response.status_code == 404


class TestPostEndpoints:
    """Tests for posts nested under communities."""

    def test_create_post_records_owner(self, client, community, partner_user):
        response = client.post(
            f"/api/v1/communities/{community.id}/posts",
            json={"title": "Hello", "content": "First post"},
            headers=auth_headers(partner_user),
        )
        assert response.status_code == 201
        assert response.json()["created_by_id"] == str(partner_user.id)

    def test_owner_updates_own_post(self, client, community, post, student_user):
        response = client.put(
            f"/api/v1/communities/{community.id}/posts/{post.id}",
            json={"title": "Visa tips (updated)"},
            headers=auth_headers(student_user),
        )
        assert response.status_code == 200
        assert response.json()["title"] == "Visa tips (updated)"
        assert response.json()["updated_by_id"] == str(student_user.id)

    def test_other_user_cannot_update_post(self, client, db_session, community, post, other_student):
        response = client.put(
            f"/api/v1/communities/{community.id}/posts/{post.id}",
            json={"title": "Hijacked"},
            headers=auth_headers(other_student),
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: posts.update"
        db_session.refresh(post)
        assert post.title == "Visa tips"

    def test_other_user_cannot_delete_post(self, client, db_session, community, post, other_student):
        response = client.delete(
            f"/api/v1/communities/{community.id}/posts/{post.id}",
            headers=auth_headers(other_student),
        )
        assert response.status_code == 403
        db_session.refresh(post)
        assert post.deleted_at is None

    def test_admin_deletes_any_post(self, client, db_session, community, post, admin_user):
        response = client.delete(
            f"/api/v1/communities/{community.id}/posts/{post.id}",
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 204
        db_session.refresh(post)
        assert post.deleted_by_id == admin_user.id

    def test_missing_post_is_404(self, client, community, student_user):
        response = client.put(
            f"/api/v1/communities/{community.id}/posts/{uuid.uuid4()}",
            json={"title": "Nothing"},
            headers=auth_headers(student_user),
        )
        assert response.status_code == 404

    def test_post_in_other_community_is_404(self, client, db_session, post, student_user, admin_user):
        other = Community(name="Other", created_by_id=admin_user.id)
        db_session.add(other)
        db_session.commit()
        response = client.get(
            f"/api/v1/communities/{other.id}/posts/{post.id}",
            headers=auth_headers(student_user),
        )
        assert response.status_code == 404


class TestCommentEndpoints:
    """Tests for comments: general permission or own permission plus ownership."""

    def test_list_comments(self, client, community, post, comment, partner_user):
        response = client.get(comment_url(community, post), headers=auth_headers(partner_user))
        assert response.status_code == 200
        assert [c["content"] for c in response.json()] == ["Thanks!"]

    def test_owner_updates_own_comment(self, client, community, post, comment, student_user):
        response = client.put(
            comment_url(community, post, comment),
            json={"content": "Thanks a lot!"},
            headers=auth_headers(student_user),
        )
        assert response.status_code == 200
        assert response.json()["content"] == "Thanks a lot!"

    def test_non_owner_cannot_update_comment(self, client, db_session, community, post, comment, other_student):
        response = client.put(
            comment_url(community, post, comment),
            json={"content": "Edited by someone else"},
            headers=auth_headers(other_student),
        )
        assert response.status_code == 403
        db_session.refresh(comment)
        assert comment.content == "Thanks!"

    def test_moderator_updates_any_comment(self, client, db_session, community, post, comment, partner_user):
        grant_service.grant_permissions(db_session, partner_user.id, [Permission.COMMENTS_UPDATE])
        response = client.put(
            comment_url(community, post, comment),
            json={"content": "Moderated"},
            headers=auth_headers(partner_user),
        )
        assert response.status_code == 200

    def test_revoked_own_permission_denies_owner(self, client, db_session, community, post, comment, student_user):
        grant_service.revoke_permissions(
            db_session, student_user.id, [Permission.COMMENTS_OWN_DELETE]
        )
        response = client.delete(
            comment_url(community, post, comment), headers=auth_headers(student_user)
        )
        assert response.status_code == 403

    def test_owner_deletes_comment(self, client, community, post, comment, student_user):
        response = client.delete(
            comment_url(community, post, comment), headers=auth_headers(student_user)
        )
        assert response.status_code == 204

        response = client.get(comment_url(community, post), headers=auth_headers(student_user))
        assert response.json() == []

    def test_create_comment_on_missing_post(self, client, community, student_user):
        response = client.post(
            f"/api/v1/communities/{community.id}/posts/{uuid.uuid4()}/comments",
            json={"content": "Hello?"},
            headers=auth_headers(student_user),
        )
        assert response.status_code == 404
