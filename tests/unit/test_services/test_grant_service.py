# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for grant_service."""

import uuid

import pytest

from src.models import PermissionAssignment, User
from src.models.enums import UserRole
from src.rbac.permissions import Permission
from src.rbac.roles import STUDENT_PERMISSIONS, template
from src.services import grant_service


def create_user(db_session, role: UserRole = UserRole.STUDENT) -> User:
    user = User(
        email=f"{uuid.uuid4().hex[:8]}@example.com",
        first_name="Grant",
        last_name="Target",
        role=role,
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def test_new_user_without_seed_has_no_permissions(db_session):
    user = create_user(db_session)
    assert grant_service.get_user_permissions(db_session, user.id) == frozenset()


def test_seed_from_template_copies_role_template(db_session):
    user = create_user(db_session)
    seeded = grant_service.seed_from_template(db_session, user)
    db_session.commit()

    assert seeded == template(UserRole.STUDENT)
    assert grant_service.get_user_permissions(db_session, user.id) == seeded


def test_seed_stores_stable_identifiers(db_session):
    user = create_user(db_session, UserRole.PARTNER)
    grant_service.seed_from_template(db_session, user)
    db_session.commit()

    stored = {
        row.permission
        for row in db_session.query(PermissionAssignment).filter_by(user_id=user.id)
    }
    assert stored == {int(p) for p in template(UserRole.PARTNER)}


def test_grant_adds_permissions(db_session):
    user = create_user(db_session)
    grant_service.seed_from_template(db_session, user)
    db_session.commit()

    result = grant_service.grant_permissions(
        db_session, user.id, [Permission.COMMENTS_UPDATE, Permission.POSTS_READ]
    )

    assert Permission.COMMENTS_UPDATE in result
    assert result == template(UserRole.STUDENT) | {Permission.COMMENTS_UPDATE}
    assert grant_service.get_user_permissions(db_session, user.id) == result


def test_grant_records_grantor(db_session):
    grantor = create_user(db_session, UserRole.ADMIN)
    user = create_user(db_session)
    grant_service.grant_permissions(
        db_session, user.id, [Permission.POSTS_READ], granted_by_id=grantor.id
    )
    assignment = db_session.query(PermissionAssignment).filter_by(user_id=user.id).one()
    assert assignment.granted_by_id == grantor.id
    assert assignment.permission == int(Permission.POSTS_READ)


def test_revoke_removes_permissions(db_session):
    user = create_user(db_session)
    grant_service.seed_from_template(db_session, user)
    db_session.commit()

    result = grant_service.revoke_permissions(
        db_session, user.id, [Permission.COMMENTS_OWN_UPDATE, Permission.COMMENTS_DELETE]
    )

    assert Permission.COMMENTS_OWN_UPDATE not in result
    assert result == template(UserRole.STUDENT) - {Permission.COMMENTS_OWN_UPDATE}


def test_replace_sets_exact_permissions(db_session):
    user = create_user(db_session)
    grant_service.seed_from_template(db_session, user)
    db_session.commit()

    new_set = {Permission.COMMENTS_READ, Permission.COMMENTS_UPDATE}
    result = grant_service.replace_permissions(db_session, user.id, new_set)

    assert result == new_set
    assert grant_service.get_user_permissions(db_session, user.id) == new_set


def test_replace_with_empty_set_removes_everything(db_session):
    user = create_user(db_session)
    grant_service.seed_from_template(db_session, user)
    db_session.commit()

    assert grant_service.replace_permissions(db_session, user.id, []) == frozenset()


def test_mutating_grants_does_not_change_template(db_session):
    before = template(UserRole.STUDENT)
    user = create_user(db_session)
    grant_service.seed_from_template(db_session, user)
    db_session.commit()

    grant_service.grant_permissions(db_session, user.id, [Permission.COMMENTS_DELETE])
    grant_service.revoke_permissions(db_session, user.id, [Permission.POSTS_READ])

    assert template(UserRole.STUDENT) == before == STUDENT_PERMISSIONS
    assert Permission.COMMENTS_DELETE not in template(UserRole.STUDENT)


def test_unknown_user_raises(db_session):
    with pytest.raises(grant_service.UserNotFoundError):
        grant_service.grant_permissions(db_session, uuid.uuid4(), [Permission.POSTS_READ])
    with pytest.raises(grant_service.UserNotFoundError):
        grant_service.revoke_permissions(db_session, uuid.uuid4(), [Permission.POSTS_READ])
    with pytest.raises(grant_service.UserNotFoundError):
        grant_service.replace_permissions(db_session, uuid.uuid4(), [])


def test_unknown_stored_identifier_is_ignored(db_session):
    user = create_user(db_session)
    db_session.add(PermissionAssignment(user_id=user.id, permission=9999))
    db_session.add(
        PermissionAssignment(user_id=user.id, permission=int(Permission.POSTS_READ))
    )
    db_session.commit()

    assert grant_service.get_user_permissions(db_session, user.id) == {
        Permission.POSTS_READ
    }


def test_to_permission_set():
    assert grant_service.to_permission_set([1, 130, 0]) == {
        Permission.LOCATIONS_CREATE,
        Permission.COMMENTS_READ,
    }
