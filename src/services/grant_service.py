# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Grant store: persisted permission sets per user.

A user's permission set is seeded from the role template once, when the
account is provisioned. After that it only changes through the explicit
grant / revoke / replace operations below and is never re-derived from the
role.
"""

import logging
import uuid
from collections.abc import Iterable

from sqlalchemy.orm import Session

from src.models import PermissionAssignment, User
from src.rbac.permissions import Permission
from src.rbac.roles import template

logger = logging.getLogger(__name__)


class GrantServiceError(Exception):
    """Base exception for grant store errors."""


class UserNotFoundError(GrantServiceError):
    """The target user does not exist."""


def to_permission_set(identifiers: Iterable[int]) -> frozenset[Permission]:
    """Convert stored identifiers into catalog entries.

    Identifiers the catalog does not know are skipped; they never widen a
    caller's access.
    """
    permissions = set()
    for identifier in identifiers:
        try:
            permissions.add(Permission(identifier))
        except ValueError:
            logger.warning(f"Ignoring unknown stored permission identifier {identifier}")
    return frozenset(permissions)


def get_user_permissions(db: Session, user_id: uuid.UUID) -> frozenset[Permission]:
    """Load the permission set currently granted to a user."""
    rows = (
        db.query(PermissionAssignment.permission)
        .filter(PermissionAssignment.user_id == user_id)
        .all()
    )
    return to_permission_set(row.permission for row in rows)


def _get_user(db: Session, user_id: uuid.UUID) -> User:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UserNotFoundError(f"User {user_id} not found")
    return user


def _add_assignments(
    db: Session,
    user_id: uuid.UUID,
    permissions: Iterable[Permission],
    granted_by_id: uuid.UUID | None,
) -> None:
    for permission in sorted(set(permissions)):
        db.add(
            PermissionAssignment(
                user_id=user_id,
                permission=int(permission),
                granted_by_id=granted_by_id,
            )
        )


def seed_from_template(
    db: Session,
    user: User,
    granted_by_id: uuid.UUID | None = None,
) -> frozenset[Permission]:
    """Copy the role template into a freshly created user's grants.

    Does not commit; provisioning commits the user and the grants together.

    Args:
        db: Database session
        user: Newly created user (flushed, so ``user.id`` is set)
        granted_by_id: User performing the provisioning

    Returns:
        The seeded permission set
    """
    seeded = frozenset(template(user.role))
    _add_assignments(db, user.id, seeded, granted_by_id)
    return seeded


def grant_permissions(
    db: Session,
    user_id: uuid.UUID,
    permissions: Iterable[Permission],
    granted_by_id: uuid.UUID | None = None,
) -> frozenset[Permission]:
    """Add permissions to a user's set. Already held permissions are ignored.

    Returns:
        The user's permission set after the change
    """
    _get_user(db, user_id)
    current = get_user_permissions(db, user_id)
    added = set(permissions) - current
    _add_assignments(db, user_id, added, granted_by_id)
    db.commit()

    if added:
        logger.info(
            f"Granted {sorted(p.name for p in added)} to user {user_id} "
            f"(by {granted_by_id})"
        )
    return current | added


def revoke_permissions(
    db: Session,
    user_id: uuid.UUID,
    permissions: Iterable[Permission],
) -> frozenset[Permission]:
    """Remove permissions from a user's set. Missing permissions are ignored.

    Returns:
        The user's permission set after the change
    """
    _get_user(db, user_id)
    removed = set(permissions)
    if removed:
        db.query(PermissionAssignment).filter(
            PermissionAssignment.user_id == user_id,
            PermissionAssignment.permission.in_([int(p) for p in removed]),
        ).delete(synchronize_session=False)
    db.commit()

    logger.info(f"Revoked {sorted(p.name for p in removed)} from user {user_id}")
    return get_user_permissions(db, user_id)


def replace_permissions(
    db: Session,
    user_id: uuid.UUID,
    permissions: Iterable[Permission],
    granted_by_id: uuid.UUID | None = None,
) -> frozenset[Permission]:
    """Replace a user's whole permission set.

    Returns:
        The new permission set
    """
    _get_user(db, user_id)
    new_set = frozenset(permissions)

    db.query(PermissionAssignment).filter(
        PermissionAssignment.user_id == user_id
    ).delete(synchronize_session=False)
    db.flush()
    _add_assignments(db, user_id, new_set, granted_by_id)
    db.commit()

    logger.info(
        f"Replaced permissions of user {user_id} with {len(new_set)} entries "
        f"(by {granted_by_id})"
    )
    return new_set
