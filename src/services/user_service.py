# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User provisioning service."""

import logging
import uuid

from sqlalchemy.orm import Session

from src.models import User
from src.schemas.user import UserCreate
from src.services import grant_service

logger = logging.getLogger(__name__)


class ProvisioningError(Exception):
    """Base exception for provisioning errors."""


class EmailAlreadyInUseError(ProvisioningError):
    """Another account already uses the email address."""


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email (case-insensitive)."""
    return db.query(User).filter(User.email == email.strip().lower()).first()


def provision_user(
    db: Session,
    data: UserCreate,
    created_by_id: uuid.UUID | None = None,
) -> User:
    """Create an account and seed its grants from the role template.

    Args:
        db: Database session
        data: Account data including the role
        created_by_id: User performing the provisioning, if any

    Returns:
        Created User

    Raises:
        EmailAlreadyInUseError: If the email is taken
    """
    if get_user_by_email(db, data.email):
        raise EmailAlreadyInUseError("An account with this email already exists.")

    user = User(
        email=data.email.strip().lower(),
        first_name=data.first_name,
        last_name=data.last_name,
        role=data.role,
        is_active=True,
        created_by_id=created_by_id,
    )
    db.add(user)
    db.flush()

    seeded = grant_service.seed_from_template(db, user, granted_by_id=created_by_id)
    db.commit()
    db.refresh(user)

    logger.info(
        f"Provisioned {user.role.value} account {user.id} with "
        f"{len(seeded)} permissions"
    )
    return user


def set_active(db: Session, user: User, is_active: bool) -> User:
    """Activate or deactivate an account. Grants are left untouched."""
    user.is_active = is_active
    db.commit()
    db.refresh(user)
    return user
