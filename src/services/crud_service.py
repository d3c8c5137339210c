# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""CRUD helpers for soft-deletable entities."""

import uuid
from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy.orm import Session

from src.models import AuditMixin

ModelT = TypeVar("ModelT", bound=AuditMixin)


def list_active(db: Session, model: type[ModelT], order_by=None) -> list[ModelT]:
    """List rows that have not been soft-deleted."""
    query = db.query(model).filter(model.deleted_at.is_(None))
    if order_by is not None:
        query = query.order_by(order_by)
    return query.all()


def get_active(db: Session, model: type[ModelT], row_id: uuid.UUID) -> ModelT | None:
    """Get a row by ID unless it has been soft-deleted."""
    return (
        db.query(model)
        .filter(model.id == row_id, model.deleted_at.is_(None))
        .first()
    )


def create(
    db: Session,
    model: type[ModelT],
    data: BaseModel,
    created_by_id: uuid.UUID | None,
) -> ModelT:
    """Create a row from a schema, recording its creator."""
    row = model(**data.model_dump(), created_by_id=created_by_id)
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update(
    db: Session,
    row: ModelT,
    data: BaseModel,
    updated_by_id: uuid.UUID,
) -> ModelT:
    """Apply the fields set on an update schema."""
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(row, key, value)
    row.updated_by_id = updated_by_id
    db.commit()
    db.refresh(row)
    return row


def soft_delete(db: Session, row: ModelT, deleted_by_id: uuid.UUID) -> None:
    """Mark a row as deleted."""
    row.soft_delete(deleted_by_id)
    db.commit()
