# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Grant store: which permissions a user holds."""

import uuid

from sqlalchemy import Column, DateTime, ForeignKey, Integer, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from src.models.base import Base, utcnow


class PermissionAssignment(Base):
    """One granted permission, stored by its stable catalog identifier."""

    __tablename__ = "permission_assignments"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    permission = Column(Integer, nullable=False)
    granted_by_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=True)
    granted_at = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        UniqueConstraint("user_id", "permission", name="_user_permission_uc"),
    )

    user = relationship(
        "User", back_populates="permission_assignments", foreign_keys=[user_id]
    )
    granted_by = relationship("User", foreign_keys=[granted_by_id])
