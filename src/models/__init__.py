# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.base import AuditMixin, Base, TimestampMixin
from src.models.comment import Comment
from src.models.community import Community
from src.models.currency import Currency
from src.models.document_type import DocumentType
from src.models.enums import UserRole
from src.models.location import Location
from src.models.permission_assignment import PermissionAssignment
from src.models.post import Post
from src.models.user import User

__all__ = [
    "AuditMixin",
    "Base",
    "Comment",
    "Community",
    "Currency",
    "DocumentType",
    "Location",
    "PermissionAssignment",
    "Post",
    "TimestampMixin",
    "User",
    "UserRole",
]
