# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""RBAC schemas."""

import uuid

from pydantic import BaseModel, Field, field_validator

from src.models.enums import UserRole
from src.rbac.errors import MisconfiguredRequirementError
from src.rbac.permissions import Permission, parse_permission


class PermissionSchema(BaseModel):
    """Schema representing a catalog entry."""

    id: int
    name: str
    resource: str
    action: str
    is_own: bool
    description: str


class RoleTemplateSchema(BaseModel):
    """Schema representing a role's default permission set."""

    role: UserRole
    permissions: list[str]


class UserPermissionsSchema(BaseModel):
    """Schema representing a user's granted permissions."""

    user_id: uuid.UUID
    role: UserRole
    permissions: list[str]
    permission_ids: list[int]

    @classmethod
    def build(
        cls, user_id: uuid.UUID, role: UserRole, permissions: frozenset[Permission]
    ) -> "UserPermissionsSchema":
        ordered = sorted(permissions)
        return cls(
            user_id=user_id,
            role=role,
            permissions=[p.name for p in ordered],
            permission_ids=[int(p) for p in ordered],
        )


class PermissionChangeSchema(BaseModel):
    """Permissions to grant, revoke, or set, by name or identifier."""

    permissions: list[Permission] = Field(default_factory=list)

    @field_validator("permissions", mode="before")
    @classmethod
    def _parse_permissions(cls, values: list) -> list[Permission]:
        if not isinstance(values, list):
            raise ValueError("permissions must be a list")
        try:
            return [parse_permission(v) for v in values]
        except MisconfiguredRequirementError as e:
            raise ValueError(str(e)) from e
