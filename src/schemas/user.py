# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.models.enums import UserRole


class UserCreate(BaseModel):
    """Schema for provisioning an account."""

    email: EmailStr
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    role: UserRole


class UserStatusUpdate(BaseModel):
    """Schema for activating or deactivating an account."""

    is_active: bool


class UserResponse(BaseModel):
    """Schema for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    created_by_id: uuid.UUID | None
    created_at: datetime.datetime
