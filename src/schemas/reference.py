# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Reference data schemas."""

import datetime
import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LocationBase(BaseModel):
    """Base location schema."""

    city: str = Field(..., min_length=1, max_length=100)
    country: str = Field(..., min_length=1, max_length=100)


class LocationCreate(LocationBase):
    """Schema for creating a location."""

    pass


class LocationUpdate(BaseModel):
    """Schema for updating a location."""

    city: str | None = Field(None, min_length=1, max_length=100)
    country: str | None = Field(None, min_length=1, max_length=100)


class LocationResponse(LocationBase):
    """Schema for location response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime.datetime
    created_by_id: uuid.UUID | None


class CurrencyBase(BaseModel):
    """Base currency schema."""

    name: str = Field(..., min_length=1, max_length=100)
    code: str = Field(..., min_length=3, max_length=3)
    description: str | None = None

    @field_validator("code")
    @classmethod
    def _uppercase_code(cls, value: str) -> str:
        return value.upper()


class CurrencyCreate(CurrencyBase):
    """Schema for creating a currency."""

    pass


class CurrencyUpdate(BaseModel):
    """Schema for updating a currency."""

    name: str | None = Field(None, min_length=1, max_length=100)
    code: str | None = Field(None, min_length=3, max_length=3)
    description: str | None = None

    @field_validator("code")
    @classmethod
    def _uppercase_code(cls, value: str | None) -> str | None:
        return value.upper() if value else value


class CurrencyResponse(CurrencyBase):
    """Schema for currency response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime.datetime
    created_by_id: uuid.UUID | None


class DocumentTypeBase(BaseModel):
    """Base document type schema."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str | None = None


class DocumentTypeCreate(DocumentTypeBase):
    """Schema for creating a document type."""

    pass


class DocumentTypeUpdate(BaseModel):
    """Schema for updating a document type."""

    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None


class DocumentTypeResponse(DocumentTypeBase):
    """Schema for document type response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime.datetime
    created_by_id: uuid.UUID | None
