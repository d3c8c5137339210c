# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Document type reference data."""

import uuid as uuid_lib

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import AuditMixin, Base, TimestampMixin


class DocumentType(Base, TimestampMixin, AuditMixin):
    """Kind of document a client can upload (passport, transcript, ...)."""

    __tablename__ = "document_types"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
