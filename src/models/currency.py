# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Currency reference data."""

import uuid as uuid_lib

from sqlalchemy import String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.models.base import AuditMixin, Base, TimestampMixin


class Currency(Base, TimestampMixin, AuditMixin):
    """Currency available for incomes and expenses."""

    __tablename__ = "currencies"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    code: Mapped[str] = mapped_column(String(3), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
