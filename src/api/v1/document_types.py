# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Document type API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require
from src.models import DocumentType
from src.rbac.access import CallerContext
from src.rbac.guard import policy
from src.rbac.permissions import Permission
from src.schemas.reference import (
    DocumentTypeCreate,
    DocumentTypeResponse,
    DocumentTypeUpdate,
)
from src.services import crud_service

router = APIRouter()

DOCUMENT_TYPES_LIST = policy(
    "document_types.list", Permission.DOCUMENT_TYPES_READ, resource="document_types"
)
DOCUMENT_TYPES_CREATE = policy(
    "document_types.create", Permission.DOCUMENT_TYPES_CREATE, resource="document_types"
)
DOCUMENT_TYPES_UPDATE = policy(
    "document_types.update", Permission.DOCUMENT_TYPES_UPDATE, resource="document_types"
)
DOCUMENT_TYPES_DELETE = policy(
    "document_types.delete", Permission.DOCUMENT_TYPES_DELETE, resource="document_types"
)


def _get_document_type_or_404(db: Session, document_type_id: uuid.UUID) -> DocumentType:
    document_type = crud_service.get_active(db, DocumentType, document_type_id)
    if not document_type:
        raise HTTPException(status_code=404, detail="Document type not found")
    return document_type


@router.get("", response_model=list[DocumentTypeResponse])
def list_document_types(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(DOCUMENT_TYPES_LIST)),
) -> list[DocumentTypeResponse]:
    """List all document types."""
    return crud_service.list_active(db, DocumentType, order_by=DocumentType.name)


@router.get("/{document_type_id}", response_model=DocumentTypeResponse)
def get_document_type(
    document_type_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(DOCUMENT_TYPES_LIST)),
) -> DocumentTypeResponse:
    """Get a document type by ID."""
    return _get_document_type_or_404(db, document_type_id)


@router.post(
    "",
    response_model=DocumentTypeResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_document_type(
    document_type_in: DocumentTypeCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(DOCUMENT_TYPES_CREATE)),
) -> DocumentTypeResponse:
    """Create a new document type."""
    return crud_service.create(db, DocumentType, document_type_in, caller.user_id)


@router.put("/{document_type_id}", response_model=DocumentTypeResponse)
def update_document_type(
    document_type_id: uuid.UUID,
    document_type_in: DocumentTypeUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(DOCUMENT_TYPES_UPDATE)),
) -> DocumentTypeResponse:
    """Update a document type."""
    document_type = _get_document_type_or_404(db, document_type_id)
    return crud_service.update(db, document_type, document_type_in, caller.user_id)


@router.delete("/{document_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_document_type(
    document_type_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(DOCUMENT_TYPES_DELETE)),
) -> None:
    """Delete a document type."""
    document_type = _get_document_type_or_404(db, document_type_id)
    crud_service.soft_delete(db, document_type, caller.user_id)
