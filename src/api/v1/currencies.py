# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Currency API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require
from src.models import Currency
from src.rbac.access import CallerContext
from src.rbac.guard import policy
from src.rbac.permissions import Permission
from src.schemas.reference import CurrencyCreate, CurrencyResponse, CurrencyUpdate
from src.services import crud_service

router = APIRouter()

CURRENCIES_LIST = policy("currencies.list", Permission.CURRENCIES_READ, resource="currencies")
CURRENCIES_CREATE = policy("currencies.create", Permission.CURRENCIES_CREATE, resource="currencies")
CURRENCIES_UPDATE = policy("currencies.update", Permission.CURRENCIES_UPDATE, resource="currencies")
CURRENCIES_DELETE = policy("currencies.delete", Permission.CURRENCIES_DELETE, resource="currencies")


def _get_currency_or_404(db: Session, currency_id: uuid.UUID) -> Currency:
    currency = crud_service.get_active(db, Currency, currency_id)
    if not currency:
        raise HTTPException(status_code=404, detail="Currency not found")
    return currency


def _check_code_available(
    db: Session, code: str, exclude_id: uuid.UUID | None = None
) -> None:
    query = db.query(Currency).filter(
        Currency.code == code, Currency.deleted_at.is_(None)
    )
    if exclude_id is not None:
        query = query.filter(Currency.id != exclude_id)
    if query.first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Currency with code {code} already exists",
        )


@router.get("/currencies", response_model=list[CurrencyResponse])
def list_currencies(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(CURRENCIES_LIST)),
) -> list[CurrencyResponse]:
    """Get list of currencies."""
    return crud_service.list_active(db, Currency, order_by=Currency.code)


@router.get("/currencies/{currency_id}", response_model=CurrencyResponse)
def get_currency(
    currency_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(CURRENCIES_LIST)),
) -> CurrencyResponse:
    """Get a currency by ID."""
    return _get_currency_or_404(db, currency_id)


@router.post(
    "/currencies",
    response_model=CurrencyResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_currency(
    currency_in: CurrencyCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(CURRENCIES_CREATE)),
) -> CurrencyResponse:
    """Create a new currency. Codes are unique among active currencies."""
    _check_code_available(db, currency_in.code)
    return crud_service.create(db, Currency, currency_in, caller.user_id)


@router.put("/currencies/{currency_id}", response_model=CurrencyResponse)
def update_currency(
    currency_id: uuid.UUID,
    currency_in: CurrencyUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(CURRENCIES_UPDATE)),
) -> CurrencyResponse:
    """Update a currency."""
    currency = _get_currency_or_404(db, currency_id)
    if currency_in.code:
        _check_code_available(db, currency_in.code, exclude_id=currency.id)
    return crud_service.update(db, currency, currency_in, caller.user_id)


@router.delete("/currencies/{currency_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_currency(
    currency_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(CURRENCIES_DELETE)),
) -> None:
    """Delete a currency."""
    currency = _get_currency_or_404(db, currency_id)
    crud_service.soft_delete(db, currency, caller.user_id)
