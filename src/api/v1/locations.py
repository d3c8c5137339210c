# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Location API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require
from src.models import Location
from src.rbac.access import CallerContext
from src.rbac.guard import policy
from src.rbac.permissions import Permission
from src.schemas.reference import LocationCreate, LocationResponse, LocationUpdate
from src.services import crud_service

router = APIRouter()

LOCATIONS_PUBLIC_LIST = policy("locations.public_list")
LOCATIONS_LIST = policy("locations.list", Permission.LOCATIONS_READ, resource="locations")
LOCATIONS_CREATE = policy("locations.create", Permission.LOCATIONS_CREATE, resource="locations")
LOCATIONS_UPDATE = policy("locations.update", Permission.LOCATIONS_UPDATE, resource="locations")
LOCATIONS_DELETE = policy("locations.delete", Permission.LOCATIONS_DELETE, resource="locations")


def _get_location_or_404(db: Session, location_id: uuid.UUID) -> Location:
    location = crud_service.get_active(db, Location, location_id)
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.get("/public/locations", response_model=list[LocationResponse])
def list_public_locations(
    db: Session = Depends(get_db),
    _: None = Depends(require(LOCATIONS_PUBLIC_LIST)),
) -> list[LocationResponse]:
    """List locations without authentication, e.g. for sign-up forms."""
    return crud_service.list_active(db, Location, order_by=Location.city)


@router.get("/locations", response_model=list[LocationResponse])
def list_locations(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(LOCATIONS_LIST)),
) -> list[LocationResponse]:
    """List all locations."""
    return crud_service.list_active(db, Location, order_by=Location.city)


@router.get("/locations/{location_id}", response_model=LocationResponse)
def get_location(
    location_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(LOCATIONS_LIST)),
) -> LocationResponse:
    """Get a location by ID."""
    return _get_location_or_404(db, location_id)


@router.post(
    "/locations",
    response_model=LocationResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_location(
    location_in: LocationCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(LOCATIONS_CREATE)),
) -> LocationResponse:
    """Create a new location."""
    return crud_service.create(db, Location, location_in, caller.user_id)


@router.put("/locations/{location_id}", response_model=LocationResponse)
def update_location(
    location_id: uuid.UUID,
    location_in: LocationUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(LOCATIONS_UPDATE)),
) -> LocationResponse:
    """Update a location."""
    location = _get_location_or_404(db, location_id)
    return crud_service.update(db, location, location_in, caller.user_id)


@router.delete("/locations/{location_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_location(
    location_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(require(LOCATIONS_DELETE)),
) -> None:
    """Delete a location."""
    location = _get_location_or_404(db, location_id)
    crud_service.soft_delete(db, location, caller.user_id)
