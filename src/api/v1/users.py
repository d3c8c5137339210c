# src/api/v1/users.py
"""User management API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_caller, get_db
from src.api.v1.rbac import USER_READ_POLICIES, check_manageable, get_target_user
from src.models import UserRole
from src.rbac.access import CallerContext
from src.rbac.guard import EndpointPolicy, enforce, policy
from src.rbac.roles import ROLE_PROVISIONING_PERMISSIONS
from src.schemas.user import UserCreate, UserResponse, UserStatusUpdate
from src.services import user_service

router = APIRouter()

USER_CREATE_POLICIES: dict[UserRole, EndpointPolicy] = {
    role: policy(f"users.{role.value}.create", permission)
    for role, permission in ROLE_PROVISIONING_PERMISSIONS.items()
}


@router.post(
    "/users",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Provision a new user",
)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> UserResponse:
    """Create an account and seed its permissions from the role template.

    Requires the create permission matching the requested role
    (EMPLOYEES_CREATE, STUDENTS_CREATE, ...).
    """
    if user_in.role == UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Administrator accounts cannot be provisioned through the API",
        )
    enforce(caller, USER_CREATE_POLICIES[user_in.role])

    try:
        user = user_service.provision_user(db, user_in, created_by_id=caller.user_id)
    except user_service.EmailAlreadyInUseError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return user


@router.get(
    "/users/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
)
def get_user(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> UserResponse:
    """Retrieve a user. Requires the read permission matching the user's role."""
    user = get_target_user(db, user_id)
    enforce(caller, USER_READ_POLICIES[user.role])
    return user


@router.put(
    "/users/{user_id}/status",
    response_model=UserResponse,
    summary="Activate or deactivate a user",
)
def update_user_status(
    user_id: uuid.UUID,
    status_in: UserStatusUpdate,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
) -> UserResponse:
    """Activate or deactivate an account. Its permissions are kept."""
    user = get_target_user(db, user_id)
    check_manageable(caller, user)
    return user_service.set_active(db, user, status_in.is_active)
