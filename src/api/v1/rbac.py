# src/api/v1/rbac.py
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_caller, get_db, require
from src.models import User, UserRole
from src.rbac.access import CallerContext
from src.rbac.guard import EndpointPolicy, enforce, policy
from src.rbac.permissions import Permission, describe_catalog
from src.rbac.roles import (
    ROLE_GRANT_MANAGEMENT_PERMISSIONS,
    ROLE_GRANT_READ_PERMISSIONS,
    ROLE_TEMPLATES,
    template,
)
from src.schemas.rbac import (
    PermissionChangeSchema,
    PermissionSchema,
    RoleTemplateSchema,
    UserPermissionsSchema,
)
from src.services import grant_service, user_service

router = APIRouter()

CATALOG_READ = policy("rbac.catalog.read", Permission.EMPLOYEES_READ)
ROLES_READ = policy("rbac.roles.read", Permission.EMPLOYEES_READ)

# Looking at a user's account or grants depends on the user's role.
USER_READ_POLICIES: dict[UserRole, EndpointPolicy] = {
    role: policy(f"users.{role.value}.read", permission)
    for role, permission in ROLE_GRANT_READ_PERMISSIONS.items()
}
USER_READ_POLICIES[UserRole.ADMIN] = policy(
    "users.admin.read", Permission.USERS_OVERVIEW
)

# Editing grants or status. Administrator accounts are not editable here.
USER_MANAGE_POLICIES: dict[UserRole, EndpointPolicy] = {
    role: policy(f"users.{role.value}.manage", permission)
    for role, permission in ROLE_GRANT_MANAGEMENT_PERMISSIONS.items()
}


def get_target_user(db: Session, user_id: uuid.UUID) -> User:
    """Load the user an operation targets or fail with 404."""
    user = user_service.get_user_by_id(db, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def check_manageable(caller: CallerContext, user: User) -> None:
    """Enforce the role-dependent management policy for a target user."""
    if user.role == UserRole.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Administrator accounts cannot be modified",
        )
    enforce(caller, USER_MANAGE_POLICIES[user.role])


@router.get(
    "/rbac/permissions",
    response_model=list[PermissionSchema],
    summary="List the permission catalog",
)
def list_permissions(
    caller: CallerContext = Depends(require(CATALOG_READ)),
):
    """Retrieve every permission of the catalog in identifier order."""
    return describe_catalog()


@router.get(
    "/rbac/roles",
    response_model=list[RoleTemplateSchema],
    summary="List role templates",
)
def list_roles(
    caller: CallerContext = Depends(require(ROLES_READ)),
):
    """Retrieve the default permission set of every role."""
    return [
        RoleTemplateSchema(
            role=role, permissions=[p.name for p in sorted(permissions)]
        )
        for role, permissions in ROLE_TEMPLATES.items()
    ]


@router.get(
    "/rbac/roles/{role}",
    response_model=RoleTemplateSchema,
    summary="Get the template of a role",
)
def get_role(
    role: UserRole,
    caller: CallerContext = Depends(require(ROLES_READ)),
):
    """Retrieve the default permission set of a single role."""
    return RoleTemplateSchema(
        role=role, permissions=[p.name for p in sorted(template(role))]
    )


@router.get(
    "/rbac/me/permissions",
    response_model=UserPermissionsSchema,
    summary="Get the caller's permissions",
)
def get_my_permissions(
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Retrieve the permissions granted to the authenticated caller."""
    user = get_target_user(db, caller.user_id)
    return UserPermissionsSchema.build(user.id, user.role, caller.permissions)


@router.get(
    "/rbac/users/{user_id}/permissions",
    response_model=UserPermissionsSchema,
    summary="Get a user's permissions",
)
def get_user_permissions(
    user_id: uuid.UUID,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Retrieve the permissions granted to a user.

    Requires the read permission matching the user's role.
    """
    user = get_target_user(db, user_id)
    enforce(caller, USER_READ_POLICIES[user.role])
    return UserPermissionsSchema.build(
        user.id, user.role, grant_service.get_user_permissions(db, user.id)
    )


@router.post(
    "/rbac/users/{user_id}/permissions",
    response_model=UserPermissionsSchema,
    summary="Grant permissions to a user",
)
def grant_user_permissions(
    user_id: uuid.UUID,
    change: PermissionChangeSchema,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Add permissions to a user's set.

    Requires the update permission matching the user's role.
    """
    user = get_target_user(db, user_id)
    check_manageable(caller, user)
    try:
        permissions = grant_service.grant_permissions(
            db, user.id, change.permissions, granted_by_id=caller.user_id
        )
    except grant_service.UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return UserPermissionsSchema.build(user.id, user.role, permissions)


@router.delete(
    "/rbac/users/{user_id}/permissions",
    response_model=UserPermissionsSchema,
    summary="Revoke permissions from a user",
)
def revoke_user_permissions(
    user_id: uuid.UUID,
    change: PermissionChangeSchema,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Remove permissions from a user's set.

    Requires the update permission matching the user's role.
    """
    user = get_target_user(db, user_id)
    check_manageable(caller, user)
    try:
        permissions = grant_service.revoke_permissions(db, user.id, change.permissions)
    except grant_service.UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return UserPermissionsSchema.build(user.id, user.role, permissions)


@router.put(
    "/rbac/users/{user_id}/permissions",
    response_model=UserPermissionsSchema,
    summary="Replace a user's permissions",
)
def replace_user_permissions(
    user_id: uuid.UUID,
    change: PermissionChangeSchema,
    db: Session = Depends(get_db),
    caller: CallerContext = Depends(get_caller),
):
    """Replace the whole permission set of a user.

    Requires the update permission matching the user's role.
    """
    user = get_target_user(db, user_id)
    check_manageable(caller, user)
    try:
        permissions = grant_service.replace_permissions(
            db, user.id, change.permissions, granted_by_id=caller.user_id
        )
    except grant_service.UserNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    return UserPermissionsSchema.build(user.id, user.role, permissions)
