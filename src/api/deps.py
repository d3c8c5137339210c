# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import uuid
from collections.abc import Callable

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import get_db
from src.rbac.access import CallerContext, holds_any
from src.rbac.errors import UnauthenticatedError
from src.rbac.guard import EndpointPolicy, enforce
from src.services import grant_service, user_service

__all__ = ["get_caller", "get_db", "require", "resolve_caller"]


def resolve_caller(db: Session, raw_identity: str | None) -> CallerContext:
    """Build the caller context for an identity claim.

    Raises:
        UnauthenticatedError: If the claim is missing, malformed, or names an
            unknown or inactive user.
    """
    if not raw_identity:
        raise UnauthenticatedError("Not authenticated")

    try:
        user_id = uuid.UUID(raw_identity.strip())
    except ValueError:
        raise UnauthenticatedError("Invalid caller identity") from None

    user = user_service.get_user_by_id(db, user_id)
    if not user or not user.is_active:
        raise UnauthenticatedError("User not found or inactive")

    return CallerContext(
        user_id=user.id,
        permissions=grant_service.get_user_permissions(db, user.id),
    )


def get_caller(
    request: Request,
    db: Session = Depends(get_db),
) -> CallerContext:
    """Resolve the authenticated caller and its granted permissions.

    The identity is established upstream and forwarded in the configured
    identity header. This is the only place that reads it.
    """
    try:
        return resolve_caller(db, request.headers.get(get_settings().identity_header))
    except UnauthenticatedError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        ) from e


def require(endpoint_policy: EndpointPolicy) -> Callable[..., CallerContext | None]:
    """Dependency enforcing a policy before the handler body runs.

    Public policies need no caller. Policies with an owner-restricted
    alternative only reject callers holding none of the policy's permissions;
    the handler finishes the check with ``enforce`` once the target is loaded.
    """
    requirement = endpoint_policy.requirement

    if requirement.is_public:

        def public_dependency() -> None:
            return None

        return public_dependency

    def dependency(caller: CallerContext = Depends(get_caller)) -> CallerContext:
        if not requirement.needs_ownership or not holds_any(
            caller, requirement.permissions
        ):
            enforce(caller, endpoint_policy)
        return caller

    return dependency
