# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Endpoint guard: declared policies and their enforcement."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fastapi import HTTPException, status

from src.rbac.access import CallerContext, OwnershipFact, Requirement, authorize
from src.rbac.errors import ForbiddenError, MisconfiguredRequirementError
from src.rbac.permissions import Permission

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EndpointPolicy:
    """Authorization requirement declared by one operation.

    ``resource`` names the resource the operation acts on (``"comments"``).
    When set, every permission of the requirement must belong to it.
    """

    name: str
    requirement: Requirement
    resource: str | None = None


_POLICIES: dict[str, EndpointPolicy] = {}


def policy(
    name: str,
    *permissions: Permission | int | str,
    resource: str | None = None,
) -> EndpointPolicy:
    """Declare and register the policy of an operation.

    Unknown permissions raise while the declaring module is imported, i.e.
    while the application starts.

    Raises:
        MisconfiguredRequirementError: If a permission is not in the catalog
            or the name is already registered with a different requirement.
    """
    endpoint_policy = EndpointPolicy(
        name=name,
        requirement=Requirement.of(*permissions),
        resource=resource,
    )
    existing = _POLICIES.get(name)
    if existing is not None and existing != endpoint_policy:
        raise MisconfiguredRequirementError(
            f"Policy {name!r} is already registered with a different requirement"
        )
    _POLICIES[name] = endpoint_policy
    return endpoint_policy


def registered_policies() -> list[EndpointPolicy]:
    """Return all policies declared so far."""
    return list(_POLICIES.values())


def policy_problems(endpoint_policy: EndpointPolicy) -> list[str]:
    """List the configuration problems of a policy."""
    problems = []
    for permission in endpoint_policy.requirement.permissions:
        if not isinstance(permission, Permission) or permission not in Permission:
            problems.append(
                f"{endpoint_policy.name}: {permission!r} is not in the catalog"
            )
            continue
        if endpoint_policy.resource is None:
            continue
        expected = endpoint_policy.resource.upper()
        if permission.resource != expected:
            problems.append(
                f"{endpoint_policy.name}: {permission.name} belongs to "
                f"{permission.resource}, not {expected}"
            )
    return problems


def validate_policies(policies: Iterable[EndpointPolicy] | None = None) -> int:
    """Check declared policies at startup.

    Returns:
        Number of policies checked

    Raises:
        MisconfiguredRequirementError: If any policy is misconfigured
    """
    checked = list(registered_policies() if policies is None else policies)
    problems = [p for endpoint_policy in checked for p in policy_problems(endpoint_policy)]
    if problems:
        for problem in problems:
            logger.error(f"Misconfigured requirement: {problem}")
        raise MisconfiguredRequirementError("; ".join(problems))
    return len(checked)


def enforce(
    caller: CallerContext,
    endpoint_policy: EndpointPolicy,
    ownership: OwnershipFact | None = None,
) -> None:
    """Reject the request with 403 unless the policy allows the caller."""
    try:
        authorize(
            caller,
            endpoint_policy.requirement,
            ownership,
            policy_name=endpoint_policy.name,
        )
    except ForbiddenError as e:
        logger.info(f"Denied {endpoint_policy.name} for user {caller.user_id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=str(e),
        ) from e
