# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Access decision engine.

Everything in this module is pure: no I/O, no shared mutable state. The
caller's identity and grants are passed in explicitly by the endpoint guard.
"""

import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from src.rbac.errors import ForbiddenError
from src.rbac.permissions import Permission, parse_permission


class Decision(str, Enum):
    """Outcome of an access check."""

    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True)
class CallerContext:
    """Resolved identity and grants of the caller of one request."""

    user_id: uuid.UUID
    permissions: frozenset[Permission] = field(default_factory=frozenset)

    def has(self, permission: Permission) -> bool:
        """Check whether the caller holds a permission."""
        return permission in self.permissions


@dataclass(frozen=True)
class OwnershipFact:
    """Recorded creator of the resource targeted by a request."""

    created_by_id: uuid.UUID | None

    @classmethod
    def of(cls, resource: Any) -> "OwnershipFact":
        """Build the fact from a persisted entity exposing ``created_by_id``."""
        return cls(created_by_id=resource.created_by_id)


@dataclass(frozen=True)
class Requirement:
    """Permissions an operation accepts, with OR semantics.

    No permissions means the operation is public. One permission is a plain
    membership check. Two or more form a disjunction, where ``_OWN_`` members
    only count for resources the caller created.
    """

    permissions: frozenset[Permission] = field(default_factory=frozenset)

    @classmethod
    def of(cls, *permissions: Permission | int | str) -> "Requirement":
        """Build a requirement, resolving names and identifiers.

        Raises:
            MisconfiguredRequirementError: If a value is not in the catalog.
        """
        return cls(frozenset(parse_permission(p) for p in permissions))

    @property
    def is_public(self) -> bool:
        return not self.permissions

    @property
    def is_disjunction(self) -> bool:
        return len(self.permissions) > 1

    @property
    def general(self) -> frozenset[Permission]:
        """Members that apply to any resource."""
        return frozenset(p for p in self.permissions if not p.is_own)

    @property
    def own(self) -> frozenset[Permission]:
        """Members that only apply to resources the caller created."""
        return frozenset(p for p in self.permissions if p.is_own)

    @property
    def needs_ownership(self) -> bool:
        """True when a decision may depend on an ownership fact."""
        return self.is_disjunction and bool(self.own)

    def describe(self) -> str:
        if self.is_public:
            return "public"
        return " | ".join(p.name for p in sorted(self.permissions))


PUBLIC = Requirement()


def holds_any(caller: CallerContext, permissions: Iterable[Permission]) -> bool:
    """Check whether the caller holds at least one of the permissions."""
    return any(p in caller.permissions for p in permissions)


def is_owner(caller: CallerContext, ownership: OwnershipFact | None) -> bool:
    """Exact identity match between the caller and the resource creator."""
    if ownership is None or ownership.created_by_id is None:
        return False
    return ownership.created_by_id == caller.user_id


def decide(
    caller: CallerContext,
    requirement: Requirement,
    ownership: OwnershipFact | None = None,
) -> Decision:
    """Decide whether the caller may perform an operation.

    Args:
        caller: Identity and granted permissions of the caller
        requirement: Permissions declared by the operation
        ownership: Creator of the targeted resource, when there is one

    Returns:
        Decision.ALLOW or Decision.DENY
    """
    if requirement.is_public:
        return Decision.ALLOW

    if not requirement.is_disjunction:
        (permission,) = requirement.permissions
        return Decision.ALLOW if caller.has(permission) else Decision.DENY

    if holds_any(caller, requirement.general):
        return Decision.ALLOW

    if holds_any(caller, requirement.own) and is_owner(caller, ownership):
        return Decision.ALLOW

    return Decision.DENY


def authorize(
    caller: CallerContext,
    requirement: Requirement,
    ownership: OwnershipFact | None = None,
    policy_name: str | None = None,
) -> None:
    """Raise ForbiddenError unless ``decide`` allows the operation."""
    if decide(caller, requirement, ownership) is Decision.DENY:
        raise ForbiddenError(
            policy_name or requirement.describe(), user_id=caller.user_id
        )
