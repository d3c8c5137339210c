# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authorization error taxonomy."""


class AuthorizationError(Exception):
    """Base exception for authorization errors."""


class UnauthenticatedError(AuthorizationError):
    """No resolvable caller identity on the request."""


class ForbiddenError(AuthorizationError):
    """The caller's permission set does not satisfy the requirement.

    Terminal for the current permission set; recovery is an administrative
    grant, not a retried request.
    """

    def __init__(self, policy_name: str, user_id: object | None = None) -> None:
        super().__init__(f"Permission denied: {policy_name}")
        self.policy_name = policy_name
        self.user_id = user_id


class MisconfiguredRequirementError(AuthorizationError):
    """An operation declares a requirement the catalog cannot satisfy.

    Raised while the process starts, never while serving a request.
    """
