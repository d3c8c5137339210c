# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class UserRole(str, Enum):
    """Coarse account role.

    Only used to pick the permission template when an account is provisioned;
    authorization decisions never look at it.
    """

    ADMIN = "admin"
    EMPLOYEE = "employee"
    STUDENT = "student"
    IMMIGRATION_CLIENT = "immigration_client"
    PARTNER = "partner"
