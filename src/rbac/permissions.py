# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission catalog.

Every capability has a stable integer identifier. Identifiers are persisted in
``permission_assignments.permission``, so new permissions are appended with
the next free number and existing numbers are never reused or reordered.
"""

import re
from enum import IntEnum, unique

from src.rbac.errors import MisconfiguredRequirementError

OWN_MARKER = "_OWN_"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


@unique
class Permission(IntEnum):
    """Available permissions, keyed by stable identifier."""

    # Locations
    LOCATIONS_CREATE = 1
    LOCATIONS_READ = 2
    LOCATIONS_UPDATE = 3
    LOCATIONS_DELETE = 4

    # Nationalities
    NATIONALITIES_CREATE = 5
    NATIONALITIES_READ = 6
    NATIONALITIES_UPDATE = 7
    NATIONALITIES_DELETE = 8

    # Income types
    INCOME_TYPES_CREATE = 9
    INCOME_TYPES_READ = 10
    INCOME_TYPES_UPDATE = 11
    INCOME_TYPES_DELETE = 12

    # Expense types
    EXPENSE_TYPES_CREATE = 13
    EXPENSE_TYPES_READ = 14
    EXPENSE_TYPES_UPDATE = 15
    EXPENSE_TYPES_DELETE = 16

    # Incomes
    INCOMES_CREATE = 17
    INCOMES_READ = 18
    INCOMES_UPDATE = 19
    INCOMES_DELETE = 20

    # Expenses
    EXPENSES_CREATE = 21
    EXPENSES_READ = 22
    EXPENSES_UPDATE = 23
    EXPENSES_DELETE = 24

    # University types
    UNIVERSITY_TYPES_CREATE = 25
    UNIVERSITY_TYPES_READ = 26
    UNIVERSITY_TYPES_UPDATE = 27
    UNIVERSITY_TYPES_DELETE = 28

    # Program types
    PROGRAM_TYPES_CREATE = 29
    PROGRAM_TYPES_READ = 30
    PROGRAM_TYPES_UPDATE = 31
    PROGRAM_TYPES_DELETE = 32

    # Document types
    DOCUMENT_TYPES_CREATE = 33
    DOCUMENT_TYPES_READ = 34
    DOCUMENT_TYPES_UPDATE = 35
    DOCUMENT_TYPES_DELETE = 36

    # Employees
    EMPLOYEES_CREATE = 37
    EMPLOYEES_READ = 38
    EMPLOYEES_UPDATE = 39
    EMPLOYEES_DELETE = 40

    # Currencies
    CURRENCIES_CREATE = 41
    CURRENCIES_READ = 42
    CURRENCIES_UPDATE = 43
    CURRENCIES_DELETE = 44

    # Students
    STUDENTS_CREATE = 45
    STUDENTS_READ = 46
    STUDENTS_UPDATE = 47
    STUDENTS_DELETE = 48

    STUDENTS_OWN_READ = 49
    STUDENTS_OWN_UPDATE = 50

    STUDENTS_OWN_DOCUMENTS_CREATE = 51
    STUDENTS_OWN_DOCUMENTS_READ = 52
    STUDENTS_OWN_DOCUMENTS_UPDATE = 53
    STUDENTS_OWN_DOCUMENTS_DELETE = 54

    STUDENTS_OWN_UNIVERSITY_APPLICATIONS_CREATE = 55
    STUDENTS_OWN_UNIVERSITY_APPLICATIONS_READ = 56
    STUDENTS_OWN_UNIVERSITY_APPLICATIONS_UPDATE = 57
    STUDENTS_OWN_UNIVERSITY_APPLICATIONS_DELETE = 58

    STUDENTS_OWN_VISA_APPLICATIONS_CREATE = 59
    STUDENTS_OWN_VISA_APPLICATIONS_READ = 60
    STUDENTS_OWN_VISA_APPLICATIONS_UPDATE = 61
    STUDENTS_OWN_VISA_APPLICATIONS_DELETE = 62

    # Partners
    PARTNERS_CREATE = 63
    PARTNERS_READ = 64
    PARTNERS_UPDATE = 65
    PARTNERS_DELETE = 66

    # Immigration clients
    IMMIGRATION_CLIENTS_CREATE = 67
    IMMIGRATION_CLIENTS_READ = 68
    IMMIGRATION_CLIENTS_UPDATE = 69
    IMMIGRATION_CLIENTS_DELETE = 70

    IMMIGRATION_CLIENTS_OWN_READ = 71
    IMMIGRATION_CLIENTS_OWN_UPDATE = 72

    IMMIGRATION_CLIENTS_OWN_DOCUMENTS_CREATE = 73
    IMMIGRATION_CLIENTS_OWN_DOCUMENTS_READ = 74
    IMMIGRATION_CLIENTS_OWN_DOCUMENTS_UPDATE = 75
    IMMIGRATION_CLIENTS_OWN_DOCUMENTS_DELETE = 76

    IMMIGRATION_CLIENTS_OWN_VISA_APPLICATIONS_CREATE = 77
    IMMIGRATION_CLIENTS_OWN_VISA_APPLICATIONS_READ = 78
    IMMIGRATION_CLIENTS_OWN_VISA_APPLICATIONS_UPDATE = 79
    IMMIGRATION_CLIENTS_OWN_VISA_APPLICATIONS_DELETE = 80

    # Universities
    UNIVERSITIES_CREATE = 81
    UNIVERSITIES_READ = 82
    UNIVERSITIES_UPDATE = 83
    UNIVERSITIES_DELETE = 84

    # University programs
    UNIVERSITY_PROGRAMS_CREATE = 85
    UNIVERSITY_PROGRAMS_READ = 86
    UNIVERSITY_PROGRAMS_UPDATE = 87
    UNIVERSITY_PROGRAMS_DELETE = 88

    # Documents
    DOCUMENTS_CREATE = 89
    DOCUMENTS_READ = 90
    DOCUMENTS_UPDATE = 91
    DOCUMENTS_DELETE = 92

    DOCUMENTS_OWN_CREATE = 93
    DOCUMENTS_OWN_READ = 94
    DOCUMENTS_OWN_UPDATE = 95
    DOCUMENTS_OWN_DELETE = 96

    # University applications
    UNIVERSITY_APPLICATIONS_CREATE = 97
    UNIVERSITY_APPLICATIONS_READ = 98
    UNIVERSITY_APPLICATIONS_UPDATE = 99
    UNIVERSITY_APPLICATIONS_DELETE = 100

    UNIVERSITY_APPLICATIONS_OWN_CREATE = 101
    UNIVERSITY_APPLICATIONS_OWN_READ = 102

    # Visa applications
    VISA_APPLICATIONS_CREATE = 103
    VISA_APPLICATIONS_READ = 104
    VISA_APPLICATIONS_UPDATE = 105
    VISA_APPLICATIONS_DELETE = 106

    VISA_APPLICATIONS_OWN_READ = 107

    # Visa application types
    VISA_APPLICATION_TYPES_CREATE = 108
    VISA_APPLICATION_TYPES_READ = 109
    VISA_APPLICATION_TYPES_UPDATE = 110
    VISA_APPLICATION_TYPES_DELETE = 111

    # Client sources
    CLIENT_SOURCES_CREATE = 112
    CLIENT_SOURCES_READ = 113
    CLIENT_SOURCES_UPDATE = 114
    CLIENT_SOURCES_DELETE = 115

    # Dashboards
    PORTAL_OVERVIEW = 116
    USERS_OVERVIEW = 117
    FINANCES_OVERVIEW = 118

    # Communities
    COMMUNITIES_CREATE = 119
    COMMUNITIES_READ = 120
    COMMUNITIES_UPDATE = 121
    COMMUNITIES_DELETE = 122

    # Posts
    POSTS_CREATE = 123
    POSTS_READ = 124
    POSTS_UPDATE = 125
    POSTS_DELETE = 126

    POSTS_OWN_UPDATE = 127
    POSTS_OWN_DELETE = 128

    # Comments
    COMMENTS_CREATE = 129
    COMMENTS_READ = 130
    COMMENTS_UPDATE = 131
    COMMENTS_DELETE = 132

    COMMENTS_OWN_UPDATE = 133
    COMMENTS_OWN_DELETE = 134

    @property
    def is_own(self) -> bool:
        """True for permissions restricted to resources the caller created."""
        return OWN_MARKER in self.name

    @property
    def action(self) -> str:
        """Trailing segment of the name, e.g. ``UPDATE``."""
        return self.name.rsplit("_", 1)[-1]

    @property
    def resource(self) -> str:
        """Resource segment of the name, e.g. ``COMMENTS``.

        For owner-restricted variants this is the part before ``_OWN_``.
        """
        if self.is_own:
            return self.name.split(OWN_MARKER, 1)[0]
        return self.name.rsplit("_", 1)[0]

    @property
    def description(self) -> str:
        """Human readable label for admin screens."""
        subject = self.name.rsplit("_", 1)[0].replace("_", " ").lower()
        if self.is_own:
            subject = subject.replace(" own", "", 1) + " (own)"
        return f"{self.action.capitalize()} {subject}"


def normalize_permission_name(name: str) -> str:
    """Convert ``Comments_Own_Update`` style names to catalog member names."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).upper()


def parse_permission(value: Permission | int | str) -> Permission:
    """Resolve a catalog entry from a member, stable identifier, or name.

    Raises:
        MisconfiguredRequirementError: If the value is not in the catalog.
    """
    if isinstance(value, Permission):
        return value
    if isinstance(value, bool):
        raise MisconfiguredRequirementError(f"Unknown permission: {value!r}")
    if isinstance(value, int):
        try:
            return Permission(value)
        except ValueError as e:
            raise MisconfiguredRequirementError(
                f"Unknown permission identifier: {value}"
            ) from e
    if isinstance(value, str):
        try:
            return Permission[normalize_permission_name(value)]
        except KeyError as e:
            raise MisconfiguredRequirementError(
                f"Unknown permission name: {value!r}"
            ) from e
    raise MisconfiguredRequirementError(f"Unknown permission: {value!r}")


def describe_catalog() -> list[dict]:
    """Return every catalog entry in identifier order."""
    return [
        {
            "id": int(perm),
            "name": perm.name,
            "resource": perm.resource,
            "action": perm.action,
            "is_own": perm.is_own,
            "description": perm.description,
        }
        for perm in sorted(Permission)
    ]
