# src/rbac/roles.py
from src.models.enums import UserRole
from src.rbac.permissions import Permission

# Admin always gets every catalog entry
ADMIN_PERMISSIONS: frozenset[Permission] = frozenset(Permission)

# Every role below is written out in full on purpose; templates are never
# derived from one another.
STUDENT_PERMISSIONS: frozenset[Permission] = frozenset({
    Permission.LOCATIONS_READ,
    Permission.NATIONALITIES_READ,
    Permission.UNIVERSITIES_READ,
    Permission.UNIVERSITY_PROGRAMS_READ,
    Permission.UNIVERSITY_TYPES_READ,
    Permission.PROGRAM_TYPES_READ,

    Permission.DOCUMENTS_OWN_CREATE,
    Permission.DOCUMENTS_OWN_READ,
    Permission.DOCUMENTS_OWN_UPDATE,
    Permission.DOCUMENTS_OWN_DELETE,

    Permission.UNIVERSITY_APPLICATIONS_OWN_CREATE,
    Permission.UNIVERSITY_APPLICATIONS_OWN_READ,
    Permission.VISA_APPLICATIONS_OWN_READ,

    Permission.COMMUNITIES_READ,
    Permission.POSTS_CREATE,
    Permission.POSTS_READ,
    Permission.POSTS_OWN_UPDATE,
    Permission.POSTS_OWN_DELETE,
    Permission.COMMENTS_CREATE,
    Permission.COMMENTS_READ,
    Permission.COMMENTS_OWN_UPDATE,
    Permission.COMMENTS_OWN_DELETE,
})

EMPLOYEE_PERMISSIONS: frozenset[Permission] = frozenset({
    Permission.LOCATIONS_READ,
    Permission.NATIONALITIES_READ,
    Permission.UNIVERSITIES_READ,
    Permission.UNIVERSITY_PROGRAMS_READ,
    Permission.UNIVERSITY_TYPES_READ,
    Permission.PROGRAM_TYPES_READ,
    Permission.CLIENT_SOURCES_READ,
    Permission.DOCUMENT_TYPES_READ,
    Permission.VISA_APPLICATION_TYPES_READ,
    Permission.EMPLOYEES_READ,
    Permission.IMMIGRATION_CLIENTS_OWN_READ,
    Permission.STUDENTS_OWN_READ,

    Permission.COMMUNITIES_READ,
    Permission.POSTS_CREATE,
    Permission.POSTS_READ,
    Permission.POSTS_OWN_UPDATE,
    Permission.POSTS_OWN_DELETE,
    Permission.COMMENTS_CREATE,
    Permission.COMMENTS_READ,
    Permission.COMMENTS_OWN_UPDATE,
    Permission.COMMENTS_OWN_DELETE,
})

PARTNER_PERMISSIONS: frozenset[Permission] = frozenset({
    Permission.COMMUNITIES_READ,
    Permission.POSTS_CREATE,
    Permission.POSTS_READ,
    Permission.POSTS_OWN_UPDATE,
    Permission.POSTS_OWN_DELETE,
    Permission.COMMENTS_CREATE,
    Permission.COMMENTS_READ,
    Permission.COMMENTS_OWN_UPDATE,
    Permission.COMMENTS_OWN_DELETE,
})

IMMIGRATION_CLIENT_PERMISSIONS: frozenset[Permission] = frozenset({
    Permission.LOCATIONS_READ,
    Permission.NATIONALITIES_READ,

    Permission.DOCUMENTS_OWN_CREATE,
    Permission.DOCUMENTS_OWN_READ,
    Permission.DOCUMENTS_OWN_UPDATE,
    Permission.DOCUMENTS_OWN_DELETE,

    Permission.VISA_APPLICATIONS_OWN_READ,

    Permission.COMMUNITIES_READ,
    Permission.POSTS_CREATE,
    Permission.POSTS_READ,
    Permission.POSTS_OWN_UPDATE,
    Permission.POSTS_OWN_DELETE,
    Permission.COMMENTS_CREATE,
    Permission.COMMENTS_READ,
    Permission.COMMENTS_OWN_UPDATE,
    Permission.COMMENTS_OWN_DELETE,
})

ROLE_TEMPLATES: dict[UserRole, frozenset[Permission]] = {
    UserRole.ADMIN: ADMIN_PERMISSIONS,
    UserRole.EMPLOYEE: EMPLOYEE_PERMISSIONS,
    UserRole.STUDENT: STUDENT_PERMISSIONS,
    UserRole.IMMIGRATION_CLIENT: IMMIGRATION_CLIENT_PERMISSIONS,
    UserRole.PARTNER: PARTNER_PERMISSIONS,
}

# Permission needed to provision an account of a role. Admin accounts are
# never provisioned through the API.
ROLE_PROVISIONING_PERMISSIONS: dict[UserRole, Permission] = {
    UserRole.EMPLOYEE: Permission.EMPLOYEES_CREATE,
    UserRole.STUDENT: Permission.STUDENTS_CREATE,
    UserRole.IMMIGRATION_CLIENT: Permission.IMMIGRATION_CLIENTS_CREATE,
    UserRole.PARTNER: Permission.PARTNERS_CREATE,
}

# Permissions needed to look at and to edit the grants of a user by role.
ROLE_GRANT_READ_PERMISSIONS: dict[UserRole, Permission] = {
    UserRole.EMPLOYEE: Permission.EMPLOYEES_READ,
    UserRole.STUDENT: Permission.STUDENTS_READ,
    UserRole.IMMIGRATION_CLIENT: Permission.IMMIGRATION_CLIENTS_READ,
    UserRole.PARTNER: Permission.PARTNERS_READ,
}

ROLE_GRANT_MANAGEMENT_PERMISSIONS: dict[UserRole, Permission] = {
    UserRole.EMPLOYEE: Permission.EMPLOYEES_UPDATE,
    UserRole.STUDENT: Permission.STUDENTS_UPDATE,
    UserRole.IMMIGRATION_CLIENT: Permission.IMMIGRATION_CLIENTS_UPDATE,
    UserRole.PARTNER: Permission.PARTNERS_UPDATE,
}


def template(role: UserRole) -> frozenset[Permission]:
    """Return the permission template used to seed a new account of a role."""
    return ROLE_TEMPLATES[role]
