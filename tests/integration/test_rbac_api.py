# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for RBAC and user provisioning endpoints."""

import uuid

from conftest import auth_headers
from src.models.enums import UserRole
from src.rbac.permissions import Permission
from src.rbac.roles import template
from src.services import grant_service


class TestCatalogEndpoints:
    """Tests for the catalog and role template endpoints."""

    def test_catalog_requires_employees_read(self, client, student_user):
        response = client.get("/api/v1/rbac/permissions", headers=auth_headers(student_user))
        assert response.status_code == 403

    def test_catalog_lists_every_permission(self, client, employee_user):
        response = client.get("/api/v1/rbac/permissions", headers=auth_headers(employee_user))
        assert response.status_code == 200
        data = response.json()
        assert len(data) == len(Permission)
        assert data[-1]["name"] == "COMMENTS_OWN_DELETE"
        assert data[-1]["id"] == 134
        assert data[-1]["is_own"] is True

    def test_list_roles(self, client, employee_user):
        response = client.get("/api/v1/rbac/roles", headers=auth_headers(employee_user))
        assert response.status_code == 200
        roles = {entry["role"] for entry in response.json()}
        assert roles == {role.value for role in UserRole}

    def test_get_role(self, client, employee_user):
        response = client.get("/api/v1/rbac/roles/partner", headers=auth_headers(employee_user))
        assert response.status_code == 200
        assert set(response.json()["permissions"]) == {
            p.name for p in template(UserRole.PARTNER)
        }

    def test_get_unknown_role(self, client, employee_user):
        response = client.get("/api/v1/rbac/roles/guest", headers=auth_headers(employee_user))
        assert response.status_code == 422


class TestMyPermissions:
    """Tests for GET /api/v1/rbac/me/permissions."""

    def test_requires_authentication(self, client):
        assert client.get("/api/v1/rbac/me/permissions").status_code == 401

    def test_returns_own_grants(self, client, student_user):
        response = client.get("/api/v1/rbac/me/permissions", headers=auth_headers(student_user))
        assert response.status_code == 200
        data = response.json()
        assert data["role"] == "student"
        assert set(data["permissions"]) == {p.name for p in template(UserRole.STUDENT)}


class TestUserPermissionEndpoints:
    """Tests for /api/v1/rbac/users/{user_id}/permissions."""

    def test_employee_cannot_read_student_grants(self, client, employee_user, student_user):
        response = client.get(
            f"/api/v1/rbac/users/{student_user.id}/permissions",
            headers=auth_headers(employee_user),
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: users.student.read"

    def test_employee_reads_employee_grants(self, client, db_session, employee_user):
        response = client.get(
            f"/api/v1/rbac/users/{employee_user.id}/permissions",
            headers=auth_headers(employee_user),
        )
        assert response.status_code == 200

    def test_unknown_user(self, client, admin_user):
        response = client.get(
            f"/api/v1/rbac/users/{uuid.uuid4()}/permissions",
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 404

    def test_admin_grants_by_name_and_identifier(self, client, db_session, admin_user, student_user):
        response = client.post(
            f"/api/v1/rbac/users/{student_user.id}/permissions",
            json={"permissions": ["Comments_Update", 132]},
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 200
        assert {"COMMENTS_UPDATE", "COMMENTS_DELETE"} <= set(response.json()["permissions"])

        permissions = grant_service.get_user_permissions(db_session, student_user.id)
        assert Permission.COMMENTS_DELETE in permissions

    def test_unknown_permission_is_rejected(self, client, admin_user, student_user):
        response = client.post(
            f"/api/v1/rbac/users/{student_user.id}/permissions",
            json={"permissions": ["COMMENTS_ARCHIVE"]},
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 422

    def test_admin_revokes(self, client, db_session, admin_user, student_user):
        response = client.request(
            "DELETE",
            f"/api/v1/rbac/users/{student_user.id}/permissions",
            json={"permissions": ["POSTS_CREATE"]},
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 200
        assert "POSTS_CREATE" not in response.json()["permissions"]

        # Template stays untouched
        assert Permission.POSTS_CREATE in template(UserRole.STUDENT)

    def test_admin_replaces(self, client, admin_user, partner_user):
        response = client.put(
            f"/api/v1/rbac/users/{partner_user.id}/permissions",
            json={"permissions": ["COMMUNITIES_READ"]},
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 200
        assert response.json()["permissions"] == ["COMMUNITIES_READ"]
        assert response.json()["permission_ids"] == [120]

    def test_admin_grants_cannot_be_edited(self, client, db_session, admin_user):
        response = client.put(
            f"/api/v1/rbac/users/{admin_user.id}/permissions",
            json={"permissions": []},
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 400

    def test_change_applies_to_next_request(self, client, admin_user, student_user):
        student_headers = auth_headers(student_user)
        assert client.get("/api/v1/locations", headers=student_headers).status_code == 200

        client.request(
            "DELETE",
            f"/api/v1/rbac/users/{student_user.id}/permissions",
            json={"permissions": ["LOCATIONS_READ"]},
            headers=auth_headers(admin_user),
        )
        assert client.get("/api/v1/locations", headers=student_headers).status_code == 403


class TestUserProvisioning:
    """Tests for /api/v1/users."""

    def test_provision_requires_role_permission(self, client, employee_user):
        response = client.post(
            "/api/v1/users",
            json={
                "email": "new.student@example.com",
                "first_name": "New",
                "last_name": "Student",
                "role": "student",
            },
            headers=auth_headers(employee_user),
        )
        assert response.status_code == 403
        assert response.json()["detail"] == "Permission denied: users.student.create"

    def test_provision_seeds_template(self, client, db_session, employee_user):
        grant_service.grant_permissions(
            db_session, employee_user.id, [Permission.STUDENTS_CREATE]
        )
        response = client.post(
            "/api/v1/users",
            json={
                "email": "new.student@example.com",
                "first_name": "New",
                "last_name": "Student",
                "role": "student",
            },
            headers=auth_headers(employee_user),
        )
        assert response.status_code == 201
        data = response.json()
        assert data["created_by_id"] == str(employee_user.id)

        permissions = grant_service.get_user_permissions(db_session, uuid.UUID(data["id"]))
        assert permissions == template(UserRole.STUDENT)

    def test_admin_cannot_be_provisioned(self, client, admin_user):
        response = client.post(
            "/api/v1/users",
            json={
                "email": "second.admin@example.com",
                "first_name": "Second",
                "last_name": "Admin",
                "role": "admin",
            },
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 400

    def test_duplicate_email(self, client, admin_user, student_user):
        response = client.post(
            "/api/v1/users",
            json={
                "email": student_user.email,
                "first_name": "Dup",
                "last_name": "Licate",
                "role": "student",
            },
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 409

    def test_get_user(self, client, admin_user, student_user):
        response = client.get(f"/api/v1/users/{student_user.id}", headers=auth_headers(admin_user))
        assert response.status_code == 200
        assert response.json()["email"] == student_user.email

    def test_deactivated_user_is_unauthenticated(self, client, admin_user, student_user):
        response = client.put(
            f"/api/v1/users/{student_user.id}/status",
            json={"is_active": False},
            headers=auth_headers(admin_user),
        )
        assert response.status_code == 200
        response = client.get("/api/v1/rbac/me/permissions", headers=auth_headers(student_user))
        assert response.status_code == 401
