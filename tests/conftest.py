# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

# Set test environment before importing app
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["IDENTITY_HEADER"] = "X-Authenticated-User"

from src.database import get_db
from src.main import app
from src.models import User, UserRole
from src.models.base import Base
from src.schemas.user import UserCreate
from src.services import user_service

IDENTITY_HEADER = "X-Authenticated-User"

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def auth_headers(user: User) -> dict[str, str]:
    """Headers identifying ``user`` the way the upstream auth layer does."""
    return {IDENTITY_HEADER: str(user.id)}


def make_user(db_session, role: UserRole, email: str) -> User:
    """Provision a user whose grants are seeded from the role template."""
    return user_service.provision_user(
        db_session,
        UserCreate(email=email, first_name="Test", last_name=role.value, role=role),
    )


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db_session) -> User:
    """Create an administrator holding the whole catalog."""
    return make_user(db_session, UserRole.ADMIN, "admin@example.com")


@pytest.fixture
def employee_user(db_session) -> User:
    """Create an employee with the default employee permissions."""
    return make_user(db_session, UserRole.EMPLOYEE, "employee@example.com")


@pytest.fixture
def student_user(db_session) -> User:
    """Create a student with the default student permissions."""
    return make_user(db_session, UserRole.STUDENT, "student@example.com")


@pytest.fixture
def other_student(db_session) -> User:
    """Create a second student for ownership checks."""
    return make_user(db_session, UserRole.STUDENT, "other.student@example.com")


@pytest.fixture
def partner_user(db_session) -> User:
    """Create a partner with the default partner permissions."""
    return make_user(db_session, UserRole.PARTNER, "partner@example.com")
