# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import os
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool
from fastapi.testclient import TestClient

# Safety check to prevent tests from running against production database
if os.getenv("TESTING") != "1":
    os.environ["TESTING"] = "1"

# Create test database engine and session
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    echo=False
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

from volunteer_hub.app import app, bootstrap
from volunteer_hub.config import settings
from volunteer_hub.db import models  # noqa: F401
from volunteer_hub.db.database import Base, get_db
from volunteer_hub.dependencies import get_email_service
from tests.test_helpers import MockBackgroundTasks, create_volunteer


@pytest.fixture(name="db_session", scope="function")
def db_session_fixture():
    """
    Creates a new database session for each test, with all tables created and
    the skill/state directories and admin account seeded.
    """
    Base.metadata.create_all(bind=test_engine)

    db = TestSessionLocal()
    bootstrap(db)

    try:
        yield db
    finally:
        db.close()
        # Drop all tables after the test to ensure a clean slate
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(name="second_session")
def second_session_fixture(db_session: Session):
    """
    An independent session on the same database, used to simulate a
    concurrent request.
    """
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(name="background_tasks")
def background_tasks_fixture():
    return MockBackgroundTasks()


@pytest.fixture(name="mock_email_service")
def mock_email_service_fixture():
    return MagicMock()


@pytest.fixture(name="client")
def client_fixture(db_session: Session, mock_email_service, mocker):
    """
    Provides a FastAPI TestClient that overrides the get_db dependency
    to use the test database session and replaces SendGrid with a mock.
    """
    def override_get_db():
        yield db_session

    # The test session is already seeded; skip the startup bootstrap
    mocker.patch("volunteer_hub.app.bootstrap")

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_service] = lambda: mock_email_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _login(client: TestClient, email: str, password: str) -> str:
    response = client.post("/api/v1/login", data={"username": email, "password": password})
    assert response.status_code == 200
    return response.json()["access_token"]


@pytest.fixture(name="admin_headers")
def admin_headers_fixture(client: TestClient):
    token = _login(client, settings.admin_email, settings.admin_password)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(name="volunteer_and_headers")
def volunteer_and_headers_fixture(client: TestClient, db_session: Session):
    volunteer = create_volunteer(
        db_session,
        email="auth_test_volunteer@example.com",
        full_name="Auth Test Volunteer",
        city="Austin",
        state="TX",
        skills={"cooking"},
    )
    token = _login(client, volunteer.email, "testpassword")
    return volunteer, {"Authorization": f"Bearer {token}"}
