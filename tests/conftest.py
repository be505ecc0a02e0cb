"""
Test configuration for the hospital administration backend.
"""
import os

# Configure the application before it is imported
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["PROTECT_RECORDS"] = "false"
os.environ.pop("BOOTSTRAP_ADMIN_EMAIL", None)
os.environ.pop("BOOTSTRAP_ADMIN_PASSWORD", None)

import pytest
from fastapi.testclient import TestClient

from hospital_admin.auth.models import User, UserRole
from hospital_admin.core.security import hash_password
from hospital_admin.database import Base, SessionLocal, engine, get_db, init_db
from hospital_admin.main import app

DEFAULT_PASSWORD = "secret123"


@pytest.fixture(scope="function")
def db():
    """
    Create a fresh database for each test.
    """
    # Create tables
    init_db(bind=engine)

    # Create session
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

    # Drop tables after test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """
    Create a test client with a test database session.
    """
    def override_get_db():
        try:
            yield db
        finally:
            pass

    # Override the get_db dependency
    app.dependency_overrides[get_db] = override_get_db

    # Create test client
    with TestClient(app) as client:
        yield client

    # Remove dependency override
    app.dependency_overrides = {}


@pytest.fixture
def register_user(client):
    """
    Return a helper registering a user through the API.
    """
    def _register(email="ana@example.com", password=DEFAULT_PASSWORD, role=None,
                  first_name="Ana", last_name="Lopez", token=None):
        payload = {
            "email": email,
            "password": password,
            "firstName": first_name,
            "lastName": last_name,
        }
        if role:
            payload["role"] = role
        headers = {"Authorization": f"Bearer {token}"} if token else None
        return client.post("/api/auth/register", json=payload, headers=headers)

    return _register


@pytest.fixture
def user_token(register_user):
    """Bearer token of a freshly registered patient."""
    response = register_user()
    assert response.status_code == 201
    return response.json()["token"]


@pytest.fixture
def admin_user(db):
    """An admin stored directly, the way the startup bootstrap creates one."""
    admin = User(
        email="admin@hospital.com",
        password_hash=hash_password(DEFAULT_PASSWORD),
        first_name="System",
        last_name="Administrator",
        role=UserRole.ADMIN,
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def admin_token(client, admin_user):
    response = client.post(
        "/api/auth/login",
        json={"email": admin_user.email, "password": DEFAULT_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]
