"""
Tests for the authentication endpoints.
"""
from datetime import timedelta

from hospital_admin.auth import service as auth_service
from hospital_admin.auth.models import User
from hospital_admin.core.security import create_access_token, decode_access_token, verify_password


def test_register_returns_token_and_user(register_user, db):
    """
    Registration stores a hashed password and never returns it.
    """
    response = register_user(email="Ana@Example.com")
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "User registered successfully"
    assert data["token"]

    user = data["user"]
    assert user["email"] == "ana@example.com"
    assert user["firstName"] == "Ana"
    assert user["lastName"] == "Lopez"
    assert user["role"] == "patient"
    assert user["isActive"] is True
    assert "password" not in user
    assert "passwordHash" not in user

    stored = db.query(User).filter(User.email == "ana@example.com").first()
    assert stored.password_hash != "secret123"
    assert verify_password("secret123", stored.password_hash)


def test_admin_registers_staff_role(register_user, admin_token):
    response = register_user(email="desk@example.com", role="receptionist", token=admin_token)
    assert response.status_code == 201
    assert response.json()["user"]["role"] == "receptionist"


def test_anonymous_staff_registration_is_refused(register_user, client):
    """
    Without an admin token only the patient role can be registered.
    """
    for role in ("admin", "doctor", "receptionist"):
        response = register_user(email=f"{role}@example.com", role=role)
        assert response.status_code == 403
        assert response.json() == {
            "success": False,
            "message": "Only an administrator can register users with this role",
        }

    assert register_user(email="self@example.com", role="patient").status_code == 201


def test_non_admin_cannot_register_staff_role(register_user, user_token):
    response = register_user(email="doc@example.com", role="doctor", token=user_token)
    assert response.status_code == 403


def test_register_with_invalid_token_is_rejected(register_user):
    response = register_user(email="doc@example.com", role="doctor", token="garbage")
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_register_duplicate_email_ignores_case(register_user):
    assert register_user(email="ana@example.com").status_code == 201

    response = register_user(email="ANA@example.COM")
    assert response.status_code == 409
    assert response.json() == {"success": False, "message": "Email already registered"}


def test_register_missing_fields(client):
    response = client.post("/api/auth/register", json={"email": "ana@example.com"})
    assert response.status_code == 400
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Please provide email, password, first name and last name"


def test_register_blank_name_counts_as_missing(register_user):
    response = register_user(first_name="   ")
    assert response.status_code == 400


def test_register_short_password(register_user):
    response = register_user(password="123")
    assert response.status_code == 400
    assert response.json()["message"] == "Password must be at least 6 characters long"


def test_register_invalid_email(register_user):
    response = register_user(email="not-an-email")
    assert response.status_code == 422


def test_register_unique_constraint_maps_to_conflict(register_user, monkeypatch):
    """
    A concurrent insert that passes the pre-check is still answered with 409.
    """
    assert register_user(email="ana@example.com").status_code == 201
    monkeypatch.setattr(auth_service, "get_user_by_email", lambda db, email: None)

    response = register_user(email="ana@example.com")
    assert response.status_code == 409
    assert response.json()["message"] == "Email already registered"


def test_login_success(register_user, client):
    register_user()
    response = client.post(
        "/api/auth/login",
        json={"email": "ANA@example.com", "password": "secret123"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Logged in successfully"
    assert data["user"]["email"] == "ana@example.com"

    identity = decode_access_token(data["token"])
    assert identity.user_id == data["user"]["id"]
    assert identity.email == "ana@example.com"


def test_login_malformed_email_is_invalid_credentials(client):
    response = client.post(
        "/api/auth/login",
        json={"email": "not-an-email", "password": "secret123"},
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


def test_login_with_unreadable_stored_hash(register_user, client, db):
    """
    A corrupted password hash is a server error, not a credential mismatch.
    """
    register_user()
    user = db.query(User).filter(User.email == "ana@example.com").first()
    user.password_hash = "not-a-bcrypt-hash"
    db.commit()

    response = client.post(
        "/api/auth/login",
        json={"email": "ana@example.com", "password": "secret123"},
    )
    assert response.status_code == 500
    assert response.json() == {"message": "Internal server error"}


def test_login_wrong_password_matches_unknown_email(register_user, client):
    register_user()
    wrong_password = client.post(
        "/api/auth/login",
        json={"email": "ana@example.com", "password": "wrong-password"},
    )
    unknown_email = client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "secret123"},
    )
    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json()
    assert wrong_password.json()["message"] == "Invalid credentials"


def test_login_missing_credentials(client):
    response = client.post("/api/auth/login", json={"email": "ana@example.com"})
    assert response.status_code == 400
    assert response.json()["message"] == "Please provide email and password"


def test_disabled_account_cannot_log_in(register_user, client, admin_token):
    """
    An admin disables an account; login is then refused with 403.
    """
    user_id = register_user().json()["user"]["id"]

    response = client.patch(
        f"/api/auth/users/{user_id}/status",
        json={"isActive": False},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 200
    assert response.json()["user"]["isActive"] is False

    response = client.post(
        "/api/auth/login",
        json={"email": "ana@example.com", "password": "secret123"},
    )
    assert response.status_code == 403
    assert response.json()["message"] == "User account has been disabled"


def test_disabled_account_wrong_password_is_invalid_credentials(register_user, client, db):
    register_user()
    user = db.query(User).filter(User.email == "ana@example.com").first()
    user.is_active = False
    db.commit()

    response = client.post(
        "/api/auth/login",
        json={"email": "ana@example.com", "password": "wrong-password"},
    )
    assert response.status_code == 401


def test_status_update_requires_admin(register_user, client, user_token):
    other_id = register_user(email="luis@example.com").json()["user"]["id"]

    response = client.patch(
        f"/api/auth/users/{other_id}/status",
        json={"isActive": False},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 403
    assert response.json()["message"] == "You do not have permission to access this resource"


def test_status_update_unknown_user(client, admin_token):
    response = client.patch(
        "/api/auth/users/999/status",
        json={"isActive": False},
        headers={"Authorization": f"Bearer {admin_token}"},
    )
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_admin_cannot_disable_own_account(client, admin_user, admin_token):
    headers = {"Authorization": f"Bearer {admin_token}"}
    response = client.patch(
        f"/api/auth/users/{admin_user.id}/status",
        json={"isActive": False},
        headers=headers,
    )
    assert response.status_code == 400
    assert response.json()["message"] == "You cannot disable your own account"

    response = client.post(
        "/api/auth/login",
        json={"email": "admin@hospital.com", "password": "secret123"},
    )
    assert response.status_code == 200


def test_get_profile(client, user_token):
    response = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {user_token}"})
    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["user"]["email"] == "ana@example.com"
    assert "passwordHash" not in data["user"]


def test_profile_without_token(client):
    response = client.get("/api/auth/profile")
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Token not provided or invalid format"}


def test_profile_with_non_bearer_header(client, user_token):
    response = client.get("/api/auth/profile", headers={"Authorization": f"Token {user_token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token not provided or invalid format"


def test_profile_with_invalid_token(client):
    response = client.get("/api/auth/profile", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


def test_profile_with_expired_token(register_user, client):
    user = register_user().json()["user"]
    token = create_access_token(user["id"], user["email"], expires_delta=timedelta(seconds=-10))

    response = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401
    assert response.json()["message"] == "Token has expired"


def test_profile_of_missing_user(client):
    token = create_access_token(999, "ghost@example.com")
    response = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_update_profile_changes_only_supplied_names(client, user_token):
    headers = {"Authorization": f"Bearer {user_token}"}
    response = client.put("/api/auth/profile", json={"firstName": "Maria"}, headers=headers)
    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Profile updated successfully"
    assert data["user"]["firstName"] == "Maria"
    assert data["user"]["lastName"] == "Lopez"
    assert data["user"]["updatedAt"]

    # Blank names are ignored
    response = client.put("/api/auth/profile", json={"lastName": "  "}, headers=headers)
    assert response.json()["user"]["lastName"] == "Lopez"


def test_change_password(client, user_token):
    headers = {"Authorization": f"Bearer {user_token}"}
    response = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "secret123", "newPassword": "newsecret456"},
        headers=headers,
    )
    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Password updated successfully"}

    old_login = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "secret123"}
    )
    new_login = client.post(
        "/api/auth/login", json={"email": "ana@example.com", "password": "newsecret456"}
    )
    assert old_login.status_code == 401
    assert new_login.status_code == 200


def test_change_password_wrong_current(client, user_token):
    response = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "wrong-password", "newPassword": "newsecret456"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 401
    assert response.json()["message"] == "Current password is incorrect"


def test_change_password_short_new_password(client, user_token):
    response = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "secret123", "newPassword": "123"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "New password must be at least 6 characters long"


def test_change_password_missing_fields(client, user_token):
    response = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "secret123"},
        headers={"Authorization": f"Bearer {user_token}"},
    )
    assert response.status_code == 400
    assert response.json()["success"] is False


def test_change_password_requires_token(client):
    response = client.post(
        "/api/auth/change-password",
        json={"currentPassword": "secret123", "newPassword": "newsecret456"},
    )
    assert response.status_code == 401
