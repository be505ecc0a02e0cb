"""
Authentication routes: registration, login, profile and password change.

Routes are plain functions so FastAPI runs them on its threadpool and bcrypt
work never blocks the event loop.
"""
from typing import Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..core.security import TokenIdentity
from ..database import get_db
from . import service
from .dependencies import get_current_identity, get_optional_user, require_roles
from .models import User, UserRole
from .schemas import (
    AuthResponse,
    LoginRequest,
    MessageResponse,
    PasswordChangeRequest,
    ProfileResponse,
    ProfileUpdate,
    RegisterRequest,
    UserResponse,
    UserStatusUpdate,
)

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse)
def register(
    data: RegisterRequest,
    requester: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
):
    """
    Register a new user and return a bearer token.

    The role defaults to patient. Other roles require an admin bearer token.
    """
    token, user = service.register(db, data, requested_by=requester)
    return AuthResponse(
        message="User registered successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    """Authenticate with email and password."""
    token, user = service.login(db, data.email, data.password)
    return AuthResponse(
        message="Logged in successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Get the authenticated user's profile."""
    user = service.get_profile(db, identity.user_id)
    return ProfileResponse(user=UserResponse.model_validate(user))


@router.put("/profile", response_model=ProfileResponse)
def update_profile(
    data: ProfileUpdate,
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Update the authenticated user's first and/or last name."""
    user = service.update_profile(db, identity.user_id, data)
    return ProfileResponse(
        message="Profile updated successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/change-password", response_model=MessageResponse)
def change_password(
    data: PasswordChangeRequest,
    identity: TokenIdentity = Depends(get_current_identity),
    db: Session = Depends(get_db),
):
    """Change the authenticated user's password."""
    service.change_password(db, identity.user_id, data)
    return MessageResponse(message="Password updated successfully")


@router.patch("/users/{user_id}/status", response_model=ProfileResponse)
def update_user_status(
    user_id: int,
    data: UserStatusUpdate,
    current_admin: User = Depends(require_roles(UserRole.ADMIN)),
    db: Session = Depends(get_db),
):
    """Enable or disable a user account (admin only)."""
    user = service.set_user_active(db, user_id, data.is_active, current_admin)
    return ProfileResponse(
        message="User status updated successfully",
        user=UserResponse.model_validate(user),
    )
