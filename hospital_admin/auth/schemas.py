"""
Auth Schemas - Pydantic models for authentication requests and responses.

Request fields are optional at the schema level: the auth service owns the
"missing field" rules so that an absent field is answered with 400 and the
auth error envelope rather than a generic 422.
"""
from typing import Optional
from pydantic import EmailStr, field_validator
from datetime import datetime

from ..core.schemas import CamelModel
from .models import UserRole


def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value


class RegisterRequest(CamelModel):
    """
    Registration Schema - Used when a new user signs up

    Fields:
    - email: Login email (stored lowercased)
    - password: Plain text password (hashed before storage)
    - first_name / last_name: User's names
    - role: Optional role, defaults to patient
    """
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: Optional[UserRole] = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_to_none(cls, value):
        return _blank_to_none(value)


class LoginRequest(CamelModel):
    """
    Login Schema - Used for authentication

    Fields:
    - email: User's email address
    - password: User's plain text password
    """
    email: Optional[str] = None
    password: Optional[str] = None


class ProfileUpdate(CamelModel):
    """Profile Update Schema - only the supplied names are changed."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class PasswordChangeRequest(CamelModel):
    """Password Change Schema - requires the current password."""
    current_password: Optional[str] = None
    new_password: Optional[str] = None


class UserResponse(CamelModel):
    """
    User Response Schema - public view of a user, never includes the password hash
    """
    id: int
    email: str
    first_name: str
    last_name: str
    role: UserRole
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthResponse(CamelModel):
    """Returned by register and login."""
    success: bool = True
    message: str
    token: str
    user: UserResponse


class ProfileResponse(CamelModel):
    success: bool = True
    message: Optional[str] = None
    user: UserResponse


class MessageResponse(CamelModel):
    success: bool = True
    message: str


class UserStatusUpdate(CamelModel):
    """Account Status Update Schema - used by admins to enable or disable a user"""
    is_active: bool
