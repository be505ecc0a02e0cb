"""
User Model - Credential store for everyone who can sign in to the API.
"""
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Enum
from sqlalchemy.sql import func
import enum
from ..database import Base


class UserRole(str, enum.Enum):
    """
    Enumeration for user roles in the hospital system.

    Roles:
    - ADMIN: System administrators with full access
    - DOCTOR: Medical practitioners
    - PATIENT: Default role for self-registered users
    - RECEPTIONIST: Front desk staff managing records
    """
    ADMIN = "admin"
    DOCTOR = "doctor"
    PATIENT = "patient"
    RECEPTIONIST = "receptionist"


class User(Base):
    """
    User Model - Stores credentials and profile of a user

    Fields:
    - id: Primary key for user identification
    - email: Unique, lowercased email address used as login key
    - password_hash: bcrypt hash, never the plain password
    - first_name / last_name: User's names
    - role: admin, doctor, patient or receptionist
    - is_active: Inactive users cannot log in
    - created_at: Timestamp when user was created
    - updated_at: Timestamp when the profile or password last changed
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    role = Column(
        Enum(UserRole, values_callable=lambda roles: [r.value for r in roles]),
        default=UserRole.PATIENT,
        nullable=False,
    )
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}', role='{self.role}')>"
