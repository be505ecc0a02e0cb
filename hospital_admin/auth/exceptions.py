"""
Authentication-specific exceptions.

Auth routes answer with the {"success": false, "message": ...} envelope.
"""
from typing import Any, Dict, Optional

from fastapi import status

from ..exceptions import AppException


class AuthException(AppException):
    """Base class for authentication exceptions."""
    headers: Optional[Dict[str, str]] = None

    def to_content(self) -> Dict[str, Any]:
        return {"success": False, "message": self.detail}


class UnauthorizedException(AuthException):
    status_code = status.HTTP_401_UNAUTHORIZED
    headers = {"WWW-Authenticate": "Bearer"}


class MissingAuthFieldsException(AuthException):
    """Exception raised when registration or password change fields are absent."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Please provide email, password, first name and last name"


class MissingCredentialsException(AuthException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Please provide email and password"


class WeakPasswordException(AuthException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Password must be at least 6 characters long"


class EmailAlreadyExistsException(AuthException):
    """Exception raised when email already exists."""
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Email already registered"


class InvalidCredentialsException(UnauthorizedException):
    """Exception raised when the email is unknown or the password is wrong."""
    default_detail = "Invalid credentials"


class AccountDisabledException(AuthException):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "User account has been disabled"


class UserNotFoundException(AuthException):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "User not found"


class InvalidCurrentPasswordException(UnauthorizedException):
    default_detail = "Current password is incorrect"


class MissingTokenException(UnauthorizedException):
    default_detail = "Token not provided or invalid format"


class TokenExpiredException(UnauthorizedException):
    """Exception raised when token has expired."""
    default_detail = "Token has expired"


class InvalidTokenException(UnauthorizedException):
    """Exception raised when token is invalid."""
    default_detail = "Invalid token"


class PermissionDeniedException(AuthException):
    """Exception raised when user doesn't have required role."""
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "You do not have permission to access this resource"


class AuthServiceException(AuthException):
    """Unexpected storage failure while handling an auth request."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Error processing authentication request"


class RoleAssignmentDeniedException(PermissionDeniedException):
    """Exception raised when a non-admin registers a user with a staff role."""
    default_detail = "Only an administrator can register users with this role"


class SelfDeactivationException(AuthException):
    """Exception raised when an admin tries to disable their own account."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "You cannot disable your own account"
