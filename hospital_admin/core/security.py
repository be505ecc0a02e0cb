"""
Core security utilities for authentication and password handling.
"""
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import jwt, JWTError
from jose.exceptions import ExpiredSignatureError
from passlib.context import CryptContext
import logging

from ..config import settings
from ..auth.exceptions import InvalidTokenException, TokenExpiredException

# Set up logging
logger = logging.getLogger(__name__)

# Password hashing context, bcrypt cost 10
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=10)


@dataclass(frozen=True)
class TokenIdentity:
    """Identity carried by a verified bearer token."""
    user_id: int
    email: str


def hash_password(password: str) -> str:
    """
    Hash a password using bcrypt.

    Args:
        password: Plain text password

    Returns:
        str: Hashed password (salt embedded)
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a hash.

    Args:
        plain_password: Plain text password
        hashed_password: Hashed password to compare against

    Returns:
        bool: True if password matches hash, False on mismatch

    Raises:
        ValueError: If hashed_password is not a recognizable hash
    """
    return pwd_context.verify(plain_password, hashed_password)


def set_password(user, plain_password: str) -> bool:
    """
    Store a new password hash on a user, hashing only when the password changes.

    A password that already verifies against the stored hash is left alone,
    so an unchanged value is never hashed twice.

    Args:
        user: User model instance
        plain_password: Plain text password to store

    Returns:
        bool: True if a new hash was written
    """
    if user.password_hash and verify_password(plain_password, user.password_hash):
        return False
    user.password_hash = hash_password(plain_password)
    return True


def create_access_token(
    user_id: int,
    email: str,
    expires_delta: Optional[timedelta] = None,
    secret_key: Optional[str] = None,
) -> str:
    """
    Create a JWT access token.

    Args:
        user_id: ID of the authenticated user
        email: Email of the authenticated user
        expires_delta: Token lifetime (default: access_token_expire_minutes)
        secret_key: Signing secret (default: configured secret)

    Returns:
        str: Encoded JWT token
    """
    issued_at = datetime.now(timezone.utc)
    expire = issued_at + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))

    to_encode = {
        "userId": user_id,
        "email": email,
        "iat": issued_at,
        "exp": expire,
    }

    return jwt.encode(
        to_encode, secret_key or settings.jwt_secret, algorithm=settings.algorithm
    )


def decode_access_token(token: str, secret_key: Optional[str] = None) -> TokenIdentity:
    """
    Verify and decode a JWT access token.

    Args:
        token: JWT token string
        secret_key: Verification secret (default: configured secret)

    Returns:
        TokenIdentity: User id and email carried by the token

    Raises:
        TokenExpiredException: If the token is past its expiry
        InvalidTokenException: If the signature or format is invalid
    """
    try:
        payload = jwt.decode(
            token, secret_key or settings.jwt_secret, algorithms=[settings.algorithm]
        )
    except ExpiredSignatureError:
        raise TokenExpiredException()
    except JWTError as e:
        logger.info(f"Rejected bearer token: {str(e)}")
        raise InvalidTokenException()

    user_id = payload.get("userId")
    email = payload.get("email")
    if user_id is None or not email:
        raise InvalidTokenException("Invalid token payload")

    return TokenIdentity(user_id=user_id, email=email)
