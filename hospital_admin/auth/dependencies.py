"""
FastAPI dependencies for authentication and authorization.

get_current_identity is the access guard for bearer tokens, require_roles the
role gate composed after it, and record_access_policy applies both to the
record routers when protect_records is enabled.
"""
import logging
from typing import Iterable, Optional

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from ..config import settings
from ..core.security import TokenIdentity, decode_access_token
from ..database import get_db
from .exceptions import MissingTokenException, PermissionDeniedException
from .models import User, UserRole

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def get_current_identity(
    request: Request,
    authorization: Optional[str] = Header(default=None),
) -> TokenIdentity:
    """
    Verify the bearer token of the request and attach its identity.

    Args:
        request: Incoming request, receives state.identity
        authorization: Authorization header value

    Returns:
        TokenIdentity: User id and email from the token

    Raises:
        MissingTokenException: If the header is absent or not a Bearer token
        TokenExpiredException: If the token has expired
        InvalidTokenException: If the token does not verify
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise MissingTokenException()

    token = authorization[len(BEARER_PREFIX):].strip()
    if not token:
        raise MissingTokenException()

    identity = decode_access_token(token)
    request.state.identity = identity
    return identity


def _authorize_role(
    request: Request,
    db: Session,
    identity: TokenIdentity,
    allowed_roles: Iterable[UserRole],
) -> User:
    user = db.query(User).filter(User.id == identity.user_id).first()
    if not user or user.role not in allowed_roles:
        logger.warning(f"Role gate denied user {identity.user_id} on {request.url.path}")
        raise PermissionDeniedException()
    request.state.role = user.role
    return user


def require_roles(*allowed_roles: UserRole):
    """
    Dependency factory to require specific roles.

    Args:
        allowed_roles: Roles that are allowed access

    Returns:
        Function that resolves the user and checks their role
    """
    allowed = set(allowed_roles)

    def role_checker(
        request: Request,
        identity: TokenIdentity = Depends(get_current_identity),
        db: Session = Depends(get_db),
    ) -> User:
        return _authorize_role(request, db, identity, allowed)

    return role_checker


def get_optional_user(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """
    Resolve the caller when a bearer token is sent, None for anonymous requests.

    A token that is sent but does not verify is still rejected.
    """
    if authorization is None:
        return None
    identity = get_current_identity(request, authorization)
    return db.query(User).filter(User.id == identity.user_id).first()


def record_access_policy(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    db: Session = Depends(get_db),
) -> Optional[User]:
    """
    Router-level guard for the record endpoints.

    Open when settings.protect_records is off; otherwise requires a valid
    token belonging to one of settings.record_roles.
    """
    if not settings.protect_records:
        return None

    identity = get_current_identity(request, authorization)
    allowed = {UserRole(role) for role in settings.record_roles}
    return _authorize_role(request, db, identity, allowed)

