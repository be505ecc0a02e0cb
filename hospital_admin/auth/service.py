"""
Authentication service layer for business logic.

Registration, login, profile read/update and password change. Every function
takes the request's database session first and raises an AuthException
subclass for each rejected outcome.
"""
import logging
from datetime import datetime, timezone
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..config import settings
from ..core.security import create_access_token, set_password, verify_password
from ..core.validation import is_blank
from ..exceptions import InternalServerException
from .exceptions import (
    AccountDisabledException,
    AuthServiceException,
    EmailAlreadyExistsException,
    InvalidCredentialsException,
    InvalidCurrentPasswordException,
    MissingAuthFieldsException,
    MissingCredentialsException,
    RoleAssignmentDeniedException,
    SelfDeactivationException,
    UserNotFoundException,
    WeakPasswordException,
)
from .models import User, UserRole
from .schemas import PasswordChangeRequest, ProfileUpdate, RegisterRequest

# Set up logging
logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == normalize_email(email)).first()


def _check_password_strength(password: str, detail: Optional[str] = None) -> None:
    min_length = settings.password_min_length
    if len(password) < min_length:
        raise WeakPasswordException(
            detail or f"Password must be at least {min_length} characters long"
        )


def _is_active_admin(user: Optional[User]) -> bool:
    return user is not None and user.is_active and user.role == UserRole.ADMIN


def _check_password(plain_password: str, user: User) -> bool:
    """Verify a password against the stored hash; an unreadable hash is a server error."""
    try:
        return verify_password(plain_password, user.password_hash)
    except ValueError as e:
        logger.error(f"Stored password hash of user {user.id} is unreadable: {str(e)}")
        raise InternalServerException()


def _save_user(db: Session, user: User) -> User:
    """Commit pending changes to a user, mapping the email unique constraint to 409."""
    email = user.email
    try:
        db.commit()
        db.refresh(user)
        return user
    except IntegrityError:
        db.rollback()
        logger.warning(f"Unique constraint rejected email {email}")
        raise EmailAlreadyExistsException()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving user {email}: {str(e)}")
        raise AuthServiceException()


def register(db: Session, data: RegisterRequest, requested_by: Optional[User] = None) -> Tuple[str, User]:
    """
    Register a new user.

    Anyone may register as a patient. Any other role is only granted when the
    request is made by an active admin.

    Args:
        db: Database session
        data: Registration payload
        requested_by: Authenticated user making the request, if any

    Returns:
        Tuple of the issued bearer token and the new user

    Raises:
        MissingAuthFieldsException: If email, password or a name is absent
        WeakPasswordException: If the password is too short
        RoleAssignmentDeniedException: If a staff role is requested without admin rights
        EmailAlreadyExistsException: If the email is already registered
    """
    if any(is_blank(value) for value in (data.email, data.password, data.first_name, data.last_name)):
        raise MissingAuthFieldsException()

    role = data.role or UserRole.PATIENT
    if role != UserRole.PATIENT and not _is_active_admin(requested_by):
        logger.warning(f"Registration with role {role.value} refused: requester is not an admin")
        raise RoleAssignmentDeniedException()

    _check_password_strength(data.password)

    email = normalize_email(str(data.email))
    logger.info(f"Registration attempt for email: {email}")

    # Fast path; the unique index on users.email settles concurrent inserts
    if get_user_by_email(db, email):
        logger.warning(f"Registration failed: Email {email} already registered")
        raise EmailAlreadyExistsException()

    user = User(
        email=email,
        first_name=data.first_name.strip(),
        last_name=data.last_name.strip(),
        role=role,
        is_active=True,
    )
    set_password(user, data.password)

    db.add(user)
    _save_user(db, user)
    logger.info(f"User account created: {user.id} ({user.role.value})")

    token = create_access_token(user.id, user.email)
    return token, user


def login(db: Session, email: Optional[str], password: Optional[str]) -> Tuple[str, User]:
    """
    Authenticate a user by email and password.

    Unknown email and wrong password raise the same InvalidCredentialsException.

    Raises:
        MissingCredentialsException: If email or password is absent
        InvalidCredentialsException: If the credentials do not match
        AccountDisabledException: If the account has been deactivated
    """
    if is_blank(email) or is_blank(password):
        raise MissingCredentialsException()

    user = get_user_by_email(db, str(email))
    if not user or not _check_password(password, user):
        logger.warning(f"Failed login attempt for email: {normalize_email(str(email))}")
        raise InvalidCredentialsException()

    if not user.is_active:
        logger.warning(f"Login blocked for disabled user {user.id}")
        raise AccountDisabledException()

    logger.info(f"User {user.id} logged in")
    return create_access_token(user.id, user.email), user


def get_profile(db: Session, user_id: int) -> User:
    """
    Get a user by ID.

    Raises:
        UserNotFoundException: If the user does not exist
    """
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise UserNotFoundException()
    return user


def update_profile(db: Session, user_id: int, data: ProfileUpdate) -> User:
    """
    Update the names of a user. Absent or blank names are left unchanged.

    Raises:
        UserNotFoundException: If the user does not exist
    """
    user = get_profile(db, user_id)

    if not is_blank(data.first_name):
        user.first_name = data.first_name.strip()
    if not is_blank(data.last_name):
        user.last_name = data.last_name.strip()
    user.updated_at = datetime.now(timezone.utc)

    _save_user(db, user)
    logger.info(f"Profile updated for user {user_id}")
    return user


def change_password(db: Session, user_id: int, data: PasswordChangeRequest) -> None:
    """
    Change a user's password after checking the current one.

    Tokens issued before the change stay valid until they expire.

    Raises:
        MissingAuthFieldsException: If either password is absent
        WeakPasswordException: If the new password is too short
        UserNotFoundException: If the user does not exist
        InvalidCurrentPasswordException: If the current password is wrong
    """
    if is_blank(data.current_password) or is_blank(data.new_password):
        raise MissingAuthFieldsException("Please provide the current and the new password")

    _check_password_strength(
        data.new_password,
        f"New password must be at least {settings.password_min_length} characters long",
    )

    user = get_profile(db, user_id)

    if not _check_password(data.current_password, user):
        logger.warning(f"Password change rejected for user {user_id}: wrong current password")
        raise InvalidCurrentPasswordException()

    if set_password(user, data.new_password):
        user.updated_at = datetime.now(timezone.utc)
        _save_user(db, user)
    logger.info(f"Password changed for user {user_id}")


def set_user_active(db: Session, user_id: int, is_active: bool, acting_user: User) -> User:
    """
    Enable or disable a user account. Disabled users cannot log in.

    An admin cannot disable their own account.

    Raises:
        UserNotFoundException: If the user does not exist
        SelfDeactivationException: If acting_user disables itself
    """
    user = get_profile(db, user_id)
    if not is_active and user.id == acting_user.id:
        logger.warning(f"Admin {acting_user.id} tried to disable their own account")
        raise SelfDeactivationException()
    user.is_active = is_active
    user.updated_at = datetime.now(timezone.utc)

    _save_user(db, user)
    logger.info(f"User {user_id} {'enabled' if is_active else 'disabled'}")
    return user
