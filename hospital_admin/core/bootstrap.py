"""
Bootstrap utilities for first admin creation.
Creates the first admin user from environment variables when none exists.
"""
import logging
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..auth.models import User, UserRole
from ..config import settings
from .security import hash_password

logger = logging.getLogger(__name__)


def admin_exists(db: Session) -> bool:
    """
    Check if any admin user exists in the database.

    Args:
        db: Database session

    Returns:
        bool: True if at least one admin exists, False otherwise
    """
    return db.query(User).filter(User.role == UserRole.ADMIN).count() > 0


def create_bootstrap_admin(db: Session) -> bool:
    """
    Create the first admin user from BOOTSTRAP_ADMIN_EMAIL / BOOTSTRAP_ADMIN_PASSWORD.

    Args:
        db: Database session

    Returns:
        bool: True if admin was created successfully, False otherwise
    """
    if not settings.bootstrap_admin_email or not settings.bootstrap_admin_password:
        logger.info("Bootstrap admin credentials not provided in environment variables")
        return False

    email = settings.bootstrap_admin_email.strip().lower()
    if db.query(User).filter(User.email == email).first():
        logger.warning(f"Bootstrap skipped: Email {email} already exists")
        return False

    admin = User(
        email=email,
        first_name="System",
        last_name="Administrator",
        password_hash=hash_password(settings.bootstrap_admin_password),
        role=UserRole.ADMIN,
        is_active=True,
    )
    try:
        db.add(admin)
        db.commit()
        db.refresh(admin)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"❌ Failed to create bootstrap admin: {str(e)}")
        return False

    logger.info(f"✅ Bootstrap admin created: {admin.email} (ID: {admin.id})")
    return True


def bootstrap_admin_if_needed(db: Session) -> None:
    """
    Check if admin exists and create bootstrap admin if needed.
    Called once during application startup.

    Args:
        db: Database session
    """
    if admin_exists(db):
        logger.info("✅ Admin users found. Bootstrap not needed.")
        return

    if not create_bootstrap_admin(db):
        logger.info("💡 To create the first admin, set BOOTSTRAP_ADMIN_EMAIL and BOOTSTRAP_ADMIN_PASSWORD in your .env file.")
