"""
Commit helpers shared by the record services.
"""
import logging
from typing import Optional, Type

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..exceptions import AppException, InternalServerException

logger = logging.getLogger(__name__)


def save_record(
    db: Session,
    record,
    label: str,
    duplicate_exception: Optional[Type[AppException]] = None,
):
    """
    Commit pending changes and refresh the record.

    A unique constraint violation is raised as duplicate_exception when given,
    so concurrent writers that slipped past the pre-check get the same answer.

    Args:
        db: Database session
        record: Model instance added to or modified in the session
        label: Record type used in log and error messages
        duplicate_exception: Exception raised on IntegrityError

    Raises:
        InternalServerException: If the commit fails for any other reason
    """
    try:
        db.commit()
        db.refresh(record)
        return record
    except IntegrityError as e:
        db.rollback()
        if duplicate_exception is not None:
            logger.warning(f"Unique constraint rejected {label}: {str(e.orig)}")
            raise duplicate_exception()
        logger.error(f"Integrity error saving {label}: {str(e)}")
        raise InternalServerException(f"An error occurred while saving the {label}")
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error saving {label}: {str(e)}")
        raise InternalServerException(f"An error occurred while saving the {label}")


def delete_record(db: Session, record, label: str) -> None:
    try:
        db.delete(record)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error deleting {label}: {str(e)}")
        raise InternalServerException(f"An error occurred while deleting the {label}")
