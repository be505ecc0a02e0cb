"""
Specialty Service - Business logic for the specialty catalogue.

Names are unique regardless of case.
"""
from typing import List, Optional
from datetime import datetime, timezone
from sqlalchemy.orm import Session
import logging

from ..core.persistence import delete_record, save_record
from ..core.validation import is_blank
from ..exceptions import DuplicateSpecialtyException, MissingFieldsException, RecordNotFoundException
from .models import Specialty
from .schemas import SpecialtyPayload, SpecialtyResponse

logger = logging.getLogger(__name__)

MISSING_NAME_MESSAGE = "Specialty name is required"


def normalize_name(name: str) -> str:
    return name.strip().lower()


def list_specialties(db: Session) -> List[Specialty]:
    return db.query(Specialty).order_by(Specialty.id).all()


def get_specialty(db: Session, specialty_id: int) -> Specialty:
    """
    Get a specialty by ID.

    Raises:
        RecordNotFoundException: If specialty not found
    """
    specialty = db.query(Specialty).filter(Specialty.id == specialty_id).first()
    if not specialty:
        raise RecordNotFoundException("Specialty not found")
    return specialty


def _clean_name(name: Optional[str]) -> str:
    if is_blank(name):
        raise MissingFieldsException(MISSING_NAME_MESSAGE)
    return name.strip()


def ensure_unique_name(db: Session, name: str, exclude_id: Optional[int] = None) -> None:
    """
    Reject a name matching an existing specialty, ignoring case.

    Raises:
        DuplicateSpecialtyException: If another specialty has the name
    """
    query = db.query(Specialty).filter(Specialty.normalized_name == normalize_name(name))
    if exclude_id is not None:
        query = query.filter(Specialty.id != exclude_id)
    if query.first():
        logger.warning(f"Specialty '{name}' already exists")
        raise DuplicateSpecialtyException()


def create_specialty(db: Session, data: SpecialtyPayload) -> Specialty:
    """
    Create a specialty.

    Raises:
        MissingFieldsException: If the name is absent or blank
        DuplicateSpecialtyException: If the name exists in any case
    """
    name = _clean_name(data.name)
    ensure_unique_name(db, name)

    specialty = Specialty(name=name, normalized_name=normalize_name(name))
    db.add(specialty)
    save_record(db, specialty, "specialty", DuplicateSpecialtyException)
    logger.info(f"Specialty {specialty.id} created: {name}")
    return specialty


def update_specialty(db: Session, specialty_id: int, data: SpecialtyPayload) -> Specialty:
    """
    Rename a specialty. A payload without a name leaves it unchanged.

    Raises:
        RecordNotFoundException: If specialty not found
        MissingFieldsException: If the supplied name is blank
        DuplicateSpecialtyException: If another specialty has the name
    """
    specialty = get_specialty(db, specialty_id)

    if "name" in data.model_fields_set:
        name = _clean_name(data.name)
        ensure_unique_name(db, name, exclude_id=specialty.id)
        specialty.name = name
        specialty.normalized_name = normalize_name(name)
        specialty.updated_at = datetime.now(timezone.utc)
        save_record(db, specialty, "specialty", DuplicateSpecialtyException)
        logger.info(f"Specialty {specialty_id} renamed to {name}")

    return specialty


def delete_specialty(db: Session, specialty_id: int) -> SpecialtyResponse:
    """
    Delete a specialty and return the removed record.

    Raises:
        RecordNotFoundException: If specialty not found
    """
    specialty = get_specialty(db, specialty_id)
    deleted = SpecialtyResponse.model_validate(specialty)
    delete_record(db, specialty, "specialty")
    logger.info(f"Specialty {specialty_id} deleted")
    return deleted
