"""
Doctor Service - Business logic for doctor record management.

Presence validation on create, partial updates, and license number
uniqueness (a doctor may keep its own license number on update).
"""
from typing import List, Optional
from datetime import datetime, timezone
from sqlalchemy.orm import Session
import logging

from ..core.persistence import delete_record, save_record
from ..core.validation import reject_cleared_fields, require_fields, strip_strings
from ..exceptions import DuplicateLicenseException, RecordNotFoundException
from .models import Doctor
from .schemas import DoctorCreate, DoctorResponse, DoctorUpdate

# Set up logging
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "last_name", "specialty", "phone", "email", "license_number")
MISSING_FIELDS_MESSAGE = "Name, Last Name, Specialty, Phone, Email and License Number are required"


def list_doctors(db: Session) -> List[Doctor]:
    return db.query(Doctor).order_by(Doctor.id).all()


def get_doctor(db: Session, doctor_id: int) -> Doctor:
    """
    Get a doctor by ID.

    Raises:
        RecordNotFoundException: If doctor not found
    """
    doctor = db.query(Doctor).filter(Doctor.id == doctor_id).first()
    if not doctor:
        raise RecordNotFoundException("Doctor not found")
    return doctor


def ensure_unique_license(db: Session, license_number: str, exclude_id: Optional[int] = None) -> None:
    """
    Reject a license number already held by another doctor.

    Args:
        db: Database session
        license_number: License number to check
        exclude_id: Doctor being updated, allowed to keep its own number

    Raises:
        DuplicateLicenseException: If another doctor has the license number
    """
    query = db.query(Doctor).filter(Doctor.license_number == license_number)
    if exclude_id is not None:
        query = query.filter(Doctor.id != exclude_id)
    if query.first():
        logger.warning(f"License number {license_number} already in use")
        raise DuplicateLicenseException()


def create_doctor(db: Session, data: DoctorCreate) -> Doctor:
    """
    Create a doctor.

    Raises:
        MissingFieldsException: If any doctor field is absent
        DuplicateLicenseException: If the license number is taken
    """
    payload = strip_strings(data.model_dump())
    require_fields(payload, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)
    ensure_unique_license(db, payload["license_number"])

    doctor = Doctor(**payload)
    db.add(doctor)
    save_record(db, doctor, "doctor", DuplicateLicenseException)
    logger.info(f"Doctor {doctor.id} created")
    return doctor


def update_doctor(db: Session, doctor_id: int, data: DoctorUpdate) -> Doctor:
    """
    Update the supplied fields of a doctor.

    Raises:
        RecordNotFoundException: If doctor not found
        MissingFieldsException: If a supplied field is blank
        DuplicateLicenseException: If the license number belongs to another doctor
    """
    doctor = get_doctor(db, doctor_id)

    changes = strip_strings(data.model_dump(exclude_unset=True))
    reject_cleared_fields(changes, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)
    if "license_number" in changes:
        ensure_unique_license(db, changes["license_number"], exclude_id=doctor.id)

    for field, value in changes.items():
        setattr(doctor, field, value)
    doctor.updated_at = datetime.now(timezone.utc)

    save_record(db, doctor, "doctor", DuplicateLicenseException)
    logger.info(f"Doctor {doctor_id} updated")
    return doctor


def delete_doctor(db: Session, doctor_id: int) -> DoctorResponse:
    """
    Delete a doctor and return the removed record.

    Raises:
        RecordNotFoundException: If doctor not found
    """
    doctor = get_doctor(db, doctor_id)
    deleted = DoctorResponse.model_validate(doctor)
    delete_record(db, doctor, "doctor")
    logger.info(f"Doctor {doctor_id} deleted")
    return deleted
