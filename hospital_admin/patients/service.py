"""
Patient Service - Business logic for patient records.
"""
from typing import List
from datetime import datetime, timezone
from sqlalchemy.orm import Session
import logging

from ..core.persistence import delete_record, save_record
from ..core.validation import reject_cleared_fields, require_fields, strip_strings
from ..exceptions import RecordNotFoundException
from .models import Patient
from .schemas import PatientPayload, PatientResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "last_name", "email", "gender", "illness")
MISSING_FIELDS_MESSAGE = "Name, Last Name, Email, Gender and Illness are required"


def list_patients(db: Session) -> List[Patient]:
    return db.query(Patient).order_by(Patient.id).all()


def get_patient(db: Session, patient_id: int) -> Patient:
    """
    Get a patient by ID.

    Raises:
        RecordNotFoundException: If patient not found
    """
    patient = db.query(Patient).filter(Patient.id == patient_id).first()
    if not patient:
        raise RecordNotFoundException("Patient not found")
    return patient


def create_patient(db: Session, data: PatientPayload) -> Patient:
    payload = strip_strings(data.model_dump())
    require_fields(payload, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)

    patient = Patient(**payload)
    db.add(patient)
    save_record(db, patient, "patient")
    logger.info(f"Patient {patient.id} created")
    return patient


def update_patient(db: Session, patient_id: int, data: PatientPayload) -> Patient:
    """
    Update the supplied fields of a patient.

    Raises:
        RecordNotFoundException: If patient not found
        MissingFieldsException: If a supplied field is null or blank
    """
    patient = get_patient(db, patient_id)

    changes = strip_strings(data.model_dump(exclude_unset=True))
    reject_cleared_fields(changes, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)

    for field, value in changes.items():
        setattr(patient, field, value)
    patient.updated_at = datetime.now(timezone.utc)

    save_record(db, patient, "patient")
    logger.info(f"Patient {patient_id} updated")
    return patient


def delete_patient(db: Session, patient_id: int) -> PatientResponse:
    patient = get_patient(db, patient_id)
    deleted = PatientResponse.model_validate(patient)
    delete_record(db, patient, "patient")
    logger.info(f"Patient {patient_id} deleted")
    return deleted
