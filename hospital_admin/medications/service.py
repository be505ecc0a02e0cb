"""
Medication Service - Business logic for the medication inventory.
"""
from typing import List
from datetime import datetime, timezone
from sqlalchemy.orm import Session
import logging

from ..core.persistence import delete_record, save_record
from ..core.validation import reject_cleared_fields, require_fields, strip_strings
from ..exceptions import RecordNotFoundException
from .models import Medication
from .schemas import MedicationPayload, MedicationResponse

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "description", "price", "quantity", "category", "laboratory")
MISSING_FIELDS_MESSAGE = "Name, Description, Price, Quantity, Category and Laboratory are required"


def list_medications(db: Session) -> List[Medication]:
    return db.query(Medication).order_by(Medication.id).all()


def get_medication(db: Session, medication_id: int) -> Medication:
    """
    Get a medication by ID.

    Raises:
        RecordNotFoundException: If medication not found
    """
    medication = db.query(Medication).filter(Medication.id == medication_id).first()
    if not medication:
        raise RecordNotFoundException("Medicamento not found")
    return medication


def create_medication(db: Session, data: MedicationPayload) -> Medication:
    """
    Create a medication.

    Raises:
        MissingFieldsException: If any medication field is absent
    """
    payload = strip_strings(data.model_dump())
    require_fields(payload, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)

    medication = Medication(**payload)
    db.add(medication)
    save_record(db, medication, "medication")
    logger.info(f"Medication {medication.id} created")
    return medication


def update_medication(db: Session, medication_id: int, data: MedicationPayload) -> Medication:
    """
    Update the supplied fields of a medication.

    Raises:
        RecordNotFoundException: If medication not found
        MissingFieldsException: If a supplied field is null or blank
    """
    medication = get_medication(db, medication_id)

    changes = strip_strings(data.model_dump(exclude_unset=True))
    reject_cleared_fields(changes, REQUIRED_FIELDS, MISSING_FIELDS_MESSAGE)

    for field, value in changes.items():
        setattr(medication, field, value)
    medication.updated_at = datetime.now(timezone.utc)

    save_record(db, medication, "medication")
    logger.info(f"Medication {medication_id} updated")
    return medication


def delete_medication(db: Session, medication_id: int) -> MedicationResponse:
    """
    Delete a medication and return the removed record.

    Raises:
        RecordNotFoundException: If medication not found
    """
    medication = get_medication(db, medication_id)
    deleted = MedicationResponse.model_validate(medication)
    delete_record(db, medication, "medication")
    logger.info(f"Medication {medication_id} deleted")
    return deleted
