"""
Medication Router - API endpoints for the medication inventory.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth.dependencies import record_access_policy
from ..database import get_db
from . import service
from .schemas import MedicationPayload, MedicationResponse

router = APIRouter(dependencies=[Depends(record_access_policy)])


@router.get("", response_model=List[MedicationResponse])
def list_medications(db: Session = Depends(get_db)):
    return service.list_medications(db)


@router.get("/{medication_id}", response_model=MedicationResponse)
def get_medication(medication_id: int, db: Session = Depends(get_db)):
    return service.get_medication(db, medication_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=MedicationResponse)
def create_medication(data: MedicationPayload, db: Session = Depends(get_db)):
    """Create a medication; every field is required."""
    return service.create_medication(db, data)


@router.put("/{medication_id}", response_model=MedicationResponse)
def update_medication(medication_id: int, data: MedicationPayload, db: Session = Depends(get_db)):
    """Update a medication; unspecified fields keep their value."""
    return service.update_medication(db, medication_id, data)


@router.delete("/{medication_id}", response_model=MedicationResponse)
def delete_medication(medication_id: int, db: Session = Depends(get_db)):
    return service.delete_medication(db, medication_id)
