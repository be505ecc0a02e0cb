"""
Patient Router - API endpoints for patient records.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth.dependencies import record_access_policy
from ..database import get_db
from . import service
from .schemas import PatientPayload, PatientResponse

router = APIRouter(dependencies=[Depends(record_access_policy)])


@router.get("", response_model=List[PatientResponse])
def list_patients(db: Session = Depends(get_db)):
    return service.list_patients(db)


@router.get("/{patient_id}", response_model=PatientResponse)
def get_patient(patient_id: int, db: Session = Depends(get_db)):
    return service.get_patient(db, patient_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=PatientResponse)
def create_patient(data: PatientPayload, db: Session = Depends(get_db)):
    """Register a patient; every field is required."""
    return service.create_patient(db, data)


@router.put("/{patient_id}", response_model=PatientResponse)
def update_patient(patient_id: int, data: PatientPayload, db: Session = Depends(get_db)):
    """Update a patient; unspecified fields keep their value."""
    return service.update_patient(db, patient_id, data)


@router.delete("/{patient_id}", response_model=PatientResponse)
def delete_patient(patient_id: int, db: Session = Depends(get_db)):
    return service.delete_patient(db, patient_id)
