"""
Doctor Router - API endpoints for doctor record management.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth.dependencies import record_access_policy
from ..database import get_db
from . import service
from .schemas import DoctorCreate, DoctorResponse, DoctorUpdate

router = APIRouter(dependencies=[Depends(record_access_policy)])


@router.get("", response_model=List[DoctorResponse])
def list_doctors(db: Session = Depends(get_db)):
    """List all doctors."""
    return service.list_doctors(db)


@router.get("/{doctor_id}", response_model=DoctorResponse)
def get_doctor(doctor_id: int, db: Session = Depends(get_db)):
    return service.get_doctor(db, doctor_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=DoctorResponse)
def create_doctor(data: DoctorCreate, db: Session = Depends(get_db)):
    """
    Create a doctor

    All fields are required and the license number must be unique.
    """
    return service.create_doctor(db, data)


@router.put("/{doctor_id}", response_model=DoctorResponse)
def update_doctor(doctor_id: int, data: DoctorUpdate, db: Session = Depends(get_db)):
    """
    Update a doctor

    Only the supplied fields change. Re-sending the doctor's own license
    number is accepted.
    """
    return service.update_doctor(db, doctor_id, data)


@router.delete("/{doctor_id}", response_model=DoctorResponse)
def delete_doctor(doctor_id: int, db: Session = Depends(get_db)):
    """Delete a doctor and return the deleted record."""
    return service.delete_doctor(db, doctor_id)
