"""
Specialty Router - API endpoints for the specialty catalogue.
"""
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from ..auth.dependencies import record_access_policy
from ..database import get_db
from . import service
from .schemas import SpecialtyPayload, SpecialtyResponse

router = APIRouter(dependencies=[Depends(record_access_policy)])


@router.get("", response_model=List[SpecialtyResponse])
def list_specialties(db: Session = Depends(get_db)):
    return service.list_specialties(db)


@router.get("/{specialty_id}", response_model=SpecialtyResponse)
def get_specialty(specialty_id: int, db: Session = Depends(get_db)):
    return service.get_specialty(db, specialty_id)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SpecialtyResponse)
def create_specialty(data: SpecialtyPayload, db: Session = Depends(get_db)):
    """Create a specialty; names are unique ignoring case."""
    return service.create_specialty(db, data)


@router.put("/{specialty_id}", response_model=SpecialtyResponse)
def update_specialty(specialty_id: int, data: SpecialtyPayload, db: Session = Depends(get_db)):
    return service.update_specialty(db, specialty_id, data)


@router.delete("/{specialty_id}", response_model=SpecialtyResponse)
def delete_specialty(specialty_id: int, db: Session = Depends(get_db)):
    return service.delete_specialty(db, specialty_id)
