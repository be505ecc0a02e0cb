"""
Doctor Schemas - Pydantic models for doctor data validation and serialization.
"""
from typing import Optional
from datetime import datetime

from ..core.schemas import CamelModel


class DoctorPayload(CamelModel):
    """
    Doctor fields accepted from clients

    Fields are optional here; the doctor service enforces which ones are
    required on create and that none is cleared on update.
    """
    name: Optional[str] = None
    last_name: Optional[str] = None
    specialty: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    license_number: Optional[str] = None


class DoctorCreate(DoctorPayload):
    """Doctor Creation Schema - every field is required"""


class DoctorUpdate(DoctorPayload):
    """Doctor Update Schema - only supplied fields are changed"""


class DoctorResponse(CamelModel):
    """
    Doctor Response Schema - Used when returning doctor data
    """
    id: int
    name: str
    last_name: str
    specialty: str
    phone: str
    email: str
    license_number: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
