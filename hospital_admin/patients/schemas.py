"""
Patient Schemas - Pydantic models for patient data.
"""
from typing import Optional
from datetime import datetime

from ..core.schemas import CamelModel


class PatientPayload(CamelModel):
    """Patient fields accepted from clients, required-ness enforced by the service"""
    name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    gender: Optional[str] = None
    illness: Optional[str] = None


class PatientResponse(CamelModel):
    id: int
    name: str
    last_name: str
    email: str
    gender: str
    illness: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
