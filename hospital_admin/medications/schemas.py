"""
Medication Schemas - Pydantic models for medication data.
"""
from typing import Optional
from pydantic import Field
from datetime import datetime

from ..core.schemas import CamelModel


class MedicationPayload(CamelModel):
    """
    Medication fields accepted from clients

    Presence is checked by the medication service; numbers must not be negative.
    """
    name: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0, description="Unit price")
    quantity: Optional[int] = Field(None, ge=0, description="Units in stock")
    category: Optional[str] = None
    laboratory: Optional[str] = None


class MedicationResponse(CamelModel):
    id: int
    name: str
    description: str
    price: float
    quantity: int
    category: str
    laboratory: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
