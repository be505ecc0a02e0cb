"""
Specialty Schemas - Pydantic models for specialty data.
"""
from typing import Optional
from datetime import datetime

from ..core.schemas import CamelModel


class SpecialtyPayload(CamelModel):
    name: Optional[str] = None


class SpecialtyResponse(CamelModel):
    id: int
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
