"""
Specialty Model - Catalogue of medical specialties.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from ..database import Base


class Specialty(Base):
    """
    Specialty Model

    Fields:
    - id: Primary key
    - name: Display name, trimmed
    - normalized_name: Lowercased name; its unique constraint makes
      "Cardiology" and "cardiology" collide
    - created_at / updated_at: Timestamps
    """
    __tablename__ = "specialties"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    normalized_name = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Specialty(id={self.id}, name='{self.name}')>"
