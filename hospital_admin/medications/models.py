"""
Medication Model - Pharmacy inventory of the hospital.
"""
from sqlalchemy import Column, Integer, String, Float, DateTime, func
from ..database import Base


class Medication(Base):
    """
    Medication Model

    Fields:
    - id: Primary key
    - name / description: What the medication is
    - price: Unit price
    - quantity: Units in stock
    - category: Therapeutic category
    - laboratory: Manufacturer
    - created_at / updated_at: Timestamps
    """
    __tablename__ = "medications"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    category = Column(String, nullable=False)
    laboratory = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Medication(id={self.id}, name='{self.name}')>"
