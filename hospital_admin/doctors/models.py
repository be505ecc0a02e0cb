"""
Doctor Model - Stores the doctors on the hospital roster.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from ..database import Base


class Doctor(Base):
    """
    Doctor Model - Stores doctor contact and licensing information

    Fields:
    - id: Primary key for the doctor record
    - name / last_name: Doctor's names
    - specialty: Medical specialty, free text
    - phone / email: Contact information
    - license_number: Medical license, unique across doctors
    - created_at: When the doctor record was created
    - updated_at: When the doctor record was last updated
    """
    __tablename__ = "doctors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    specialty = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=False)
    license_number = Column(String, unique=True, index=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        """String representation of the Doctor model"""
        return f"<Doctor(id={self.id}, license_number='{self.license_number}')>"
