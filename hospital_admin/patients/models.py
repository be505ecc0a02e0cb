"""
Patient Model - Stores patients treated at the hospital.
"""
from sqlalchemy import Column, Integer, String, DateTime, func
from ..database import Base


class Patient(Base):
    """
    Patient Model - Stores patient-specific information

    Fields:
    - id: Primary key for the patient record
    - name / last_name: Patient's names
    - email: Contact email (not unique)
    - gender: Patient's gender
    - illness: Condition the patient is treated for
    - created_at: When the patient record was created
    - updated_at: When the patient record was last updated
    """
    __tablename__ = "patients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    gender = Column(String, nullable=False)
    illness = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        """String representation of the Patient model"""
        return f"<Patient(id={self.id}, name='{self.name} {self.last_name}')>"
