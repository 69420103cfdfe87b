from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import relationship

from database import Base


class Prescription(Base):
    __tablename__ = "prescriptions"
    __table_args__ = (Index("ix_prescription_patient_doctor", "patient_id", "doctor_id"),)

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    doctor_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    medicines = Column(JSON, nullable=False, default=list)  # [{name, quantity, intakeTime, duration, instructions}]
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    patient = relationship("Users", foreign_keys=[patient_id])
    doctor = relationship("Users", foreign_keys=[doctor_id])
