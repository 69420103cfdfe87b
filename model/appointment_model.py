from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from database import Base

APPOINTMENT_STATUSES = ("pending", "approved", "rejected", "completed", "rescheduled")


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, index=True)
    doctor_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    doctor_name = Column(String(100), nullable=False)
    patient_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True)
    speciality = Column(String(100))
    hospital_id = Column(Integer, ForeignKey("hospitals.id", ondelete="SET NULL"), nullable=True)
    date = Column(String(10), nullable=False)  # yyyy-mm-dd
    time = Column(String(20), nullable=False)
    status = Column(String(20), default="pending", nullable=False)
    notes = Column(Text)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    doctor = relationship("Users", foreign_keys=[doctor_id])
    patient = relationship("Users", foreign_keys=[patient_id])
    hospital = relationship("Hospital")
