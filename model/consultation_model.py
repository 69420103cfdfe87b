from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from database import Base

CONSULTATION_STATUSES = ("active", "inactive")


class Consultation(Base):
    __tablename__ = "consultations"
    __table_args__ = (
        UniqueConstraint("patient_id", "doctor_id", name="uq_consultation_patient_doctor"),
        Index("ix_consultation_patient_status", "patient_id", "status"),
        Index("ix_consultation_doctor_status", "doctor_id", "status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    patient_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    doctor_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    status = Column(String(20), default="active", nullable=False)
    last_consultation_date = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    patient = relationship("Users", foreign_keys=[patient_id])
    doctor = relationship("Users", foreign_keys=[doctor_id])
    consultation_history = relationship(
        "ConsultationEntry",
        order_by="ConsultationEntry.date",
        cascade="all, delete-orphan",
        back_populates="consultation",
    )


class ConsultationEntry(Base):
    __tablename__ = "consultation_history"

    id = Column(Integer, primary_key=True, index=True)
    consultation_id = Column(Integer, ForeignKey("consultations.id", ondelete="CASCADE"), nullable=False)
    date = Column(DateTime, default=datetime.utcnow, nullable=False)
    notes = Column(Text)

    consultation = relationship("Consultation", back_populates="consultation_history")
