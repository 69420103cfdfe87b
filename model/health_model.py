from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from database import Base

CONDITION_FLAGS = (
    "diabetes",
    "hypertension",
    "asthma",
    "heart_disease",
    "arthritis",
    "chronic_kidney_disease",
    "thyroid_disorders",
)


class HealthCondition(Base):
    __tablename__ = "health_conditions"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="SET NULL"), unique=True, nullable=True)
    diabetes = Column(Boolean, default=False, nullable=False)
    hypertension = Column(Boolean, default=False, nullable=False)
    asthma = Column(Boolean, default=False, nullable=False)
    heart_disease = Column(Boolean, default=False, nullable=False)
    arthritis = Column(Boolean, default=False, nullable=False)
    chronic_kidney_disease = Column(Boolean, default=False, nullable=False)
    thyroid_disorders = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    documents = relationship(
        "HealthDocument",
        order_by="HealthDocument.upload_date",
        cascade="all, delete-orphan",
        back_populates="health_condition",
    )


class HealthDocument(Base):
    __tablename__ = "health_documents"

    id = Column(Integer, primary_key=True, index=True)
    health_condition_id = Column(
        Integer, ForeignKey("health_conditions.id", ondelete="CASCADE"), nullable=False
    )
    filename = Column(String(255), nullable=False)
    path = Column(String(500), nullable=False)
    upload_date = Column(DateTime, default=datetime.utcnow)
    description = Column(String(500), default="")

    health_condition = relationship("HealthCondition", back_populates="documents")
