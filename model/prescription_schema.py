from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from model.base_schema import CamelModel
from model.consultation_schema import PatientSummary
from model.user_schema import DoctorSummary

IntakeTime = Literal["morning", "afternoon", "evening", "night", "before_meal", "after_meal"]


class Medicine(CamelModel):
    name: str = Field(min_length=1)
    quantity: str = Field(min_length=1)
    intake_time: List[IntakeTime] = Field(min_length=1)
    duration: str = Field(min_length=1)
    instructions: Optional[str] = None


class PrescriptionOut(CamelModel):
    id: int
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    medicines: List[Medicine]
    notes: Optional[str] = None
    doctor: Optional[DoctorSummary] = None
    patient: Optional[PatientSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PrescriptionRequest(CamelModel):
    patient_id: int
    medicines: List[Medicine] = Field(min_length=1)
    notes: Optional[str] = None
