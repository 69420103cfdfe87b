from datetime import datetime
from typing import Optional

from model.base_schema import CamelModel
from model.user_schema import HospitalSummary, UserSummary


class AppointmentOut(CamelModel):
    id: int
    doctor_id: Optional[int] = None
    doctor_name: str
    patient_id: Optional[int] = None
    speciality: Optional[str] = None
    hospital_id: Optional[int] = None
    date: str
    time: str
    status: str
    notes: Optional[str] = None
    patient: Optional[UserSummary] = None
    hospital: Optional[HospitalSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AppointmentRequest(CamelModel):
    doctor_id: int
    date: str
    time: str
    hospital_id: int
    notes: Optional[str] = None


class StatusUpdateRequest(CamelModel):
    status: str
    notes: Optional[str] = None


class RescheduleRequest(CamelModel):
    date: str
    time: str
    notes: Optional[str] = None


class NotesUpdateRequest(CamelModel):
    notes: Optional[str] = None
