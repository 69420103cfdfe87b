from datetime import datetime
from typing import List, Literal, Optional

from model.base_schema import CamelModel
from model.user_schema import DoctorSummary


class PatientSummary(CamelModel):
    id: int
    name: str


class ConsultationEntryOut(CamelModel):
    id: int
    date: datetime
    notes: Optional[str] = None


class ConsultationOut(CamelModel):
    id: int
    patient_id: Optional[int] = None
    doctor_id: Optional[int] = None
    status: str
    last_consultation_date: Optional[datetime] = None
    consultation_history: List[ConsultationEntryOut] = []
    doctor: Optional[DoctorSummary] = None
    patient: Optional[PatientSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AddByRfidRequest(CamelModel):
    rfid_number: str
    notes: Optional[str] = None


class ConsultationStatusRequest(CamelModel):
    status: Literal["active", "inactive"]
