from datetime import datetime
from typing import Optional

from pydantic import EmailStr

from model.base_schema import CamelModel


class HospitalOut(CamelModel):
    id: int
    name: str
    address: str
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateHospitalRequest(CamelModel):
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    website: Optional[str] = None


class UpdateHospitalRequest(CreateHospitalRequest):
    pass


class AddDoctorRequest(CamelModel):
    doctor_id: Optional[int] = None
