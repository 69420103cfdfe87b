from datetime import datetime
from typing import Literal, Optional

from pydantic import EmailStr, Field

from model.base_schema import CamelModel


class HospitalSummary(CamelModel):
    id: int
    name: str
    address: str


class UserSummary(CamelModel):
    id: int
    name: str
    email: str


class DoctorSummary(CamelModel):
    id: int
    name: str
    speciality: Optional[str] = None
    hospital_id: Optional[int] = None


class UserOut(CamelModel):
    id: int
    name: str
    email: str
    role: str
    phone: Optional[str] = None
    address: Optional[str] = None
    speciality: Optional[str] = None
    hospital_id: Optional[int] = None
    hospital: Optional[HospitalSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateUserRequest(CamelModel):
    name: str = Field(min_length=1)
    email: EmailStr
    password: str = Field(min_length=6)
    role: Literal["patient", "doctor", "admin"] = "patient"
    phone: Optional[str] = None
    address: Optional[str] = None
    speciality: Optional[str] = None
    hospital_id: Optional[int] = None


class LoginUserRequest(CamelModel):
    email: EmailStr
    password: str


class ChangePasswordRequest(CamelModel):
    old_password: str
    new_password: str = Field(min_length=6)


class UpdateUserRequest(CamelModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    speciality: Optional[str] = None
    hospital_id: Optional[int] = None
