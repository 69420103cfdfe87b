from datetime import datetime
from typing import Optional

from model.base_schema import CamelModel
from model.user_schema import UserSummary


class RFIDOut(CamelModel):
    id: int
    rfid_number: str
    user_id: Optional[int] = None
    is_active: bool
    assigned_by: Optional[int] = None
    user: Optional[UserSummary] = None
    assigner: Optional[UserSummary] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AssignRFIDRequest(CamelModel):
    rfid_number: Optional[str] = None
    user_id: Optional[int] = None


class UpdateRFIDRequest(CamelModel):
    rfid_number: Optional[str] = None
    user_id: Optional[int] = None
    is_active: Optional[bool] = None
