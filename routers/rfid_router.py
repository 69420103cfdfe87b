from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from Controller import rfid_controller
from core.auth_utils import get_current_user, is_admin, is_admin_or_doctor
from database import get_db
from model.rfid_schema import AssignRFIDRequest, UpdateRFIDRequest
from model.user_model import Users

router = APIRouter(prefix="/api/rfid", tags=["RFID"])


@router.post("/assign", status_code=status.HTTP_201_CREATED)
def assign(request: AssignRFIDRequest, db: Session = Depends(get_db), user: Users = Depends(is_admin_or_doctor)):
    return rfid_controller.assign_rfid(db, user, request)


# full patient record behind a card
@router.get("/user/{rfid_number}")
def patient_by_rfid(rfid_number: str, db: Session = Depends(get_db), user: Users = Depends(is_admin_or_doctor)):
    return rfid_controller.get_patient_record_by_rfid(db, rfid_number)


@router.get("")
def list_rfids(db: Session = Depends(get_db), admin: Users = Depends(is_admin)):
    return rfid_controller.list_rfids(db)


@router.get("/{rfid_id}")
def get_rfid(rfid_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return rfid_controller.get_rfid(db, rfid_id)


@router.put("/{rfid_id}")
def update_rfid(
    rfid_id: int,
    request: UpdateRFIDRequest,
    db: Session = Depends(get_db),
    user: Users = Depends(is_admin_or_doctor),
):
    return rfid_controller.update_rfid(db, user, rfid_id, request)


@router.delete("/{rfid_id}")
def delete_rfid(rfid_id: int, db: Session = Depends(get_db), admin: Users = Depends(is_admin)):
    return rfid_controller.delete_rfid(db, rfid_id)
