from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from Controller import consultation_controller
from core.auth_utils import get_current_user, is_admin_or_doctor, is_doctor
from database import get_db
from model.consultation_schema import AddByRfidRequest, ConsultationStatusRequest
from model.user_model import Users

router = APIRouter(prefix="/api/consultations", tags=["Consultations"])


@router.post("/add-by-rfid", status_code=status.HTTP_201_CREATED)
def add_by_rfid(
    request: AddByRfidRequest,
    response: Response,
    db: Session = Depends(get_db),
    doctor: Users = Depends(is_doctor),
):
    created, body = consultation_controller.add_by_rfid(db, doctor, request)
    if not created:
        response.status_code = status.HTTP_200_OK
    return body


@router.get("/patient/{patient_id}")
def patient_consultations(patient_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return consultation_controller.get_patient_consultations(db, user, patient_id)


@router.get("/doctor")
def doctor_consultations(db: Session = Depends(get_db), doctor: Users = Depends(is_doctor)):
    return consultation_controller.get_doctor_consultations(db, doctor)


@router.put("/{consultation_id}/status")
def update_status(
    consultation_id: int,
    request: ConsultationStatusRequest,
    db: Session = Depends(get_db),
    user: Users = Depends(is_admin_or_doctor),
):
    return consultation_controller.update_consultation_status(db, user, consultation_id, request)


@router.delete("/{consultation_id}")
def delete_consultation(
    consultation_id: int,
    db: Session = Depends(get_db),
    user: Users = Depends(is_admin_or_doctor),
):
    return consultation_controller.delete_consultation(db, user, consultation_id)
