from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from Controller import prescription_controller
from core.auth_utils import get_current_user, is_doctor
from database import get_db
from model.prescription_schema import PrescriptionRequest
from model.user_model import Users

router = APIRouter(prefix="/api/prescriptions", tags=["Prescriptions"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_prescription(
    request: PrescriptionRequest,
    db: Session = Depends(get_db),
    doctor: Users = Depends(is_doctor),
):
    return prescription_controller.create_prescription(db, doctor, request)


@router.get("/patient/{patient_id}")
def patient_prescriptions(patient_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return prescription_controller.get_patient_prescriptions(db, user, patient_id)


@router.get("/doctor")
def doctor_prescriptions(db: Session = Depends(get_db), doctor: Users = Depends(is_doctor)):
    return prescription_controller.get_doctor_prescriptions(db, doctor)
