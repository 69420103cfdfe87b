from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from Controller import appointment_controller
from core.auth_utils import get_current_user, is_admin_or_doctor, is_patient
from database import get_db
from model.appointment_schema import (
    AppointmentRequest,
    NotesUpdateRequest,
    RescheduleRequest,
    StatusUpdateRequest,
)
from model.user_model import Users

router = APIRouter(prefix="/api/appointments", tags=["Appointments"])


# -------------------------------
# book (patients only)
# -------------------------------
@router.post("", status_code=status.HTTP_201_CREATED)
def create_appointment(
    request: AppointmentRequest,
    db: Session = Depends(get_db),
    user: Users = Depends(is_patient),
):
    return appointment_controller.book_appointment(db, user, request)


# -------------------------------
# list / read, filtered by role
# -------------------------------
@router.get("")
def list_appointments(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return appointment_controller.list_appointments(db, user)


@router.get("/{appointment_id}")
def get_appointment(appointment_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return appointment_controller.get_appointment(db, user, appointment_id)


# -------------------------------
# status (doctors and admins)
# -------------------------------
@router.put("/{appointment_id}/status")
def update_status(
    appointment_id: int,
    request: StatusUpdateRequest,
    db: Session = Depends(get_db),
    user: Users = Depends(is_admin_or_doctor),
):
    return appointment_controller.update_status(db, user, appointment_id, request)


# -------------------------------
# reschedule (owning patient)
# -------------------------------
@router.put("/{appointment_id}/reschedule")
def reschedule(
    appointment_id: int,
    request: RescheduleRequest,
    db: Session = Depends(get_db),
    user: Users = Depends(is_patient),
):
    return appointment_controller.reschedule_appointment(db, user, appointment_id, request)


@router.put("/{appointment_id}")
def update_notes(
    appointment_id: int,
    request: NotesUpdateRequest,
    db: Session = Depends(get_db),
    user: Users = Depends(get_current_user),
):
    return appointment_controller.update_notes(db, user, appointment_id, request)


@router.delete("/{appointment_id}")
def delete_appointment(appointment_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return appointment_controller.delete_appointment(db, user, appointment_id)
