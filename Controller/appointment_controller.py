import logging
import re

from fastapi import HTTPException
from sqlalchemy.orm import Session

from core.policies import ensure_participant
from model.appointment_model import APPOINTMENT_STATUSES, Appointment
from model.appointment_schema import (
    AppointmentOut,
    AppointmentRequest,
    NotesUpdateRequest,
    RescheduleRequest,
    StatusUpdateRequest,
)
from model.hospital_model import Hospital
from model.user_model import Users

logger = logging.getLogger(__name__)

# ASCII digits only, and no trailing newline
DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


def validate_date(date_str: str):
    if not DATE_PATTERN.fullmatch(date_str or ""):
        raise HTTPException(status_code=400, detail="Date must be in yyyy-mm-dd format")


def get_appointment_or_404(db: Session, appointment_id: int) -> Appointment:
    appointment = db.get(Appointment, appointment_id)
    if not appointment:
        raise HTTPException(status_code=404, detail="Appointment not found")
    return appointment


def _saved(db: Session, appointment: Appointment, message: str):
    db.commit()
    db.refresh(appointment)
    return {"success": True, "message": message, "appointment": AppointmentOut.serialize(appointment)}


# ------------------------
# book a new appointment (patients)
# ------------------------
def book_appointment(db: Session, user: Users, request: AppointmentRequest):
    if not request.time.strip():
        raise HTTPException(status_code=400, detail="Doctor ID, date, time, and hospital ID are required")
    validate_date(request.date)

    doctor = db.get(Users, request.doctor_id)
    if not doctor or doctor.role != "doctor":
        raise HTTPException(status_code=400, detail="Invalid doctor ID")

    if not db.get(Hospital, request.hospital_id):
        raise HTTPException(status_code=400, detail="Invalid hospital ID")

    new_app = Appointment(
        doctor_id=doctor.id,
        doctor_name=doctor.name,
        patient_id=user.id,
        speciality=doctor.speciality,
        hospital_id=request.hospital_id,
        date=request.date,
        time=request.time.strip(),
        status="pending",
        notes=request.notes.strip() if request.notes else None,
    )
    db.add(new_app)
    logger.info("Patient %s booked doctor %s on %s %s", user.id, doctor.id, request.date, request.time)
    return _saved(db, new_app, "Appointment created successfully")


# ------------------------
# list appointments visible to the caller
# ------------------------
def list_appointments(db: Session, user: Users):
    query = db.query(Appointment)
    if user.role == "doctor":
        query = query.filter(Appointment.doctor_id == user.id)
    elif user.role == "patient":
        query = query.filter(Appointment.patient_id == user.id)
    appointments = query.order_by(Appointment.date, Appointment.time).all()
    return {"success": True, "appointments": [AppointmentOut.serialize(a) for a in appointments]}


def get_appointment(db: Session, user: Users, appointment_id: int):
    appointment = get_appointment_or_404(db, appointment_id)
    ensure_participant(user, appointment, "access")
    return {"success": True, "appointment": AppointmentOut.serialize(appointment)}


# ------------------------
# status update (doctors and admins); any status may follow any other
# ------------------------
def update_status(db: Session, user: Users, appointment_id: int, request: StatusUpdateRequest):
    if request.status not in APPOINTMENT_STATUSES:
        raise HTTPException(status_code=400, detail="Invalid status value")

    appointment = get_appointment_or_404(db, appointment_id)
    ensure_participant(user, appointment, "update")

    logger.info("Appointment %s: %s -> %s by user %s", appointment.id, appointment.status, request.status, user.id)
    appointment.status = request.status
    if request.notes:
        appointment.notes = request.notes
    return _saved(db, appointment, "Appointment status updated successfully")


# ------------------------
# reschedule (owning patient only)
# ------------------------
def reschedule_appointment(db: Session, user: Users, appointment_id: int, request: RescheduleRequest):
    if not request.date or not request.time.strip():
        raise HTTPException(status_code=400, detail="Date and time are required")
    validate_date(request.date)

    appointment = get_appointment_or_404(db, appointment_id)
    ensure_participant(user, appointment, "reschedule")

    appointment.date = request.date
    appointment.time = request.time.strip()
    appointment.status = "rescheduled"
    if request.notes:
        appointment.notes = request.notes
    logger.info("Appointment %s rescheduled to %s %s", appointment.id, appointment.date, appointment.time)
    return _saved(db, appointment, "Appointment rescheduled successfully")


def update_notes(db: Session, user: Users, appointment_id: int, request: NotesUpdateRequest):
    appointment = get_appointment_or_404(db, appointment_id)
    ensure_participant(user, appointment, "update")
    appointment.notes = request.notes
    return _saved(db, appointment, "Appointment updated successfully")


def delete_appointment(db: Session, user: Users, appointment_id: int):
    appointment = get_appointment_or_404(db, appointment_id)
    ensure_participant(user, appointment, "delete")

    db.delete(appointment)
    db.commit()
    logger.info("Appointment %s deleted by user %s", appointment_id, user.id)
    return {"success": True, "message": "Appointment deleted successfully"}
