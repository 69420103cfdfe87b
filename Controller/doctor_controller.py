from fastapi import HTTPException
from sqlalchemy.orm import Session

from model.appointment_model import Appointment
from model.appointment_schema import AppointmentOut
from model.user_model import Users
from model.user_schema import UserOut


def _doctors(db: Session):
    return db.query(Users).filter(Users.role == "doctor")


def get_all_doctors(db: Session):
    doctors = _doctors(db).order_by(Users.id).all()
    return {"success": True, "doctors": [UserOut.serialize(d) for d in doctors]}


def get_doctors_by_speciality(db: Session, speciality: str):
    doctors = _doctors(db).filter(Users.speciality == speciality).order_by(Users.id).all()
    return {"success": True, "doctors": [UserOut.serialize(d) for d in doctors]}


def get_doctors_by_hospital(db: Session, hospital_id: int):
    doctors = _doctors(db).filter(Users.hospital_id == hospital_id).order_by(Users.id).all()
    return {"success": True, "doctors": [UserOut.serialize(d) for d in doctors]}


def get_specialities(db: Session):
    rows = (
        db.query(Users.speciality)
        .filter(Users.role == "doctor", Users.speciality.isnot(None))
        .distinct()
        .order_by(Users.speciality)
        .all()
    )
    return {"success": True, "specialities": [row[0] for row in rows]}


def get_doctor_or_404(db: Session, doctor_id: int) -> Users:
    doctor = _doctors(db).filter(Users.id == doctor_id).first()
    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor not found")
    return doctor


def get_doctor(db: Session, doctor_id: int):
    return {"success": True, "doctor": UserOut.serialize(get_doctor_or_404(db, doctor_id))}


def get_doctor_appointments(db: Session, current_user: Users, doctor_id: int):
    get_doctor_or_404(db, doctor_id)
    if current_user.role != "admin" and current_user.id != doctor_id:
        raise HTTPException(status_code=403, detail="Not authorized to access these appointments")

    appointments = db.query(Appointment).filter(Appointment.doctor_id == doctor_id).order_by(Appointment.id).all()
    return {"success": True, "appointments": [AppointmentOut.serialize(a) for a in appointments]}
