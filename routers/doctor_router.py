from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from Controller import doctor_controller
from core.auth_utils import get_current_user
from database import get_db
from model.user_model import Users

router = APIRouter(prefix="/api/doctors", tags=["Doctors"])


@router.get("")
def get_doctors(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return doctor_controller.get_all_doctors(db)


@router.get("/speciality/{speciality}")
def get_by_speciality(speciality: str, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return doctor_controller.get_doctors_by_speciality(db, speciality)


@router.get("/specialities/all")
def get_specialities(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return doctor_controller.get_specialities(db)


@router.get("/{doctor_id}")
def get_doctor(doctor_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return doctor_controller.get_doctor(db, doctor_id)


@router.get("/{doctor_id}/appointments")
def get_doctor_appointments(doctor_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return doctor_controller.get_doctor_appointments(db, user, doctor_id)
