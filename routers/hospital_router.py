from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from Controller import hospital_controller
from core.auth_utils import get_current_user, is_admin
from database import get_db
from model.hospital_schema import AddDoctorRequest, CreateHospitalRequest, UpdateHospitalRequest
from model.user_model import Users

router = APIRouter(prefix="/api/hospitals", tags=["Hospitals"])


@router.post("", status_code=status.HTTP_201_CREATED)
def create_hospital(request: CreateHospitalRequest, db: Session = Depends(get_db), admin: Users = Depends(is_admin)):
    return hospital_controller.create_hospital(db, request)


@router.get("")
def list_hospitals(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return hospital_controller.list_hospitals(db)


@router.get("/{hospital_id}")
def get_hospital(hospital_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return hospital_controller.get_hospital(db, hospital_id)


@router.put("/{hospital_id}")
def update_hospital(
    hospital_id: int,
    request: UpdateHospitalRequest,
    db: Session = Depends(get_db),
    admin: Users = Depends(is_admin),
):
    return hospital_controller.update_hospital(db, hospital_id, request)


@router.delete("/{hospital_id}")
def delete_hospital(hospital_id: int, db: Session = Depends(get_db), admin: Users = Depends(is_admin)):
    return hospital_controller.delete_hospital(db, hospital_id)


@router.get("/{hospital_id}/doctors")
def hospital_doctors(hospital_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return hospital_controller.list_hospital_doctors(db, hospital_id)


@router.post("/{hospital_id}/doctors")
def add_doctor(
    hospital_id: int,
    request: AddDoctorRequest,
    db: Session = Depends(get_db),
    admin: Users = Depends(is_admin),
):
    return hospital_controller.add_doctor_to_hospital(db, hospital_id, request.doctor_id)
