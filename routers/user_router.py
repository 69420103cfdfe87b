from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from Controller import doctor_controller, user_controller
from core.auth_utils import get_current_user, is_admin
from database import get_db
from model.user_model import Users
from model.user_schema import CreateUserRequest, UpdateUserRequest

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("")
def list_users(db: Session = Depends(get_db), admin: Users = Depends(is_admin)):
    return user_controller.list_users(db)


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(request: CreateUserRequest, db: Session = Depends(get_db), admin: Users = Depends(is_admin)):
    return user_controller.admin_create_user(db, request)


# fixed paths come before /{user_id}
@router.get("/profile")
def get_profile(user: Users = Depends(get_current_user)):
    return user_controller.get_profile(user)


@router.get("/doctors/all")
def all_doctors(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return doctor_controller.get_all_doctors(db)


@router.get("/doctors/hospital/{hospital_id}")
def doctors_by_hospital(hospital_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return doctor_controller.get_doctors_by_hospital(db, hospital_id)


@router.get("/{user_id}")
def get_user(user_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return user_controller.get_user(db, user, user_id)


@router.put("/{user_id}")
def update_user(
    user_id: int,
    request: UpdateUserRequest,
    db: Session = Depends(get_db),
    user: Users = Depends(get_current_user),
):
    return user_controller.update_user(db, user, user_id, request)


@router.delete("/{user_id}")
def delete_user(user_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return user_controller.delete_user(db, user, user_id)
