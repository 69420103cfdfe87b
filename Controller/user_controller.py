import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from core.auth_utils import hash_password
from core.policies import ensure_self_or_admin
from model.hospital_model import Hospital
from model.user_model import Users
from model.user_schema import CreateUserRequest, UpdateUserRequest, UserOut

logger = logging.getLogger(__name__)


# ------------------------
# helpers shared with auth / doctors / hospitals
# ------------------------
def get_user_or_404(db: Session, user_id: int) -> Users:
    user = db.get(Users, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


def validate_doctor_fields(db: Session, speciality, hospital_id):
    if not speciality:
        raise HTTPException(status_code=400, detail="Speciality is required for doctors")
    if not hospital_id:
        raise HTTPException(status_code=400, detail="Hospital ID is required for doctors")
    if not db.get(Hospital, hospital_id):
        raise HTTPException(status_code=400, detail="Invalid hospital ID")


def ensure_email_free(db: Session, email: str, exclude_id: int = None):
    query = db.query(Users).filter(Users.email == email)
    if exclude_id is not None:
        query = query.filter(Users.id != exclude_id)
    if query.first():
        raise HTTPException(status_code=400, detail="Email already exists")


def create_user(db: Session, request: CreateUserRequest) -> Users:
    email = request.email.lower()
    ensure_email_free(db, email)

    speciality, hospital_id = None, None
    if request.role == "doctor":
        validate_doctor_fields(db, request.speciality, request.hospital_id)
        speciality, hospital_id = request.speciality.strip(), request.hospital_id

    user = Users(
        name=request.name.strip(),
        email=email,
        hashed_password=hash_password(request.password),
        role=request.role,
        phone=request.phone,
        address=request.address,
        speciality=speciality,
        hospital_id=hospital_id,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created %s account %s (id=%s)", user.role, user.email, user.id)
    return user


# ------------------------
# routes
# ------------------------
def list_users(db: Session):
    users = db.query(Users).order_by(Users.id).all()
    return {"success": True, "users": [UserOut.serialize(u) for u in users]}


def admin_create_user(db: Session, request: CreateUserRequest):
    user = create_user(db, request)
    return {"success": True, "message": "User created successfully", "user": UserOut.serialize(user)}


def get_profile(current_user: Users):
    return {"success": True, "user": UserOut.serialize(current_user)}


def get_user(db: Session, current_user: Users, user_id: int):
    ensure_self_or_admin(current_user, user_id, "access", "user data")
    return {"success": True, "user": UserOut.serialize(get_user_or_404(db, user_id))}


def update_user(db: Session, current_user: Users, user_id: int, update_data: UpdateUserRequest):
    ensure_self_or_admin(current_user, user_id, "update", "user")
    user = get_user_or_404(db, user_id)

    if update_data.name: user.name = update_data.name.strip()
    if update_data.phone is not None: user.phone = update_data.phone
    if update_data.address is not None: user.address = update_data.address
    if update_data.email:
        email = update_data.email.lower()
        ensure_email_free(db, email, exclude_id=user.id)
        user.email = email

    # role is never changed here; doctor-only fields only move for doctors
    if user.role == "doctor":
        speciality = update_data.speciality or user.speciality
        hospital_id = update_data.hospital_id or user.hospital_id
        validate_doctor_fields(db, speciality, hospital_id)
        user.speciality, user.hospital_id = speciality, hospital_id

    db.commit()
    db.refresh(user)
    return {"success": True, "message": "User updated successfully", "user": UserOut.serialize(user)}


def delete_user(db: Session, current_user: Users, user_id: int):
    ensure_self_or_admin(current_user, user_id, "delete", "user")
    user = get_user_or_404(db, user_id)
    db.delete(user)
    db.commit()
    logger.info("Deleted user %s by %s", user_id, current_user.id)
    return {"success": True, "message": "User deleted successfully"}
