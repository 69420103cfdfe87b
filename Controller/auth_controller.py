import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from Controller.user_controller import create_user
from core.auth_utils import (
    blacklisted_tokens,
    create_access_token,
    hash_password,
    verify_password,
)
from model.user_model import Users
from model.user_schema import ChangePasswordRequest, CreateUserRequest, LoginUserRequest, UserOut

logger = logging.getLogger(__name__)


def register_user(request: CreateUserRequest, db: Session):
    if request.role == "admin":
        raise HTTPException(status_code=403, detail="Admin accounts cannot be self-registered")
    user = create_user(db, request)
    return {"success": True, "message": "User registered successfully", "user": UserOut.serialize(user)}


def login_user(request_data: LoginUserRequest, db: Session):
    user = db.query(Users).filter(Users.email == request_data.email.lower()).first()
    if not user or not verify_password(request_data.password, user.hashed_password):
        logger.info("Failed login for %s", request_data.email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    token = create_access_token(user)
    return {
        "success": True,
        "message": f"Welcome back {user.name}!",
        "token": token,
        "user": UserOut.serialize(user),
    }


def logout_user(token: str):
    blacklisted_tokens.add(token)
    return {"success": True, "message": "Logged out successfully"}


def change_password(request_data: ChangePasswordRequest, current_user: Users, db: Session):
    if not verify_password(request_data.old_password, current_user.hashed_password):
        raise HTTPException(status_code=400, detail="Old password is incorrect")
    if verify_password(request_data.new_password, current_user.hashed_password):
        raise HTTPException(status_code=400, detail="New password must be different from old password")

    current_user.hashed_password = hash_password(request_data.new_password)
    db.commit()
    return {"success": True, "message": "Password changed successfully"}
