from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from Controller import auth_controller
from core.auth_utils import get_current_user, oauth2_scheme
from database import get_db
from model.user_model import Users
from model.user_schema import ChangePasswordRequest, CreateUserRequest, LoginUserRequest, UserOut

router = APIRouter(prefix="/api/auth", tags=["Auth"])


# register a patient or doctor
@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(request: CreateUserRequest, db: Session = Depends(get_db)):
    return auth_controller.register_user(request, db)


@router.post("/login")
def login(request: LoginUserRequest, db: Session = Depends(get_db)):
    return auth_controller.login_user(request, db)


@router.post("/logout")
def logout(token: str = Depends(oauth2_scheme), user: Users = Depends(get_current_user)):
    return auth_controller.logout_user(token)


@router.get("/me")
def get_me(user: Users = Depends(get_current_user)):
    return {"success": True, "user": UserOut.serialize(user)}


@router.put("/change-password")
def change_password(
    request: ChangePasswordRequest,
    user: Users = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return auth_controller.change_password(request, user, db)
