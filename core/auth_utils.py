# auth_utils.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from core.config import ACCESS_TOKEN_EXPIRE_HOURS, ALGORITHM, SECRET_KEY
from database import get_db
from model.user_model import Users

# ---------------- Passwords ----------------
bcrypt_context = CryptContext(schemes=["bcrypt"], deprecated="auto")
MAX_BCRYPT_BYTES = 72


def hash_password(password: str) -> str:
    return bcrypt_context.hash(password.encode("utf-8")[:MAX_BCRYPT_BYTES])


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt_context.verify(password.encode("utf-8")[:MAX_BCRYPT_BYTES], hashed_password)


# ---------------- JWT ----------------
# auto_error is off so a missing header gets the envelope message below
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)
blacklisted_tokens = set()


def create_access_token(user: Users, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(hours=ACCESS_TOKEN_EXPIRE_HOURS))
    payload = {"sub": user.email, "id": user.id, "role": user.role, "exp": expire}
    return jwt.encode(payload, SECRET_KEY, algorithm=ALGORITHM)


def get_user_id_from_token(token: str) -> int:
    if token in blacklisted_tokens:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
    except ExpiredSignatureError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    except JWTError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user_id = payload.get("id")
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")
    return user_id


def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db)) -> Users:
    """Resolve the bearer token to a user row (the `authenticate` gate)."""
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided, authorization denied",
        )
    user = db.get(Users, get_user_id_from_token(token))
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found")
    return user


# ---------------- Role gates ----------------
def require_role(*roles: str):
    label = " or ".join(role.capitalize() for role in roles)

    def _inner(user: Users = Depends(get_current_user)) -> Users:
        if user.role not in roles:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. {label} role required",
            )
        return user

    return _inner


is_admin = require_role("admin")
is_doctor = require_role("doctor")
is_patient = require_role("patient")
is_admin_or_doctor = require_role("admin", "doctor")
