from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from sqlalchemy.orm import Session

from Controller import health_controller
from core.auth_utils import get_current_user, is_admin_or_doctor, is_patient
from database import get_db
from model.health_schema import HealthConditionRequest
from model.user_model import Users

router = APIRouter(prefix="/api/health", tags=["Health"])


# ---------------- condition flags ----------------
@router.post("", status_code=status.HTTP_201_CREATED)
def save_conditions(
    request: HealthConditionRequest,
    response: Response,
    db: Session = Depends(get_db),
    user: Users = Depends(is_patient),
):
    created, body = health_controller.upsert_conditions(db, user, request)
    if not created:
        response.status_code = status.HTTP_200_OK
    return body


@router.get("")
def my_conditions(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return health_controller.get_own_conditions(db, user)


@router.get("/patient/{patient_id}")
def patient_conditions(patient_id: int, db: Session = Depends(get_db), user: Users = Depends(is_admin_or_doctor)):
    return health_controller.get_patient_conditions(db, patient_id)


# ---------------- PDF documents ----------------
@router.post("/documents")
async def upload_document(
    document: UploadFile = File(...),
    description: Optional[str] = Form(None),
    db: Session = Depends(get_db),
    user: Users = Depends(is_patient),
):
    """Stores a PDF for the current patient and records it on their health file."""
    return await health_controller.upload_document(db, user, document, description)


@router.get("/documents")
def my_documents(db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return health_controller.list_documents(db, user)


@router.delete("/documents/{document_id}")
def delete_document(document_id: int, db: Session = Depends(get_db), user: Users = Depends(get_current_user)):
    return health_controller.delete_document(db, user, document_id)
