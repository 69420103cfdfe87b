import logging
from datetime import datetime

from fastapi import HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.orm import Session

from Controller.documents_controller import read_pdf, remove_document, save_document
from model.health_model import HealthCondition, HealthDocument
from model.health_schema import HealthConditionOut, HealthConditionRequest, HealthDocumentOut
from model.user_model import Users

logger = logging.getLogger(__name__)


def _record_for(db: Session, user_id: int):
    return db.query(HealthCondition).filter(HealthCondition.user_id == user_id).first()


def upsert_conditions(db: Session, user: Users, request: HealthConditionRequest):
    """Returns ``(created, body)``; only the flags present in the request change."""
    changes = {k: v for k, v in request.model_dump(exclude_unset=True).items() if v is not None}
    record = _record_for(db, user.id)
    created = record is None
    if created:
        record = HealthCondition(user_id=user.id)
        db.add(record)
    for flag, value in changes.items():
        setattr(record, flag, value)

    db.commit()
    db.refresh(record)
    message = "Health conditions created successfully" if created else "Health conditions updated successfully"
    return created, {"success": True, "message": message, "healthCondition": HealthConditionOut.serialize(record)}


def get_own_conditions(db: Session, user: Users):
    record = _record_for(db, user.id)
    if not record:
        raise HTTPException(status_code=404, detail="Health conditions not found for this user")
    return {"success": True, "healthCondition": HealthConditionOut.serialize(record)}


def get_patient_conditions(db: Session, patient_id: int):
    record = _record_for(db, patient_id)
    if not record:
        raise HTTPException(status_code=404, detail="Health conditions not found for this patient")
    return {"success": True, "healthCondition": HealthConditionOut.serialize(record)}


# ---------------- documents ----------------
def _record_document(db: Session, user: Users, file_path, description):
    try:
        record = _record_for(db, user.id)
        if record is None:
            record = HealthCondition(user_id=user.id)
            db.add(record)
        document = HealthDocument(
            filename=file_path.name,
            path=str(file_path),
            upload_date=datetime.utcnow(),
            description=(description or "").strip(),
        )
        record.documents.append(document)
        db.commit()
    except Exception:
        db.rollback()
        remove_document(str(file_path))
        raise

    db.refresh(document)
    return HealthDocumentOut.serialize(document)


async def upload_document(db: Session, user: Users, file: UploadFile, description: str = None):
    content = await read_pdf(file)
    file_path = await save_document(file, content)
    document = await run_in_threadpool(_record_document, db, user, file_path, description)
    return {"success": True, "message": "Document uploaded successfully", "document": document}


def list_documents(db: Session, user: Users):
    record = _record_for(db, user.id)
    if not record or not record.documents:
        raise HTTPException(status_code=404, detail="No documents found for this user")
    return {"success": True, "documents": [HealthDocumentOut.serialize(d) for d in record.documents]}


def delete_document(db: Session, user: Users, document_id: int):
    document = (
        db.query(HealthDocument)
        .join(HealthCondition)
        .filter(HealthDocument.id == document_id, HealthCondition.user_id == user.id)
        .first()
    )
    if not document:
        raise HTTPException(status_code=404, detail="Document not found")

    path = document.path
    db.delete(document)
    db.commit()
    remove_document(path)
    return {"success": True, "message": "Document deleted successfully"}
