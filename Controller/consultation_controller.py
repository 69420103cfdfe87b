import logging
from datetime import datetime

from fastapi import HTTPException
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from core.policies import ensure_participant, ensure_patient_scope
from model.consultation_model import Consultation, ConsultationEntry
from model.consultation_schema import AddByRfidRequest, ConsultationOut, ConsultationStatusRequest
from model.rfid_model import RFID
from model.user_model import Users

logger = logging.getLogger(__name__)


def resolve_patient_by_rfid(db: Session, rfid_number: str):
    """Active card -> patient row. Raises 404 on either miss."""
    card = db.query(RFID).filter(RFID.rfid_number == rfid_number, RFID.is_active.is_(True)).first()
    if not card:
        raise HTTPException(status_code=404, detail="Invalid or inactive RFID card")

    patient = db.get(Users, card.user_id) if card.user_id else None
    if not patient or patient.role != "patient":
        raise HTTPException(status_code=404, detail="Patient not found")
    return card, patient


def _insert_for(db: Session):
    # both dialects expose INSERT ... ON CONFLICT
    if db.get_bind().dialect.name == "postgresql":
        return postgresql.insert
    return sqlite.insert


def upsert_consultation(db: Session, patient_id: int, doctor_id: int, notes):
    """Insert or reactivate the (patient, doctor) row in one statement, then log the visit.

    Returns ``(consultation, created)``.
    """
    now = datetime.utcnow()
    insert = _insert_for(db)
    stmt = (
        insert(Consultation)
        .values(
            patient_id=patient_id,
            doctor_id=doctor_id,
            status="active",
            last_consultation_date=now,
            created_at=now,
            updated_at=now,
        )
        .on_conflict_do_update(
            index_elements=["patient_id", "doctor_id"],
            set_={"status": "active", "last_consultation_date": now, "updated_at": now},
        )
        .returning(Consultation.id, Consultation.created_at)
    )
    consultation_id, created_at = db.execute(stmt).one()

    db.add(ConsultationEntry(consultation_id=consultation_id, date=now, notes=notes))
    db.commit()

    consultation = db.get(Consultation, consultation_id)
    db.refresh(consultation)
    return consultation, created_at == now


# ------------------------
# doctor scans a patient's card and records a visit
# ------------------------
def add_by_rfid(db: Session, doctor: Users, request: AddByRfidRequest):
    _, patient = resolve_patient_by_rfid(db, request.rfid_number)
    consultation, created = upsert_consultation(
        db, patient.id, doctor.id, request.notes.strip() if request.notes else None
    )
    logger.info(
        "Doctor %s %s consultation %s with patient %s",
        doctor.id, "opened" if created else "updated", consultation.id, patient.id,
    )
    return created, {
        "success": True,
        "message": "Consultation created successfully" if created else "Consultation updated successfully",
        "consultation": ConsultationOut.serialize(consultation),
    }


def get_patient_consultations(db: Session, user: Users, patient_id: int):
    ensure_patient_scope(user, patient_id)
    consultations = (
        db.query(Consultation)
        .filter(Consultation.patient_id == patient_id, Consultation.status == "active")
        .order_by(Consultation.last_consultation_date.desc())
        .all()
    )
    return {"success": True, "consultations": [ConsultationOut.serialize(c) for c in consultations]}


def get_doctor_consultations(db: Session, doctor: Users):
    consultations = (
        db.query(Consultation)
        .filter(Consultation.doctor_id == doctor.id, Consultation.status == "active")
        .order_by(Consultation.last_consultation_date.desc())
        .all()
    )
    return {"success": True, "consultations": [ConsultationOut.serialize(c) for c in consultations]}


def get_consultation_or_404(db: Session, consultation_id: int) -> Consultation:
    consultation = db.get(Consultation, consultation_id)
    if not consultation:
        raise HTTPException(status_code=404, detail="Consultation not found")
    return consultation


def update_consultation_status(db: Session, user: Users, consultation_id: int, request: ConsultationStatusRequest):
    consultation = get_consultation_or_404(db, consultation_id)
    ensure_participant(user, consultation, "update", "consultation")

    consultation.status = request.status
    db.commit()
    db.refresh(consultation)
    return {
        "success": True,
        "message": "Consultation status updated successfully",
        "consultation": ConsultationOut.serialize(consultation),
    }


def delete_consultation(db: Session, user: Users, consultation_id: int):
    consultation = get_consultation_or_404(db, consultation_id)
    ensure_participant(user, consultation, "delete", "consultation")

    db.delete(consultation)
    db.commit()
    logger.info("Consultation %s deleted by user %s", consultation_id, user.id)
    return {"success": True, "message": "Consultation deleted successfully"}
