import logging

from fastapi import HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from Controller.prescription_controller import prescriptions_for_patient
from model.appointment_model import Appointment
from model.appointment_schema import AppointmentOut
from model.consultation_model import Consultation
from model.consultation_schema import ConsultationOut
from model.health_model import HealthCondition
from model.health_schema import HealthConditionOut
from model.prescription_schema import PrescriptionOut
from model.rfid_model import RFID
from model.rfid_schema import AssignRFIDRequest, RFIDOut, UpdateRFIDRequest
from model.user_model import Users
from model.user_schema import UserOut

logger = logging.getLogger(__name__)

ALREADY_ASSIGNED = "RFID card is already assigned"


def _patient_or_error(db: Session, user_id: int) -> Users:
    user = db.get(Users, user_id)
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    if user.role != "patient":
        raise HTTPException(status_code=400, detail="RFID cards can only be assigned to patients")
    return user


def _ensure_no_active_card(db: Session, user_id: int, exclude_id: int = None):
    query = db.query(RFID).filter(RFID.user_id == user_id, RFID.is_active.is_(True))
    if exclude_id is not None:
        query = query.filter(RFID.id != exclude_id)
    if query.first():
        raise HTTPException(status_code=400, detail="User already has an RFID card assigned")


def _commit_card(db: Session, card: RFID, duplicate_message: str):
    # the unique index on rfid_number backs up the lookup done before
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=400, detail=duplicate_message)
    db.refresh(card)


def assign_rfid(db: Session, current_user: Users, request: AssignRFIDRequest):
    rfid_number = (request.rfid_number or "").strip()
    if not rfid_number or not request.user_id:
        raise HTTPException(status_code=400, detail="RFID number and User ID are required")

    if db.query(RFID).filter(RFID.rfid_number == rfid_number).first():
        raise HTTPException(status_code=400, detail=ALREADY_ASSIGNED)

    _patient_or_error(db, request.user_id)
    _ensure_no_active_card(db, request.user_id)

    card = RFID(rfid_number=rfid_number, user_id=request.user_id, assigned_by=current_user.id)
    db.add(card)
    _commit_card(db, card, ALREADY_ASSIGNED)
    logger.info("RFID %s assigned to patient %s by %s", rfid_number, request.user_id, current_user.id)
    return {"success": True, "message": "RFID card assigned successfully", "rfid": RFIDOut.serialize(card)}


# ------------------------
# card -> patient -> everything a doctor needs at the desk
# ------------------------
def get_patient_record_by_rfid(db: Session, rfid_number: str):
    card = db.query(RFID).filter(RFID.rfid_number == rfid_number, RFID.is_active.is_(True)).first()
    if not card:
        raise HTTPException(status_code=404, detail="RFID card not found")

    user = db.get(Users, card.user_id) if card.user_id else None
    if not user:
        raise HTTPException(status_code=404, detail="User not found")

    prescriptions = prescriptions_for_patient(db, user.id)
    consultations = (
        db.query(Consultation)
        .filter(Consultation.patient_id == user.id, Consultation.status == "active")
        .order_by(Consultation.last_consultation_date.desc())
        .all()
    )
    appointments = (
        db.query(Appointment)
        .filter(Appointment.patient_id == user.id)
        .order_by(Appointment.date.desc(), Appointment.time.desc())
        .all()
    )
    health = db.query(HealthCondition).filter(HealthCondition.user_id == user.id).first()

    return {
        "success": True,
        "user": UserOut.serialize(user),
        "rfid": RFIDOut.serialize(card),
        "prescriptions": [PrescriptionOut.serialize(p) for p in prescriptions],
        "consultations": [ConsultationOut.serialize(c) for c in consultations],
        "appointments": [AppointmentOut.serialize(a) for a in appointments],
        "healthCondition": HealthConditionOut.serialize(health) if health else None,
    }


def list_rfids(db: Session):
    cards = db.query(RFID).order_by(RFID.id).all()
    return {"success": True, "rfids": [RFIDOut.serialize(c) for c in cards]}


def get_rfid_or_404(db: Session, rfid_id: int) -> RFID:
    card = db.get(RFID, rfid_id)
    if not card:
        raise HTTPException(status_code=404, detail="RFID assignment not found")
    return card


def get_rfid(db: Session, rfid_id: int):
    return {"success": True, "rfid": RFIDOut.serialize(get_rfid_or_404(db, rfid_id))}


def update_rfid(db: Session, current_user: Users, rfid_id: int, request: UpdateRFIDRequest):
    card = get_rfid_or_404(db, rfid_id)

    rfid_number = request.rfid_number.strip() if request.rfid_number is not None else None
    if rfid_number == "":
        raise HTTPException(status_code=400, detail="RFID number cannot be empty")
    if rfid_number and rfid_number != card.rfid_number:
        if db.query(RFID).filter(RFID.rfid_number == rfid_number).first():
            raise HTTPException(status_code=400, detail="RFID number is already in use")
        card.rfid_number = rfid_number

    if request.user_id and request.user_id != card.user_id:
        _patient_or_error(db, request.user_id)
        card.user_id = request.user_id

    if request.is_active is not None:
        card.is_active = request.is_active

    if card.is_active and card.user_id:
        _ensure_no_active_card(db, card.user_id, exclude_id=card.id)

    card.assigned_by = current_user.id
    _commit_card(db, card, "RFID number is already in use")
    logger.info("RFID assignment %s updated by %s", card.id, current_user.id)
    return {"success": True, "message": "RFID assignment updated successfully", "rfid": RFIDOut.serialize(card)}


def delete_rfid(db: Session, rfid_id: int):
    card = get_rfid_or_404(db, rfid_id)
    db.delete(card)
    db.commit()
    logger.info("RFID assignment %s deleted", rfid_id)
    return {"success": True, "message": "RFID assignment deleted successfully"}
