import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from core.policies import ensure_patient_scope
from model.prescription_model import Prescription
from model.prescription_schema import PrescriptionOut, PrescriptionRequest
from model.user_model import Users

logger = logging.getLogger(__name__)


def create_prescription(db: Session, doctor: Users, request: PrescriptionRequest):
    patient = db.get(Users, request.patient_id)
    if not patient or patient.role != "patient":
        raise HTTPException(status_code=404, detail="Patient not found")

    prescription = Prescription(
        patient_id=patient.id,
        doctor_id=doctor.id,
        medicines=[m.model_dump(by_alias=True) for m in request.medicines],
        notes=request.notes.strip() if request.notes else None,
    )
    db.add(prescription)
    db.commit()
    db.refresh(prescription)
    logger.info("Doctor %s prescribed %d medicine(s) to patient %s", doctor.id, len(request.medicines), patient.id)
    return {
        "success": True,
        "message": "Prescription created successfully",
        "prescription": PrescriptionOut.serialize(prescription),
    }


def prescriptions_for_patient(db: Session, patient_id: int):
    return (
        db.query(Prescription)
        .filter(Prescription.patient_id == patient_id)
        .order_by(Prescription.created_at.desc(), Prescription.id.desc())
        .all()
    )


def get_patient_prescriptions(db: Session, user: Users, patient_id: int):
    ensure_patient_scope(user, patient_id)
    prescriptions = prescriptions_for_patient(db, patient_id)
    return {"success": True, "prescriptions": [PrescriptionOut.serialize(p) for p in prescriptions]}


def get_doctor_prescriptions(db: Session, doctor: Users):
    prescriptions = (
        db.query(Prescription)
        .filter(Prescription.doctor_id == doctor.id)
        .order_by(Prescription.created_at.desc(), Prescription.id.desc())
        .all()
    )
    return {"success": True, "prescriptions": [PrescriptionOut.serialize(p) for p in prescriptions]}
