import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from model.hospital_model import Hospital
from model.hospital_schema import CreateHospitalRequest, HospitalOut, UpdateHospitalRequest
from model.user_model import Users
from model.user_schema import UserOut

logger = logging.getLogger(__name__)


def get_hospital_or_404(db: Session, hospital_id: int) -> Hospital:
    hospital = db.get(Hospital, hospital_id)
    if not hospital:
        raise HTTPException(status_code=404, detail="Hospital not found")
    return hospital


def _doctors_of(db: Session, hospital_id: int):
    return db.query(Users).filter(Users.hospital_id == hospital_id, Users.role == "doctor")


def create_hospital(db: Session, request: CreateHospitalRequest):
    if not request.name or not request.address:
        raise HTTPException(status_code=400, detail="Name and address are required")

    hospital = Hospital(
        name=request.name.strip(),
        address=request.address.strip(),
        phone=request.phone,
        email=request.email.lower() if request.email else None,
        website=request.website,
    )
    db.add(hospital)
    db.commit()
    db.refresh(hospital)
    logger.info("Created hospital %s (id=%s)", hospital.name, hospital.id)
    return {"success": True, "message": "Hospital created successfully", "hospital": HospitalOut.serialize(hospital)}


def list_hospitals(db: Session):
    hospitals = db.query(Hospital).order_by(Hospital.id).all()
    return {"success": True, "hospitals": [HospitalOut.serialize(h) for h in hospitals]}


def get_hospital(db: Session, hospital_id: int):
    return {"success": True, "hospital": HospitalOut.serialize(get_hospital_or_404(db, hospital_id))}


def update_hospital(db: Session, hospital_id: int, update_data: UpdateHospitalRequest):
    hospital = get_hospital_or_404(db, hospital_id)
    changes = update_data.model_dump(exclude_unset=True)
    for field in ("name", "address"):
        if field in changes and not changes[field]:
            raise HTTPException(status_code=400, detail=f"Hospital {field} cannot be empty")
    if changes.get("email"):
        changes["email"] = changes["email"].lower()
    for field, value in changes.items():
        setattr(hospital, field, value)

    db.commit()
    db.refresh(hospital)
    return {"success": True, "message": "Hospital updated successfully", "hospital": HospitalOut.serialize(hospital)}


def delete_hospital(db: Session, hospital_id: int):
    hospital = get_hospital_or_404(db, hospital_id)

    if _doctors_of(db, hospital_id).count() > 0:
        raise HTTPException(
            status_code=400,
            detail="Cannot delete hospital with associated doctors. Reassign or delete doctors first.",
        )

    # appointments keep the row and lose the hospital reference
    db.delete(hospital)
    db.commit()
    logger.info("Deleted hospital %s", hospital_id)
    return {"success": True, "message": "Hospital deleted successfully"}


def list_hospital_doctors(db: Session, hospital_id: int):
    get_hospital_or_404(db, hospital_id)
    doctors = _doctors_of(db, hospital_id).order_by(Users.id).all()
    return {"success": True, "doctors": [UserOut.serialize(d) for d in doctors]}


def add_doctor_to_hospital(db: Session, hospital_id: int, doctor_id):
    if not doctor_id:
        raise HTTPException(status_code=400, detail="Doctor ID is required")

    get_hospital_or_404(db, hospital_id)
    doctor = db.get(Users, doctor_id)
    if not doctor:
        raise HTTPException(status_code=404, detail="Doctor not found")
    if doctor.role != "doctor":
        raise HTTPException(status_code=400, detail="User is not a doctor")

    doctor.hospital_id = hospital_id
    db.commit()
    db.refresh(doctor)
    logger.info("Moved doctor %s to hospital %s", doctor.id, hospital_id)
    return {"success": True, "message": "Doctor added to hospital successfully", "doctor": UserOut.serialize(doctor)}
