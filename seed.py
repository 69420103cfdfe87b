"""Populate an empty database with sample hospitals, an admin and doctors.

    python seed.py

Existing rows in the seeded tables are removed first.
"""
import logging
import os

from core.auth_utils import hash_password
from database import Base, SessionLocal, engine
from model.appointment_model import Appointment
from model.consultation_model import Consultation, ConsultationEntry
from model.conversation_model import Conversation
from model.health_model import HealthCondition, HealthDocument
from model.hospital_model import Hospital
from model.prescription_model import Prescription
from model.rfid_model import RFID
from model.user_model import Users

logger = logging.getLogger("seed")

HOSPITALS = [
    {
        "name": "General Hospital",
        "address": "123 Main Street, Cityville",
        "phone": "555-123-4567",
        "email": "info@generalhospital.com",
        "website": "www.generalhospital.com",
    },
    {
        "name": "Community Medical Center",
        "address": "456 Oak Avenue, Townsburg",
        "phone": "555-987-6543",
        "email": "contact@communitymedical.com",
        "website": "www.communitymedical.com",
    },
    {
        "name": "Riverside Health Clinic",
        "address": "789 River Road, Villageton",
        "phone": "555-456-7890",
        "email": "info@riversidehealth.com",
        "website": "www.riversidehealth.com",
    },
]

SPECIALITIES = [
    "Cardiology",
    "Dermatology",
    "Endocrinology",
    "Gastroenterology",
    "Neurology",
    "Obstetrics",
    "Oncology",
    "Ophthalmology",
    "Orthopedics",
    "Pediatrics",
    "Psychiatry",
    "Urology",
]


def clear(db):
    # children first
    for table in (
        ConsultationEntry, Consultation, Prescription, RFID, HealthDocument,
        HealthCondition, Conversation, Appointment, Users, Hospital,
    ):
        db.query(table).delete()
    db.commit()
    logger.info("Deleted existing data")


def seed_hospitals(db):
    hospitals = [Hospital(**data) for data in HOSPITALS]
    db.add_all(hospitals)
    db.commit()
    logger.info("Seeded %d hospitals", len(hospitals))
    return hospitals


def seed_users(db, hospitals):
    admin = Users(
        name="Admin User",
        email=os.getenv("ADMIN_EMAIL", "admin@medi-server.com"),
        hashed_password=hash_password(os.getenv("ADMIN_PASSWORD", "admin123")),
        role="admin",
    )
    doctors = [
        Users(
            name=f"Dr. {speciality} Specialist",
            email=f"{speciality.lower()}@medi-server.com",
            hashed_password=hash_password("doctor123"),
            role="doctor",
            speciality=speciality,
            hospital_id=hospitals[i % len(hospitals)].id,
        )
        for i, speciality in enumerate(SPECIALITIES)
    ]
    patient = Users(
        name="Sample Patient",
        email="patient@medi-server.com",
        hashed_password=hash_password("patient123"),
        role="patient",
    )
    db.add_all([admin, *doctors, patient])
    db.commit()
    logger.info("Seeded 1 admin, %d doctors and 1 patient", len(doctors))


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        clear(db)
        seed_users(db, seed_hospitals(db))
    finally:
        db.close()
    logger.info("Seeding complete")


if __name__ == "__main__":
    main()
