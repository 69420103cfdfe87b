import os
import tempfile

# must be set before the app modules read their config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="medi-uploads-")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from core.auth_utils import blacklisted_tokens, create_access_token, hash_password  # noqa: E402
from database import Base, SessionLocal, engine  # noqa: E402
from main import app  # noqa: E402
from model.hospital_model import Hospital  # noqa: E402
from model.rfid_model import RFID  # noqa: E402
from model.user_model import Users  # noqa: E402

PASSWORD = "secret123"


@pytest.fixture(autouse=True)
def reset_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    blacklisted_tokens.clear()
    yield
    blacklisted_tokens.clear()


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_hospital(db):
    def _make(name="General Hospital", address="123 Main Street"):
        hospital = Hospital(name=name, address=address)
        db.add(hospital)
        db.commit()
        db.refresh(hospital)
        return hospital

    return _make


@pytest.fixture
def make_user(db):
    def _make(role="patient", email=None, name=None, **fields):
        user = Users(
            name=name or f"Test {role.capitalize()}",
            email=email or f"{role}{db.query(Users).count() + 1}@clinic.org",
            hashed_password=hash_password(PASSWORD),
            role=role,
            **fields,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def make_rfid(db):
    def _make(user, rfid_number="RFID-0001", assigned_by=None, is_active=True):
        card = RFID(rfid_number=rfid_number, user_id=user.id, assigned_by=assigned_by, is_active=is_active)
        db.add(card)
        db.commit()
        db.refresh(card)
        return card

    return _make


def auth_headers(user):
    return {"Authorization": f"Bearer {create_access_token(user)}"}


@pytest.fixture
def hospital(make_hospital):
    return make_hospital()


@pytest.fixture
def admin(make_user):
    return make_user("admin", email="admin@clinic.org", name="Admin User")


@pytest.fixture
def doctor(make_user, hospital):
    return make_user(
        "doctor", email="doctor@clinic.org", name="Dr. House", speciality="Cardiology", hospital_id=hospital.id
    )


@pytest.fixture
def patient(make_user):
    return make_user("patient", email="patient@clinic.org", name="Jane Doe")
