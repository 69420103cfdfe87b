import pytest

from conftest import auth_headers


@pytest.fixture
def booked(client, patient, doctor, hospital):
    res = client.post(
        "/api/appointments",
        json={"doctorId": doctor.id, "date": "2024-01-10", "time": "10:00", "hospitalId": hospital.id},
        headers=auth_headers(patient),
    )
    assert res.status_code == 201
    return res.json()["appointment"]


def test_book_copies_doctor_details(booked, doctor):
    assert booked["status"] == "pending"
    assert booked["doctorName"] == doctor.name
    assert booked["speciality"] == "Cardiology"


def test_book_validates_input(client, patient, doctor, hospital):
    headers = auth_headers(patient)
    body = {"doctorId": doctor.id, "date": "10/01/2024", "time": "10:00", "hospitalId": hospital.id}
    res = client.post("/api/appointments", json=body, headers=headers)
    assert res.status_code == 400
    assert res.json()["message"] == "Date must be in yyyy-mm-dd format"

    res = client.post("/api/appointments", json={**body, "date": "2024-01-10", "doctorId": patient.id}, headers=headers)
    assert res.json()["message"] == "Invalid doctor ID"

    res = client.post(
        "/api/appointments", json={**body, "date": "2024-01-10", "hospitalId": hospital.id + 50}, headers=headers
    )
    assert res.json()["message"] == "Invalid hospital ID"


def test_doctor_cannot_book(client, doctor, hospital):
    res = client.post(
        "/api/appointments",
        json={"doctorId": doctor.id, "date": "2024-01-10", "time": "10:00", "hospitalId": hospital.id},
        headers=auth_headers(doctor),
    )
    assert res.status_code == 403


def test_listing_is_scoped_by_role(client, booked, patient, doctor, admin, make_user, hospital):
    stranger = make_user("patient", email="stranger@clinic.org")
    other_doc = make_user("doctor", email="doc2@clinic.org", speciality="Neurology", hospital_id=hospital.id)

    assert len(client.get("/api/appointments", headers=auth_headers(patient)).json()["appointments"]) == 1
    assert len(client.get("/api/appointments", headers=auth_headers(doctor)).json()["appointments"]) == 1
    assert len(client.get("/api/appointments", headers=auth_headers(admin)).json()["appointments"]) == 1
    assert client.get("/api/appointments", headers=auth_headers(stranger)).json()["appointments"] == []
    assert client.get("/api/appointments", headers=auth_headers(other_doc)).json()["appointments"] == []

    res = client.get(f"/api/appointments/{booked['id']}", headers=auth_headers(stranger))
    assert res.status_code == 403
    assert res.json()["message"] == "Not authorized to access this appointment"


def test_status_update_by_owning_doctor(client, booked, doctor):
    res = client.put(
        f"/api/appointments/{booked['id']}/status",
        json={"status": "approved", "notes": "Bring previous reports"},
        headers=auth_headers(doctor),
    )
    assert res.status_code == 200
    assert res.json()["appointment"]["status"] == "approved"
    assert res.json()["appointment"]["notes"] == "Bring previous reports"


def test_status_update_by_foreign_doctor(client, booked, make_user, hospital):
    other = make_user("doctor", email="doc2@clinic.org", speciality="Neurology", hospital_id=hospital.id)
    res = client.put(f"/api/appointments/{booked['id']}/status", json={"status": "approved"}, headers=auth_headers(other))
    assert res.status_code == 403


def test_status_update_rejects_unknown_value(client, booked, admin):
    res = client.put(f"/api/appointments/{booked['id']}/status", json={"status": "lost"}, headers=auth_headers(admin))
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid status value"


def test_patient_cannot_change_status(client, booked, patient):
    res = client.put(
        f"/api/appointments/{booked['id']}/status", json={"status": "completed"}, headers=auth_headers(patient)
    )
    assert res.status_code == 403


def test_reschedule(client, booked, patient, make_user):
    url = f"/api/appointments/{booked['id']}/reschedule"
    res = client.put(url, json={"date": "13/01/2024", "time": "11:00"}, headers=auth_headers(patient))
    assert res.status_code == 400

    stranger = make_user("patient", email="stranger@clinic.org")
    res = client.put(url, json={"date": "2024-01-13", "time": "11:00"}, headers=auth_headers(stranger))
    assert res.status_code == 403

    res = client.put(url, json={"date": "2024-01-13", "time": "11:00"}, headers=auth_headers(patient))
    assert res.status_code == 200
    appointment = res.json()["appointment"]
    assert (appointment["date"], appointment["time"], appointment["status"]) == ("2024-01-13", "11:00", "rescheduled")


def test_notes_and_delete(client, booked, patient):
    headers = auth_headers(patient)
    res = client.put(f"/api/appointments/{booked['id']}", json={"notes": "Fasting"}, headers=headers)
    assert res.json()["appointment"]["notes"] == "Fasting"

    assert client.delete(f"/api/appointments/{booked['id']}", headers=headers).status_code == 200
    assert client.get(f"/api/appointments/{booked['id']}", headers=headers).status_code == 404


@pytest.mark.parametrize("bad_date", ["2024-01-13\n", "٢٠٢٤-٠١-١٣", "2024-1-13", " 2024-01-13"])
def test_book_rejects_malformed_dates(client, patient, doctor, hospital, bad_date):
    res = client.post(
        "/api/appointments",
        json={"doctorId": doctor.id, "date": bad_date, "time": "10:00", "hospitalId": hospital.id},
        headers=auth_headers(patient),
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Date must be in yyyy-mm-dd format"


@pytest.mark.parametrize("bad_date", ["2024-01-13\n", "٢٠٢٤-٠١-١٣"])
def test_reschedule_rejects_malformed_dates(client, booked, patient, bad_date):
    res = client.put(
        f"/api/appointments/{booked['id']}/reschedule",
        json={"date": bad_date, "time": "11:00"},
        headers=auth_headers(patient),
    )
    assert res.status_code == 400
    res = client.get(f"/api/appointments/{booked['id']}", headers=auth_headers(patient))
    assert res.json()["appointment"]["date"] == "2024-01-10"
