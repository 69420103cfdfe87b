from conftest import auth_headers

MEDICINE = {
    "name": "Amoxicillin",
    "quantity": "500mg",
    "intakeTime": ["morning", "night"],
    "duration": "7 days",
    "instructions": "After food",
}


def test_doctor_prescribes(client, doctor, patient):
    res = client.post(
        "/api/prescriptions",
        json={"patientId": patient.id, "medicines": [MEDICINE], "notes": "Review in a week"},
        headers=auth_headers(doctor),
    )
    assert res.status_code == 201
    prescription = res.json()["prescription"]
    assert prescription["doctorId"] == doctor.id
    assert prescription["medicines"][0]["intakeTime"] == ["morning", "night"]

    res = client.get("/api/prescriptions/doctor", headers=auth_headers(doctor))
    assert len(res.json()["prescriptions"]) == 1


def test_empty_medicines_rejected(client, doctor, patient):
    res = client.post("/api/prescriptions", json={"patientId": patient.id, "medicines": []}, headers=auth_headers(doctor))
    assert res.status_code == 400


def test_bad_intake_time_rejected(client, doctor, patient):
    medicine = {**MEDICINE, "intakeTime": ["whenever"]}
    res = client.post(
        "/api/prescriptions", json={"patientId": patient.id, "medicines": [medicine]}, headers=auth_headers(doctor)
    )
    assert res.status_code == 400


def test_prescribe_for_non_patient(client, doctor, admin):
    res = client.post("/api/prescriptions", json={"patientId": admin.id, "medicines": [MEDICINE]}, headers=auth_headers(doctor))
    assert res.status_code == 404
    assert res.json()["message"] == "Patient not found"


def test_patient_cannot_prescribe(client, patient):
    res = client.post("/api/prescriptions", json={"patientId": patient.id, "medicines": [MEDICINE]}, headers=auth_headers(patient))
    assert res.status_code == 403


def test_patient_reads_only_own(client, doctor, patient, make_user):
    client.post("/api/prescriptions", json={"patientId": patient.id, "medicines": [MEDICINE]}, headers=auth_headers(doctor))
    res = client.get(f"/api/prescriptions/patient/{patient.id}", headers=auth_headers(patient))
    assert len(res.json()["prescriptions"]) == 1

    stranger = make_user("patient", email="stranger@clinic.org")
    res = client.get(f"/api/prescriptions/patient/{patient.id}", headers=auth_headers(stranger))
    assert res.status_code == 403
