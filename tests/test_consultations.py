from conftest import auth_headers


def test_add_by_rfid_twice_keeps_one_consultation(client, doctor, patient, make_rfid):
    make_rfid(patient, "CARD-1")
    headers = auth_headers(doctor)

    first = client.post("/api/consultations/add-by-rfid", json={"rfidNumber": "CARD-1", "notes": "Initial"}, headers=headers)
    assert first.status_code == 201
    second = client.post("/api/consultations/add-by-rfid", json={"rfidNumber": "CARD-1", "notes": "Follow-up"}, headers=headers)
    assert second.status_code == 200

    assert first.json()["consultation"]["id"] == second.json()["consultation"]["id"]
    history = second.json()["consultation"]["consultationHistory"]
    assert [h["notes"] for h in history] == ["Initial", "Follow-up"]

    res = client.get("/api/consultations/doctor", headers=headers)
    assert len(res.json()["consultations"]) == 1


def test_add_by_unknown_card(client, doctor):
    res = client.post("/api/consultations/add-by-rfid", json={"rfidNumber": "NOPE"}, headers=auth_headers(doctor))
    assert res.status_code == 404
    assert res.json()["message"] == "Invalid or inactive RFID card"


def test_inactive_consultation_reactivates(client, doctor, patient, make_rfid):
    make_rfid(patient, "CARD-1")
    headers = auth_headers(doctor)
    created = client.post("/api/consultations/add-by-rfid", json={"rfidNumber": "CARD-1"}, headers=headers).json()
    consultation_id = created["consultation"]["id"]

    res = client.put(f"/api/consultations/{consultation_id}/status", json={"status": "inactive"}, headers=headers)
    assert res.json()["consultation"]["status"] == "inactive"
    assert client.get("/api/consultations/doctor", headers=headers).json()["consultations"] == []

    res = client.post("/api/consultations/add-by-rfid", json={"rfidNumber": "CARD-1"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["consultation"]["status"] == "active"


def test_patient_scope(client, doctor, patient, make_user, make_rfid):
    make_rfid(patient, "CARD-1")
    client.post("/api/consultations/add-by-rfid", json={"rfidNumber": "CARD-1"}, headers=auth_headers(doctor))

    res = client.get(f"/api/consultations/patient/{patient.id}", headers=auth_headers(patient))
    assert len(res.json()["consultations"]) == 1

    stranger = make_user("patient", email="stranger@clinic.org")
    res = client.get(f"/api/consultations/patient/{patient.id}", headers=auth_headers(stranger))
    assert res.status_code == 403


def test_foreign_doctor_cannot_delete(client, doctor, patient, make_user, make_rfid, hospital):
    make_rfid(patient, "CARD-1")
    created = client.post("/api/consultations/add-by-rfid", json={"rfidNumber": "CARD-1"}, headers=auth_headers(doctor))
    consultation_id = created.json()["consultation"]["id"]

    other = make_user("doctor", email="doc2@clinic.org", speciality="Neurology", hospital_id=hospital.id)
    res = client.delete(f"/api/consultations/{consultation_id}", headers=auth_headers(other))
    assert res.status_code == 403
    assert res.json()["message"] == "Not authorized to delete this consultation"

    assert client.delete(f"/api/consultations/{consultation_id}", headers=auth_headers(doctor)).status_code == 200
