from conftest import auth_headers


def test_admin_lists_and_creates_users(client, admin, patient, hospital):
    headers = auth_headers(admin)
    res = client.get("/api/users", headers=headers)
    assert res.status_code == 200
    assert {u["email"] for u in res.json()["users"]} == {"admin@clinic.org", "patient@clinic.org"}

    res = client.post(
        "/api/users",
        json={
            "name": "Dr. Grey",
            "email": "grey@clinic.org",
            "password": "secret123",
            "role": "doctor",
            "speciality": "Neurology",
            "hospitalId": hospital.id,
        },
        headers=headers,
    )
    assert res.status_code == 201
    assert res.json()["user"]["speciality"] == "Neurology"


def test_profile(client, patient):
    res = client.get("/api/users/profile", headers=auth_headers(patient))
    assert res.status_code == 200
    assert res.json()["user"]["id"] == patient.id


def test_user_reads_only_self(client, patient, make_user):
    other = make_user("patient", email="other@clinic.org")
    headers = auth_headers(patient)
    assert client.get(f"/api/users/{patient.id}", headers=headers).status_code == 200
    res = client.get(f"/api/users/{other.id}", headers=headers)
    assert res.status_code == 403


def test_update_user_keeps_role(client, patient):
    res = client.put(
        f"/api/users/{patient.id}",
        json={"name": "Jane Smith", "phone": "555-0100", "role": "admin"},
        headers=auth_headers(patient),
    )
    assert res.status_code == 200
    user = res.json()["user"]
    assert user["name"] == "Jane Smith"
    assert user["phone"] == "555-0100"
    assert user["role"] == "patient"


def test_update_email_conflict(client, patient, admin):
    res = client.put(f"/api/users/{patient.id}", json={"email": admin.email}, headers=auth_headers(patient))
    assert res.status_code == 400
    assert res.json()["message"] == "Email already exists"


def test_admin_deletes_user(client, admin, patient):
    res = client.delete(f"/api/users/{patient.id}", headers=auth_headers(admin))
    assert res.status_code == 200
    res = client.get(f"/api/users/{patient.id}", headers=auth_headers(admin))
    assert res.status_code == 404


def test_doctor_listings(client, patient, doctor, hospital):
    headers = auth_headers(patient)
    res = client.get("/api/users/doctors/all", headers=headers)
    assert [d["id"] for d in res.json()["doctors"]] == [doctor.id]

    res = client.get(f"/api/users/doctors/hospital/{hospital.id}", headers=headers)
    assert [d["id"] for d in res.json()["doctors"]] == [doctor.id]


def test_delete_user_leaves_their_records(client, admin, patient, doctor, hospital, make_rfid):
    res = client.post(
        "/api/appointments",
        json={"doctorId": doctor.id, "date": "2024-02-01", "time": "09:30", "hospitalId": hospital.id},
        headers=auth_headers(patient),
    )
    appointment_id = res.json()["appointment"]["id"]
    make_rfid(patient, "CARD-55")

    res = client.delete(f"/api/users/{patient.id}", headers=auth_headers(admin))
    assert res.status_code == 200

    appointment = client.get(f"/api/appointments/{appointment_id}", headers=auth_headers(admin)).json()["appointment"]
    assert appointment["patientId"] is None
    assert appointment["doctorName"] == doctor.name

    res = client.get("/api/rfid/user/CARD-55", headers=auth_headers(doctor))
    assert res.status_code == 404
    assert res.json()["message"] == "User not found"
