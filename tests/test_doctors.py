from conftest import auth_headers


def test_speciality_queries(client, patient, doctor, make_user, hospital):
    make_user("doctor", email="derm@clinic.org", speciality="Dermatology", hospital_id=hospital.id)
    headers = auth_headers(patient)

    res = client.get("/api/doctors/specialities/all", headers=headers)
    assert res.json()["specialities"] == ["Cardiology", "Dermatology"]

    res = client.get("/api/doctors/speciality/Cardiology", headers=headers)
    assert [d["id"] for d in res.json()["doctors"]] == [doctor.id]


def test_get_doctor_404_for_patient_id(client, patient):
    res = client.get(f"/api/doctors/{patient.id}", headers=auth_headers(patient))
    assert res.status_code == 404
    assert res.json()["message"] == "Doctor not found"


def test_doctor_appointments_visibility(client, doctor, make_user, hospital, patient):
    other = make_user("doctor", email="other-doc@clinic.org", speciality="Neurology", hospital_id=hospital.id)
    assert client.get(f"/api/doctors/{doctor.id}/appointments", headers=auth_headers(doctor)).status_code == 200
    assert client.get(f"/api/doctors/{doctor.id}/appointments", headers=auth_headers(other)).status_code == 403
    assert client.get(f"/api/doctors/{doctor.id}/appointments", headers=auth_headers(patient)).status_code == 403
