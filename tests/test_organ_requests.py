"""
Tests for organ request submission, listing and review.
"""
from datetime import datetime, timedelta

import pytest

from organlink.auth.models import UserRole
from organlink.organ_requests.models import OrganRequest

KIDNEY_REQUEST = {
    "organType": "kidney",
    "priority": "high",
    "medicalReason": "End-stage renal failure requiring transplant",
}


def parse_instant(value):
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_patient_request_then_doctor_approval(client, auth_headers, make_user, doctor):
    """
    A patient submits a request and a doctor approves it.
    """
    patient = make_user(UserRole.PATIENT, user_id="p1")

    response = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(patient.id))
    assert response.status_code == 201
    created = response.json()
    assert created["status"] == "pending"
    assert created["patientId"] == "p1"
    assert created["organType"] == "kidney"
    assert created["approvedBy"] is None

    response = client.patch(
        f"/api/organ-requests/{created['id']}/status",
        json={"status": "approved"},
        headers=auth_headers(doctor.id),
    )
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "approved"
    assert body["approvedBy"] == doctor.id
    assert parse_instant(body["updatedAt"]) > parse_instant(created["updatedAt"])


def test_patient_id_in_body_is_ignored(client, auth_headers, patient, make_user):
    other = make_user(UserRole.PATIENT)
    body = dict(KIDNEY_REQUEST, patientId=other.id, status="approved", approvedBy=other.id)

    response = client.post("/api/organ-requests", json=body, headers=auth_headers(patient.id))
    assert response.status_code == 201
    data = response.json()
    assert data["patientId"] == patient.id
    assert data["status"] == "pending"
    assert data["approvedBy"] is None


@pytest.mark.parametrize("role", [UserRole.DONOR, UserRole.DOCTOR, UserRole.ADMIN, None])
def test_non_patients_cannot_create_requests(client, auth_headers, make_user, db, role):
    user = make_user(role)
    response = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(user.id))
    assert response.status_code == 403
    assert response.json()["message"] == "Only patients can create organ requests"
    assert db.query(OrganRequest).count() == 0


@pytest.mark.parametrize("body", [
    dict(KIDNEY_REQUEST, organType="spleen"),
    dict(KIDNEY_REQUEST, priority="urgent"),
    dict(KIDNEY_REQUEST, medicalReason="too short"),
    dict(KIDNEY_REQUEST, medicalReason="          "),
    {"organType": "kidney", "priority": "high"},
])
def test_invalid_request_body(client, auth_headers, patient, db, body):
    response = client.post("/api/organ-requests", json=body, headers=auth_headers(patient.id))
    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"
    assert db.query(OrganRequest).count() == 0


def test_patient_lists_only_own_requests_newest_first(client, auth_headers, patient, make_user):
    other = make_user(UserRole.PATIENT)
    headers = auth_headers(patient.id)
    first = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=headers).json()
    second = client.post(
        "/api/organ-requests",
        json=dict(KIDNEY_REQUEST, organType="heart", priority="critical"),
        headers=headers,
    ).json()
    client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(other.id))

    response = client.get("/api/organ-requests", headers=headers)
    assert response.status_code == 200
    assert [r["id"] for r in response.json()] == [second["id"], first["id"]]


@pytest.mark.parametrize("role", [UserRole.DOCTOR, UserRole.ADMIN])
def test_medical_staff_list_all_requests(client, auth_headers, make_user, role):
    for _ in range(2):
        owner = make_user(UserRole.PATIENT)
        client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(owner.id))
    reviewer = make_user(role)

    response = client.get("/api/organ-requests", headers=auth_headers(reviewer.id))
    assert response.status_code == 200
    assert len(response.json()) == 2


@pytest.mark.parametrize("role", [UserRole.DONOR, None])
def test_other_roles_cannot_list_requests(client, auth_headers, make_user, role):
    user = make_user(role)
    response = client.get("/api/organ-requests", headers=auth_headers(user.id))
    assert response.status_code == 403


def test_status_update_overwrites_and_keeps_notes(client, auth_headers, patient, doctor, admin):
    created = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(patient.id)).json()
    url = f"/api/organ-requests/{created['id']}/status"

    response = client.patch(url, json={"status": "rejected", "notes": "Rejected after medical review"},
                            headers=auth_headers(doctor.id))
    assert response.json()["doctorNotes"] == "Rejected after medical review"

    # Empty notes leave the stored notes in place; the reviewer is replaced
    response = client.patch(url, json={"status": "approved", "notes": ""}, headers=auth_headers(admin.id))
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "approved"
    assert body["approvedBy"] == admin.id
    assert body["doctorNotes"] == "Rejected after medical review"


def test_status_update_allows_out_of_flow_moves(client, auth_headers, patient, doctor):
    """
    Any status may be written from any status.
    """
    created = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(patient.id)).json()
    response = client.patch(
        f"/api/organ-requests/{created['id']}/status",
        json={"status": "completed"},
        headers=auth_headers(doctor.id),
    )
    assert response.status_code == 200
    assert response.json()["status"] == "completed"


def test_status_update_requires_doctor_or_admin(client, auth_headers, patient):
    created = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(patient.id)).json()
    response = client.patch(
        f"/api/organ-requests/{created['id']}/status",
        json={"status": "approved"},
        headers=auth_headers(patient.id),
    )
    assert response.status_code == 403


def test_status_update_unknown_request(client, auth_headers, doctor):
    response = client.patch("/api/organ-requests/missing/status", json={"status": "approved"},
                            headers=auth_headers(doctor.id))
    assert response.status_code == 404
    assert response.json()["message"] == "Organ request not found"


def test_status_update_invalid_status(client, auth_headers, patient, doctor):
    created = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(patient.id)).json()
    response = client.patch(
        f"/api/organ-requests/{created['id']}/status",
        json={"status": "archived"},
        headers=auth_headers(doctor.id),
    )
    assert response.status_code == 400


def test_timestamps_are_utc_instants(client, auth_headers, patient):
    response = client.post("/api/organ-requests", json=KIDNEY_REQUEST, headers=auth_headers(patient.id))
    created_at = parse_instant(response.json()["createdAt"])
    assert created_at.utcoffset() == timedelta(0)
