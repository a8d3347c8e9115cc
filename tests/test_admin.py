"""
Tests for account administration and dashboard statistics.
"""
import pytest

from organlink.auth.models import UserRole
from organlink.core.enums import DonationType, OrganType, PriorityLevel, RequestStatus
from organlink.organ_matches.models import OrganMatch
from organlink.organ_pledges.models import OrganPledge
from organlink.organ_requests.models import OrganRequest

SUMMARY_FIELDS = {"id", "firstName", "lastName", "email", "role", "isActive", "createdAt"}


def test_list_users_is_sanitized(client, auth_headers, admin, patient, donor):
    response = client.get("/api/admin/users", headers=auth_headers(admin.id))
    assert response.status_code == 200
    users = response.json()
    assert {u["id"] for u in users} == {admin.id, patient.id, donor.id}
    assert all(set(u) == SUMMARY_FIELDS for u in users)


def test_list_users_by_role(client, auth_headers, admin, patient, donor, make_user):
    second_donor = make_user(UserRole.DONOR)
    response = client.get("/api/admin/users/donor", headers=auth_headers(admin.id))
    assert response.status_code == 200
    assert {u["id"] for u in response.json()} == {donor.id, second_donor.id}


def test_list_users_invalid_role(client, auth_headers, admin):
    response = client.get("/api/admin/users/nurse", headers=auth_headers(admin.id))
    assert response.status_code == 400


@pytest.mark.parametrize("path", ["/api/admin/users", "/api/admin/users/patient", "/api/admin/stats"])
def test_admin_routes_reject_non_admins(client, auth_headers, doctor, path):
    response = client.get(path, headers=auth_headers(doctor.id))
    assert response.status_code == 403
    assert response.json()["message"] == "Admin access required"


def test_deactivate_and_reactivate_user(client, auth_headers, admin, donor):
    url = f"/api/admin/users/{donor.id}/status"

    response = client.patch(url, json={"isActive": False}, headers=auth_headers(admin.id))
    assert response.status_code == 200
    assert response.json()["isActive"] is False
    assert client.get("/api/organ-pledges", headers=auth_headers(donor.id)).status_code == 403

    response = client.patch(url, json={"isActive": True}, headers=auth_headers(admin.id))
    assert response.json()["isActive"] is True
    assert client.get("/api/organ-pledges", headers=auth_headers(donor.id)).status_code == 200


@pytest.mark.parametrize("body", [{}, {"isActive": "no"}, {"isActive": 0}])
def test_user_status_requires_boolean(client, auth_headers, admin, donor, body):
    response = client.patch(f"/api/admin/users/{donor.id}/status", json=body, headers=auth_headers(admin.id))
    assert response.status_code == 400


def test_user_status_unknown_user(client, auth_headers, admin):
    response = client.patch("/api/admin/users/ghost/status", json={"isActive": False},
                            headers=auth_headers(admin.id))
    assert response.status_code == 404


def test_user_status_requires_admin(client, auth_headers, doctor, donor):
    response = client.patch(f"/api/admin/users/{donor.id}/status", json={"isActive": False},
                            headers=auth_headers(doctor.id))
    assert response.status_code == 403


def test_system_stats(client, auth_headers, db, admin, patient, donor, make_user):
    make_user(UserRole.DONOR, is_active=False)
    make_user(role=None)

    requests = [
        OrganRequest(patient_id=patient.id, organ_type=OrganType.HEART, priority=PriorityLevel.CRITICAL,
                     medical_reason="Dilated cardiomyopathy", status=status)
        for status in (RequestStatus.PENDING, RequestStatus.PENDING, RequestStatus.APPROVED)
    ]
    pledge = OrganPledge(donor_id=donor.id, organ_type=OrganType.HEART, donation_type=DonationType.POSTHUMOUS)
    db.add_all(requests + [pledge])
    db.commit()
    for status in (RequestStatus.COMPLETED, RequestStatus.PENDING):
        db.add(OrganMatch(request_id=requests[0].id, pledge_id=pledge.id, status=status))
    db.commit()

    response = client.get("/api/admin/stats", headers=auth_headers(admin.id))
    assert response.status_code == 200
    assert response.json() == {
        "totalUsers": 5,
        "activeDonors": 2,
        "pendingRequests": 2,
        "successfulMatches": 1,
    }


def test_system_stats_are_recomputed(client, auth_headers, admin, patient):
    headers = auth_headers(admin.id)
    assert client.get("/api/admin/stats", headers=headers).json()["pendingRequests"] == 0

    client.post(
        "/api/organ-requests",
        json={"organType": "lung", "priority": "low", "medicalReason": "Idiopathic pulmonary fibrosis"},
        headers=auth_headers(patient.id),
    )
    assert client.get("/api/admin/stats", headers=headers).json()["pendingRequests"] == 1


def test_admin_cannot_deactivate_self(client, auth_headers, admin):
    url = f"/api/admin/users/{admin.id}/status"

    response = client.patch(url, json={"isActive": False}, headers=auth_headers(admin.id))
    assert response.status_code == 400
    assert response.json()["message"] == "Admins cannot deactivate their own account"

    # Still able to administer accounts afterwards
    assert client.get("/api/admin/users", headers=auth_headers(admin.id)).status_code == 200


def test_admin_can_deactivate_another_admin(client, auth_headers, admin, make_user):
    other_admin = make_user(UserRole.ADMIN)
    response = client.patch(f"/api/admin/users/{other_admin.id}/status", json={"isActive": False},
                            headers=auth_headers(admin.id))
    assert response.status_code == 200
    assert response.json()["isActive"] is False
