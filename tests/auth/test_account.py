"""
Tests for identity resolution, the current-account endpoint and role selection.
"""
from datetime import timedelta

from organlink.auth.bootstrap import bootstrap_admin_if_needed
from organlink.auth.models import User, UserRole
from organlink.auth.schemas import AccountUpsert
from organlink.auth.security import create_access_token
from organlink.auth.service import upsert_account
from organlink.config import settings


def test_missing_token_is_rejected(client):
    """
    Calls without a bearer token get 401.
    """
    response = client.get("/api/auth/user")
    assert response.status_code == 401
    assert "message" in response.json()


def test_invalid_token_is_rejected(client):
    response = client.get("/api/auth/user", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_expired_token_is_rejected(client, patient):
    token = create_access_token(patient.id, expires_delta=timedelta(minutes=-5))
    response = client.get("/api/auth/user", headers={"Authorization": f"Bearer {token}"})
    assert response.status_code == 401


def test_get_current_user(client, auth_headers, patient):
    """
    The caller's stored account is returned with camelCase fields.
    """
    response = client.get("/api/auth/user", headers=auth_headers(patient.id))
    assert response.status_code == 200
    data = response.json()
    assert data["id"] == patient.id
    assert data["role"] == "patient"
    assert data["firstName"] == "Pat"
    assert data["isActive"] is True


def test_get_current_user_not_found(client, auth_headers):
    response = client.get("/api/auth/user", headers=auth_headers("ghost"))
    assert response.status_code == 404
    assert response.json()["message"] == "User not found"


def test_select_role_from_unset(client, auth_headers, make_user):
    """
    An account without a role can pick one.
    """
    user = make_user(role=None)
    response = client.patch("/api/auth/role", json={"role": "donor"}, headers=auth_headers(user.id))
    assert response.status_code == 200
    assert response.json()["role"] == "donor"


def test_select_role_overwrites_existing_role(client, auth_headers, make_user, db):
    """
    A second selection is accepted and replaces the first one.
    """
    user = make_user(role=None)
    headers = auth_headers(user.id)
    assert client.patch("/api/auth/role", json={"role": "donor"}, headers=headers).status_code == 200

    response = client.patch("/api/auth/role", json={"role": "patient"}, headers=headers)
    assert response.status_code == 200
    assert response.json()["role"] == "patient"
    assert db.query(User).filter(User.id == user.id).first().role == UserRole.PATIENT


def test_select_invalid_role(client, auth_headers, patient):
    response = client.patch("/api/auth/role", json={"role": "surgeon"}, headers=auth_headers(patient.id))
    assert response.status_code == 400
    assert response.json()["message"] == "Validation error"


def test_select_role_unknown_account(client, auth_headers):
    response = client.patch("/api/auth/role", json={"role": "donor"}, headers=auth_headers("ghost"))
    assert response.status_code == 404


def test_role_is_read_from_store_not_token(client, auth_headers, make_user, db):
    """
    A role change takes effect on the next call with the same token.
    """
    user = make_user(UserRole.PATIENT)
    headers = auth_headers(user.id)
    body = {"organType": "liver", "priority": "medium", "medicalReason": "Cirrhosis with hepatic failure"}
    assert client.post("/api/organ-requests", json=body, headers=headers).status_code == 201

    user.role = UserRole.DONOR
    db.commit()

    assert client.post("/api/organ-requests", json=body, headers=headers).status_code == 403


def test_deactivated_account_blocked_from_gated_routes(client, auth_headers, make_user):
    user = make_user(UserRole.DOCTOR, is_active=False)
    headers = auth_headers(user.id)

    response = client.get("/api/organ-requests", headers=headers)
    assert response.status_code == 403
    assert response.json()["message"] == "Account has been deactivated"

    # The account itself stays readable
    assert client.get("/api/auth/user", headers=headers).status_code == 200


def test_upsert_account_creates_then_refreshes(db):
    created = upsert_account(db, AccountUpsert(id="sub-1", email="a@example.com", firstName="Ann"))
    assert created.role is None
    assert created.is_active is True

    created.role = UserRole.DONOR
    db.commit()

    refreshed = upsert_account(db, AccountUpsert(id="sub-1", lastName="Lee"))
    assert refreshed.first_name == "Ann"
    assert refreshed.last_name == "Lee"
    assert refreshed.role == UserRole.DONOR


def test_bootstrap_admin(db, monkeypatch):
    monkeypatch.setattr(settings, "bootstrap_admin_id", "root-admin")
    monkeypatch.setattr(settings, "bootstrap_admin_email", "root@example.com")

    assert bootstrap_admin_if_needed(db) is True
    admin = db.query(User).filter(User.id == "root-admin").first()
    assert admin.role == UserRole.ADMIN
    assert admin.email == "root@example.com"

    # Only the first start provisions an admin
    assert bootstrap_admin_if_needed(db) is False


def test_bootstrap_skipped_without_configuration(db, monkeypatch):
    monkeypatch.setattr(settings, "bootstrap_admin_id", None)
    assert bootstrap_admin_if_needed(db) is False
    assert db.query(User).count() == 0


def test_bootstrap_recovers_when_only_inactive_admins_remain(db, make_user, monkeypatch):
    locked_out = make_user(UserRole.ADMIN, user_id="root-admin", is_active=False)
    monkeypatch.setattr(settings, "bootstrap_admin_id", "root-admin")

    assert bootstrap_admin_if_needed(db) is True
    db.refresh(locked_out)
    assert locked_out.is_active is True
    assert locked_out.role == UserRole.ADMIN
