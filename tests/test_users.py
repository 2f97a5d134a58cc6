"""
User management tests — CRUD, status lifecycle, self-delete guard and the
optional admin-only gate.
"""

import pytest
from httpx import AsyncClient

from liveboard.core.config import settings
from liveboard.db.store import store
from liveboard.models.user import User


async def _create(client: AsyncClient, headers, **overrides):
    body = {"username": "erin", "email": "erin@x.io", "password": "secret1", **overrides}
    return await client.post("/api/users", json=body, headers=headers)


@pytest.mark.asyncio
async def test_list_and_get_users(async_client: AsyncClient, admin_user: User, auth_headers):
    listed = await async_client.get("/api/users", headers=auth_headers)
    assert listed.status_code == 200
    assert [u["username"] for u in listed.json()] == ["admin"]

    single = await async_client.get(f"/api/users/{admin_user.id}", headers=auth_headers)
    assert single.status_code == 200
    assert single.json()["firstName"] == "Admin"

    missing = await async_client.get("/api/users/nope", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "User not found"


@pytest.mark.asyncio
async def test_users_require_auth(async_client: AsyncClient):
    resp = await async_client.get("/api/users")
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_create_user(async_client: AsyncClient, auth_headers):
    resp = await _create(async_client, auth_headers, role="editor", firstName="Erin")
    assert resp.status_code == 201
    user = resp.json()["user"]
    assert user["role"] == "editor"
    assert user["firstName"] == "Erin"
    assert user["status"] == "active"

    dup = await _create(async_client, auth_headers)
    assert dup.status_code == 409


@pytest.mark.asyncio
async def test_update_user_conflict(async_client: AsyncClient, admin_user: User, auth_headers):
    created = await _create(async_client, auth_headers)
    user_id = created.json()["user"]["id"]

    clash = await async_client.put(
        f"/api/users/{user_id}", json={"email": admin_user.email}, headers=auth_headers
    )
    assert clash.status_code == 409
    assert clash.json()["detail"] == "Username or email already exists"

    ok = await async_client.put(
        f"/api/users/{user_id}", json={"lastName": "Stone"}, headers=auth_headers
    )
    assert ok.status_code == 200
    assert ok.json()["user"]["lastName"] == "Stone"
    assert ok.json()["user"]["updatedAt"] is not None


@pytest.mark.asyncio
async def test_status_approve_reject(async_client: AsyncClient, admin_user: User, auth_headers):
    created = await _create(async_client, auth_headers, status="pending")
    user_id = created.json()["user"]["id"]

    bad = await async_client.patch(
        f"/api/users/{user_id}/status", json={"status": "vacation"}, headers=auth_headers
    )
    assert bad.status_code == 400
    assert bad.json()["detail"] == "Invalid status"

    inactive = await async_client.patch(
        f"/api/users/{user_id}/status", json={"status": "inactive"}, headers=auth_headers
    )
    assert inactive.json()["user"]["status"] == "inactive"

    approved = await async_client.post(f"/api/users/{user_id}/approve", headers=auth_headers)
    assert approved.json()["user"]["status"] == "active"
    assert approved.json()["user"]["approvedBy"] == admin_user.id

    rejected = await async_client.post(
        f"/api/users/{user_id}/reject", json={"reason": "duplicate"}, headers=auth_headers
    )
    body = rejected.json()["user"]
    assert body["status"] == "rejected"
    assert body["rejectionReason"] == "duplicate"
    assert body["rejectedBy"] == admin_user.id


@pytest.mark.asyncio
async def test_cannot_delete_self(async_client: AsyncClient, admin_user: User, auth_headers):
    resp = await async_client.delete(f"/api/users/{admin_user.id}", headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Cannot delete your own account"
    assert admin_user.id in store.users


@pytest.mark.asyncio
async def test_delete_user(async_client: AsyncClient, auth_headers):
    created = await _create(async_client, auth_headers)
    user_id = created.json()["user"]["id"]

    resp = await async_client.delete(f"/api/users/{user_id}", headers=auth_headers)
    assert resp.status_code == 200
    assert user_id not in store.users

    again = await async_client.delete(f"/api/users/{user_id}", headers=auth_headers)
    assert again.status_code == 404


@pytest.mark.asyncio
async def test_any_authenticated_user_can_manage_by_default(
    async_client: AsyncClient, viewer_headers
):
    resp = await _create(async_client, viewer_headers)
    assert resp.status_code == 201


@pytest.mark.asyncio
async def test_admin_gate_uses_live_role(
    async_client: AsyncClient, monkeypatch, admin_user: User, viewer_user: User,
    auth_headers, viewer_headers,
):
    monkeypatch.setattr(settings, "ENFORCE_ADMIN_USER_MANAGEMENT", True)

    denied = await _create(async_client, viewer_headers)
    assert denied.status_code == 403
    assert denied.json()["detail"] == "Admin privileges required"

    # Reads stay open to any authenticated user
    assert (await async_client.get("/api/users", headers=viewer_headers)).status_code == 200

    allowed = await _create(async_client, auth_headers)
    assert allowed.status_code == 201

    # Demotion takes effect before the admin's token expires
    admin_user.role = "viewer"
    demoted = await _create(async_client, auth_headers, username="frank", email="f@x.io")
    assert demoted.status_code == 403
