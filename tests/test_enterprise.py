"""
Enterprise resource CRUD tests (employees, visitors, rooms, bookings,
assets, leaves, attendance).
"""

import pytest
from httpx import AsyncClient

from liveboard.db.store import store


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "resource, body, default_status",
    [
        ("employees", {"firstName": "Ann", "department": "Finance"}, "active"),
        ("visitors", {"name": "Vic", "company": "Other"}, "checked-in"),
        ("rooms", {"name": "Lab 9", "capacity": "30"}, "available"),
        ("bookings", {"roomId": "r1", "title": "Standup"}, "confirmed"),
        ("assets", {"name": "Laptop", "serialNumber": "SN-1"}, "available"),
        ("leaves", {"employeeId": "e1", "type": "sick"}, "pending"),
        ("attendance", {"employeeId": "e1", "date": "2026-03-02"}, "present"),
    ],
)
async def test_create_applies_defaults(
    async_client: AsyncClient, admin_user, auth_headers, resource, body, default_status
):
    resp = await async_client.post(f"/api/{resource}", json=body, headers=auth_headers)
    assert resp.status_code == 201
    data = resp.json()
    assert data["status"] == default_status
    assert data["createdBy"] == admin_user.id
    assert data["id"] in store.resource(resource)


@pytest.mark.asyncio
async def test_room_capacity_coerced(async_client: AsyncClient, auth_headers):
    resp = await async_client.post(
        "/api/rooms", json={"name": "Hall", "capacity": "120"}, headers=auth_headers
    )
    assert resp.json()["capacity"] == 120


@pytest.mark.asyncio
async def test_visitor_check_in_stamped(async_client: AsyncClient, auth_headers):
    resp = await async_client.post("/api/visitors", json={"name": "Vic"}, headers=auth_headers)
    assert resp.json()["checkIn"]


@pytest.mark.asyncio
async def test_explicit_status_kept_and_extra_fields_stored(
    async_client: AsyncClient, auth_headers
):
    resp = await async_client.post(
        "/api/assets",
        json={"name": "Projector", "status": "in-repair", "warranty": "2027"},
        headers=auth_headers,
    )
    assert resp.json()["status"] == "in-repair"
    assert resp.json()["warranty"] == "2027"


@pytest.mark.asyncio
async def test_get_update_delete(async_client: AsyncClient, auth_headers):
    created = await async_client.post(
        "/api/employees", json={"firstName": "Ann"}, headers=auth_headers
    )
    employee_id = created.json()["id"]

    listed = await async_client.get("/api/employees", headers=auth_headers)
    assert [e["id"] for e in listed.json()] == [employee_id]

    updated = await async_client.put(
        f"/api/employees/{employee_id}",
        json={"position": "Analyst", "id": "hijack"},
        headers=auth_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["id"] == employee_id
    assert updated.json()["position"] == "Analyst"
    assert updated.json()["firstName"] == "Ann"
    assert updated.json()["updatedAt"]

    deleted = await async_client.delete(f"/api/employees/{employee_id}", headers=auth_headers)
    assert deleted.json()["message"] == "Employee deleted successfully"

    missing = await async_client.get(f"/api/employees/{employee_id}", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Employee not found"


@pytest.mark.asyncio
async def test_enterprise_requires_auth(async_client: AsyncClient):
    assert (await async_client.get("/api/bookings")).status_code == 401
    assert (await async_client.post("/api/leaves", json={})).status_code == 401
