"""
Dropdown settings tests.
"""

import pytest
from httpx import AsyncClient

from liveboard.db.store import DEFAULT_SETTINGS, store


@pytest.mark.asyncio
async def test_get_all_and_category(async_client: AsyncClient, auth_headers):
    everything = await async_client.get("/api/settings", headers=auth_headers)
    assert set(everything.json()) == set(DEFAULT_SETTINGS)

    rooms = await async_client.get("/api/settings/rooms", headers=auth_headers)
    assert rooms.json() == {"category": "rooms", "items": DEFAULT_SETTINGS["rooms"]}

    missing = await async_client.get("/api/settings/planets", headers=auth_headers)
    assert missing.status_code == 404
    assert missing.json()["detail"] == "Category not found"


@pytest.mark.asyncio
async def test_replace_category(async_client: AsyncClient, auth_headers):
    resp = await async_client.put(
        "/api/settings/rooms", json={"items": ["A", "B"]}, headers=auth_headers
    )
    assert resp.status_code == 200
    assert store.settings["rooms"] == ["A", "B"]

    invalid = await async_client.put(
        "/api/settings/planets", json={"items": []}, headers=auth_headers
    )
    assert invalid.status_code == 400
    assert invalid.json()["detail"] == "Invalid category"

    not_a_list = await async_client.put(
        "/api/settings/rooms", json={"items": "A"}, headers=auth_headers
    )
    assert not_a_list.status_code == 400


@pytest.mark.asyncio
async def test_add_and_remove_item(async_client: AsyncClient, auth_headers):
    added = await async_client.post(
        "/api/settings/companies/items", json={"item": "Acme"}, headers=auth_headers
    )
    assert added.status_code == 201
    assert added.json()["items"][-1] == "Acme"

    dup = await async_client.post(
        "/api/settings/companies/items", json={"item": "Acme"}, headers=auth_headers
    )
    assert dup.status_code == 409
    assert dup.json()["detail"] == "Item already exists"

    removed = await async_client.delete(
        "/api/settings/companies/items/Acme", headers=auth_headers
    )
    assert removed.status_code == 200
    assert "Acme" not in store.settings["companies"]

    gone = await async_client.delete("/api/settings/companies/items/Acme", headers=auth_headers)
    assert gone.status_code == 404
    assert gone.json()["detail"] == "Item not found"


@pytest.mark.asyncio
async def test_remove_item_containing_slash(async_client: AsyncClient, auth_headers):
    added = await async_client.post(
        "/api/settings/rooms/items", json={"item": "I/O Lab"}, headers=auth_headers
    )
    assert added.status_code == 201

    removed = await async_client.delete("/api/settings/rooms/items/I/O Lab", headers=auth_headers)
    assert removed.status_code == 200
    assert removed.json()["item"] == "I/O Lab"
    assert "I/O Lab" not in store.settings["rooms"]


@pytest.mark.asyncio
async def test_reset(async_client: AsyncClient, auth_headers):
    store.settings["rooms"] = []
    store.settings["subjects"] = []

    one = await async_client.post("/api/settings/rooms/reset", headers=auth_headers)
    assert one.json()["items"] == DEFAULT_SETTINGS["rooms"]
    assert store.settings["subjects"] == []

    everything = await async_client.post("/api/settings/reset", headers=auth_headers)
    assert everything.status_code == 200
    assert store.settings == DEFAULT_SETTINGS


@pytest.mark.asyncio
async def test_settings_require_auth(async_client: AsyncClient):
    assert (await async_client.get("/api/settings")).status_code == 401
