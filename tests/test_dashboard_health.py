"""
Dashboard stats, health check, error envelope and startup seeding.
"""

from datetime import datetime, timedelta, timezone

import pytest
from httpx import AsyncClient

from liveboard.db.store import store, today_iso
from liveboard.main import app, lifespan
from liveboard.services.seed import seed_sample_data


@pytest.mark.asyncio
async def test_dashboard_stats(async_client: AsyncClient, auth_headers):
    today = today_iso()
    store.schedules.put("s1", {"id": "s1", "date": today, "isActive": True, "subject": "OS",
                               "start_time": "09:00"})
    store.schedules.put("s2", {"id": "s2", "date": "2001-01-01", "isActive": True})
    store.schedules.put("s3", {"id": "s3", "date": today, "isActive": False})
    store.tasks.put("t1", {"id": "t1", "title": "open", "status": "pending"})
    store.tasks.put("t2", {"id": "t2", "title": "done", "status": "completed"})
    expired = (datetime.now(timezone.utc) - timedelta(hours=1)).isoformat()
    store.announcements.put("a1", {"id": "a1", "title": "live", "active": True})
    store.announcements.put("a2", {"id": "a2", "active": True, "expiresAt": expired})
    store.announcements.put("a3", {"id": "a3", "active": False})

    resp = await async_client.get("/api/dashboard/stats", headers=auth_headers)
    assert resp.status_code == 200
    stats = resp.json()
    assert stats["totalUsers"] == 1
    assert stats["totalSchedules"] == 3
    assert stats["todaySchedules"] == 1
    assert stats["totalTasks"] == 2
    assert stats["activeTasks"] == 1
    assert stats["completedTasks"] == 1
    assert stats["totalAnnouncements"] == 3
    assert stats["activeAnnouncements"] == 1
    assert {a["type"] for a in stats["recentActivity"]} == {"schedule", "task", "announcement"}


@pytest.mark.asyncio
async def test_dashboard_requires_auth(async_client: AsyncClient):
    assert (await async_client.get("/api/dashboard/stats")).status_code == 401


@pytest.mark.asyncio
async def test_health_is_public(async_client: AsyncClient, admin_user):
    resp = await async_client.get("/api/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["counts"]["users"] == 1
    assert data["uptime"] >= 0


@pytest.mark.asyncio
async def test_unknown_route(async_client: AsyncClient):
    resp = await async_client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Route not found", "success": False}


@pytest.mark.asyncio
async def test_lifespan_seeds_admin_and_clears_on_shutdown(monkeypatch):
    from liveboard.core.config import settings

    monkeypatch.setattr(settings, "SEED_SAMPLE_DATA", True)
    async with lifespan(app):
        admin = store.users.get("admin-001")
        assert admin is not None
        assert admin.role == "admin"
        assert len(store.schedules) == 3
        assert store.announcements.get("announcement-001")["active"] is True
        assert store.tasks.get("task-001")["status"] == "completed"
    assert len(store.users) == 0


def test_seed_skips_when_content_exists():
    store.tasks.put("mine", {"id": "mine", "title": "keep"})
    seed_sample_data(store, "admin-001")
    assert len(store.schedules) == 0
    assert list(store.tasks) == [{"id": "mine", "title": "keep"}]
