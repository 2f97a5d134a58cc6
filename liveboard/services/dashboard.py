"""
Dashboard aggregate — shared by ``GET /api/dashboard/stats`` and the
socket ``request_data("dashboard")`` pull.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from liveboard.db.store import Store, today_iso
from liveboard.services.announcements import is_live


def dashboard_snapshot(store: Store, now: datetime | None = None) -> dict[str, Any]:
    now = now or datetime.now(timezone.utc)
    today = today_iso()

    today_schedules = [
        s
        for s in store.schedules
        if s.get("date") == today and s.get("isActive", s.get("is_active", True))
    ]
    all_tasks = store.tasks.list()
    active_tasks = [t for t in all_tasks if t.get("status") != "completed"]
    active_announcements = [a for a in store.announcements if is_live(a, now)]

    recent_activity = (
        [
            {
                "type": "schedule",
                "title": s.get("title") or s.get("subject"),
                "time": s.get("startTime") or s.get("start_time"),
            }
            for s in today_schedules[:3]
        ]
        + [
            {"type": "task", "title": t.get("title"), "priority": t.get("priority")}
            for t in active_tasks[:3]
        ]
        + [
            {"type": "announcement", "title": a.get("title"), "priority": a.get("priority")}
            for a in active_announcements[:3]
        ]
    )

    return {
        "totalUsers": len(store.users),
        "totalSchedules": len(store.schedules),
        "todaySchedules": len(today_schedules),
        "totalTasks": len(all_tasks),
        "activeTasks": len(active_tasks),
        "completedTasks": len(all_tasks) - len(active_tasks),
        "totalAnnouncements": len(store.announcements),
        "activeAnnouncements": len(active_announcements),
        "recentSchedules": today_schedules[:5],
        "recentTasks": all_tasks[:5],
        "recentAnnouncements": active_announcements[:5],
        "recentActivity": recent_activity,
    }
