"""Demo content loaded at startup when SEED_SAMPLE_DATA is on."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from liveboard.db.store import Record, Store
from liveboard.schemas.board import AcademicScheduleInput, AnnouncementCreate, TaskCreate
from liveboard.services.announcements import build_announcement_record
from liveboard.services.schedules import build_schedule_record
from liveboard.services.tasks import build_task_record

logger = logging.getLogger(__name__)

_SAMPLE_SCHEDULES = (
    ("schedule-001", "09:00", "10:30", "Room 101", "Computer Science Fundamentals",
     "Dr. Sarah Johnson", ["CS", "Theory"], "class"),
    ("schedule-002", "11:00", "12:30", "Room 102", "Data Structures & Algorithms",
     "Prof. Michael Chen", ["CS", "Programming"], "class"),
    ("schedule-003", "14:00", "15:30", "Conference Hall", "Team Meeting - Project Review",
     "Dr. Emily Rodriguez", ["Meeting", "Project"], "meeting"),
)

_WELCOME_TEXT = (
    "Your digital display management system is ready to use. "
    "Manage schedules, announcements, and tasks efficiently."
)


def _with_id(record: Record, record_id: str) -> Record:
    record["id"] = record_id
    return record


def seed_sample_data(store: Store, owner_id: str) -> None:
    """Three schedules for today, a welcome announcement and one finished task."""
    if len(store.schedules) or len(store.announcements) or len(store.tasks):
        logger.info("Store already has content; skipping sample data")
        return

    for sid, start, end, room, subject, faculty, tags, kind in _SAMPLE_SCHEDULES:
        data = AcademicScheduleInput(
            start_time=start,
            end_time=end,
            room_number=room,
            subject=subject,
            faculty_name=faculty,
            tags=tags,
            type=kind,
        )
        store.schedules.put(sid, _with_id(build_schedule_record(data, owner_id), sid))

    announcement = build_announcement_record(
        AnnouncementCreate(title="Welcome to LiveBoard!", content=_WELCOME_TEXT, priority="high"),
        owner_id,
    )
    store.announcements.put("announcement-001", _with_id(announcement, "announcement-001"))

    task = build_task_record(
        TaskCreate(
            title="Setup LiveBoard System",
            description="Complete the initial setup and configuration of the LiveBoard system",
            priority="high",
            status="completed",
            due_date=datetime.now(timezone.utc),
        ),
        owner_id,
    )
    store.tasks.put("task-001", _with_id(task, "task-001"))

    logger.info("Sample data loaded: %s", store.counts())
