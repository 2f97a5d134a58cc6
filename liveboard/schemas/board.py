"""Pydantic schemas for Schedules / Announcements / Tasks."""

from __future__ import annotations

from datetime import datetime
from typing import Union

from pydantic import Field, field_validator

from liveboard.schemas.common import CamelModel

VALID_TASK_STATUSES = ("pending", "in-progress", "completed", "cancelled")


# ── Schedule ────────────────────────────────────────────────────────
# Two incompatible input shapes are accepted; each is its own model so a
# failed parse can say which shape was attempted and why it failed.
class AcademicScheduleInput(CamelModel):
    start_time: str = Field(min_length=1)
    end_time: str = Field(min_length=1)
    room_number: str = Field(min_length=1)
    subject: str = Field(min_length=1)
    faculty_name: str = Field(min_length=1)
    date: str | None = None
    tags: list[str] = Field(default_factory=list)
    type: str = "class"


class GeneralScheduleInput(CamelModel):
    title: str = Field(min_length=1)
    start_time: str = Field(min_length=1)
    end_time: str = Field(min_length=1)
    content: str = ""
    date: str | None = None
    tags: list[str] | None = None
    type: str = "schedule"
    priority: str = "medium"


ScheduleInput = Union[AcademicScheduleInput, GeneralScheduleInput]


class ScheduleUpdate(CamelModel):
    title: str | None = None
    content: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    date: str | None = None
    room_number: str | None = None
    subject: str | None = None
    faculty_name: str | None = None
    type: str | None = None
    priority: str | None = None
    is_active: bool | None = None
    tags: list[str] | None = None


# ── Announcement ────────────────────────────────────────────────────
class AnnouncementCreate(CamelModel):
    title: str | None = None
    content: str | None = None
    message: str | None = None
    priority: str = "medium"
    expires_at: datetime | None = None
    active: bool | None = None

    @property
    def body_text(self) -> str | None:
        return self.message or self.content


class AnnouncementUpdate(CamelModel):
    title: str | None = None
    content: str | None = None
    message: str | None = None
    priority: str | None = None
    expires_at: datetime | None = None
    is_active: bool | None = None
    active: bool | None = None


# ── Task ────────────────────────────────────────────────────────────
class TaskCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = ""
    priority: str = "medium"
    status: str = "pending"
    due_date: datetime | None = None
    assigned_to: str | None = None

    @field_validator("status")
    @classmethod
    def _validate_status(cls, v: str) -> str:
        if v not in VALID_TASK_STATUSES:
            raise ValueError(f"Status must be one of: {', '.join(VALID_TASK_STATUSES)}")
        return v


class TaskUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    priority: str | None = None
    status: str | None = None
    due_date: datetime | None = None
    assigned_to: str | None = None

    @field_validator("status")
    @classmethod
    def _validate_status(cls, v: str | None) -> str | None:
        if v is not None and v not in VALID_TASK_STATUSES:
            raise ValueError(f"Status must be one of: {', '.join(VALID_TASK_STATUSES)}")
        return v
