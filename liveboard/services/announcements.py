"""Announcement records — ``content``/``message`` and ``active``/``isActive`` stay mirrored."""

from __future__ import annotations

from datetime import datetime, timezone

from liveboard.core.exceptions import ValidationError
from liveboard.db.store import Record, new_id, now_iso, sync_pairs
from liveboard.schemas.board import AnnouncementCreate, AnnouncementUpdate

MIRRORED_FIELDS = (
    ("message", "content"),
    ("active", "isActive"),
)


def _parse_ts(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def mirror_announcement_fields(record: Record, previous: Record | None = None) -> Record:
    # On conflict: the side edited since *previous*, else message / active
    return sync_pairs(record, MIRRORED_FIELDS, previous)


def is_active(record: Record) -> bool:
    value = record.get("active")
    if value is None:
        value = record.get("isActive")
    return bool(value)


def is_live(record: Record, now: datetime | None = None) -> bool:
    """Active and not past its expiry."""
    if not is_active(record):
        return False
    expires_at = _parse_ts(record.get("expiresAt"))
    return expires_at is None or expires_at > (now or datetime.now(timezone.utc))


def build_announcement_record(data: AnnouncementCreate, created_by: str) -> Record:
    text = data.body_text
    if not text:
        raise ValidationError("Message or content is required")
    active = data.active if data.active is not None else True
    return {
        "id": new_id(),
        "title": data.title or "Announcement",
        "content": text,
        "message": text,
        "priority": data.priority,
        "expiresAt": data.expires_at.isoformat() if data.expires_at else None,
        "createdBy": created_by,
        "createdAt": now_iso(),
        "isActive": active,
        "active": active,
    }


def apply_announcement_update(
    record: Record, changes: AnnouncementUpdate, updated_by: str
) -> Record:
    fields = changes.model_dump(exclude_unset=True)
    if "title" in fields:
        record["title"] = fields["title"]
    # ``message`` is applied after ``content`` so it wins when both are sent
    for key in ("content", "message"):
        if key in fields:
            record["content"] = record["message"] = fields[key]
    if "priority" in fields:
        record["priority"] = fields["priority"]
    if "expires_at" in fields:
        expires_at = fields["expires_at"]
        record["expiresAt"] = expires_at.isoformat() if expires_at else None
    for key in ("is_active", "active"):
        if key in fields:
            record["active"] = record["isActive"] = fields[key]
    record["updatedAt"] = now_iso()
    record["updatedBy"] = updated_by
    return record
