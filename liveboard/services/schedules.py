"""
Schedule entries — input parsing, field mirroring and filtering.

A schedule can be written in the academic shape (``start_time``,
``room_number``, ``subject`` ...) or the general shape (``title``,
``startTime`` ...). Whatever shape came in, the stored record carries
both spellings of the shared time fields so any reader can use either.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from liveboard.core.exceptions import ValidationError
from liveboard.db.store import Record, new_id, now_iso, sync_pairs, today_iso
from liveboard.schemas.board import (AcademicScheduleInput,
                                     GeneralScheduleInput, ScheduleInput,
                                     ScheduleUpdate)

# (snake_case, camelCase) pairs kept in sync on every schedule record
MIRRORED_FIELDS = (
    ("start_time", "startTime"),
    ("end_time", "endTime"),
    ("created_at", "createdAt"),
    ("updated_at", "updatedAt"),
    ("is_active", "isActive"),
)


def _describe(exc: PydanticValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()
    )


def parse_schedule_input(body: dict[str, Any]) -> ScheduleInput:
    """Resolve *body* to one of the two schedule shapes.

    Academic wins when both would fit. When neither fits the error lists
    what each shape was missing.
    """
    try:
        return AcademicScheduleInput.model_validate(body)
    except PydanticValidationError as academic_exc:
        academic_reason = _describe(academic_exc)
    try:
        return GeneralScheduleInput.model_validate(body)
    except PydanticValidationError as general_exc:
        general_reason = _describe(general_exc)

    raise ValidationError(
        "Validation failed",
        errors=[
            {
                "field": "schedule",
                "message": (
                    "Required fields missing. Provide either (start_time, end_time, "
                    "room_number, subject, faculty_name) or (title, startTime, endTime)"
                ),
            },
            {"field": "academic", "message": academic_reason},
            {"field": "general", "message": general_reason},
        ],
    )


def mirror_schedule_fields(record: Record, previous: Record | None = None) -> Record:
    """Bring both spellings of each mirrored field to one value.

    On conflict the spelling edited since *previous* wins, else snake_case.
    """
    return sync_pairs(record, MIRRORED_FIELDS, previous)


def build_schedule_record(data: ScheduleInput, created_by: str) -> Record:
    now = now_iso()
    record: Record = {
        "id": new_id(),
        "date": data.date or today_iso(),
        "start_time": data.start_time,
        "end_time": data.end_time,
        "type": data.type,
        "createdBy": created_by,
        "created_at": now,
        "updated_at": now,
        "isActive": True,
    }
    if isinstance(data, AcademicScheduleInput):
        record.update(
            room_number=data.room_number,
            subject=data.subject,
            faculty_name=data.faculty_name,
            tags=list(data.tags),
        )
    else:
        record.update(
            title=data.title,
            content=data.content,
            priority=data.priority,
        )
        if data.tags is not None:
            record["tags"] = list(data.tags)
    return mirror_schedule_fields(record)


def _fits_a_shape(record: Record) -> bool:
    try:
        parse_schedule_input(record)
    except ValidationError:
        return False
    return True


def apply_schedule_update(record: Record, changes: ScheduleUpdate, updated_by: str) -> Record:
    """Merge *changes* into *record* in place.

    The merge is checked first: a record that fit one of the two shapes must
    still fit one afterwards, so explicit nulls cannot strip required fields.
    Nothing is written when the check fails.
    """
    fields = changes.model_dump(exclude_unset=True)
    if "is_active" in fields and fields["is_active"] is None:
        raise ValidationError(
            "Validation failed",
            errors=[{"field": "isActive", "message": "must be true or false"}],
        )

    mirrored = dict(MIRRORED_FIELDS)
    candidate = dict(record)
    for field, value in fields.items():
        candidate[field] = value
        if field in mirrored:
            candidate[mirrored[field]] = value
    if _fits_a_shape(record):
        parse_schedule_input(candidate)

    record.update(candidate)
    now = now_iso()
    record["updated_at"] = now
    record["updatedAt"] = now
    record["updatedBy"] = updated_by
    return record


def _contains(value: Any, needle: str) -> bool:
    return isinstance(value, str) and needle in value.lower()


def filter_schedules(
    records: list[Record],
    date: str | None = None,
    room: str | None = None,
    faculty: str | None = None,
    search: str | None = None,
) -> list[Record]:
    """Active schedules matching every given filter, ordered by start time."""
    result = [r for r in records if r.get("isActive", r.get("is_active", True))]
    if date:
        result = [r for r in result if r.get("date") == date]
    if room:
        needle = room.lower()
        result = [r for r in result if _contains(r.get("room_number"), needle)]
    if faculty:
        needle = faculty.lower()
        result = [r for r in result if _contains(r.get("faculty_name"), needle)]
    if search:
        needle = search.lower()
        result = [
            r
            for r in result
            if any(
                _contains(r.get(key), needle)
                for key in ("subject", "faculty_name", "room_number", "title")
            )
        ]
    result.sort(key=lambda r: str(r.get("start_time") or r.get("startTime") or ""))
    return result
