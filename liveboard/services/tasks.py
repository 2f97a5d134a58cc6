"""Task records."""

from __future__ import annotations

from liveboard.db.store import Record, new_id, now_iso
from liveboard.schemas.board import TaskCreate, TaskUpdate

_CAMEL = {"due_date": "dueDate", "assigned_to": "assignedTo"}


def build_task_record(data: TaskCreate, created_by: str) -> Record:
    return {
        "id": new_id(),
        "title": data.title,
        "description": data.description,
        "priority": data.priority,
        "status": data.status,
        "dueDate": data.due_date.isoformat() if data.due_date else None,
        "assignedTo": data.assigned_to or created_by,
        "createdBy": created_by,
        "createdAt": now_iso(),
    }


def apply_task_update(record: Record, changes: TaskUpdate, updated_by: str) -> Record:
    for field, value in changes.model_dump(exclude_unset=True).items():
        if field == "due_date" and value is not None:
            value = value.isoformat()
        record[_CAMEL.get(field, field)] = value
    record["updatedAt"] = now_iso()
    record["updatedBy"] = updated_by
    return record
