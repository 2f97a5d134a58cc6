"""
In-memory repositories — the process-wide data store.

Every collection sits behind the same small ``Repository`` interface
(``get`` / ``list`` / ``put`` / ``delete``) so handlers never touch the
underlying dicts. State lives only as long as the process does.
"""

from __future__ import annotations

import copy
import logging
import uuid
from collections.abc import Iterator
from datetime import datetime, timezone
from typing import Any, Generic, TypeVar

from liveboard.models.user import User

logger = logging.getLogger(__name__)

T = TypeVar("T")

Record = dict[str, Any]


def new_id() -> str:
    return uuid.uuid4().hex


def now_iso() -> str:
    """UTC timestamp as stored on dict records."""
    return datetime.now(timezone.utc).isoformat()


def today_iso() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def newest_first(records: list[Record]) -> list[Record]:
    return sorted(records, key=lambda r: str(r.get("createdAt") or ""), reverse=True)


def sync_pairs(
    record: Record, pairs: tuple[tuple[str, str], ...], previous: Record | None = None
) -> Record:
    """Make both spellings of every pair on *record* hold the same value.

    A spelling missing on one side is filled from the other. When both are
    set and disagree, the one that differs from *previous* (the stored
    version) wins; with no previous version, or when both changed, the
    first spelling of the pair wins.
    """
    previous = previous or {}
    for first, second in pairs:
        a, b = record.get(first), record.get(second)
        if a is None and b is None:
            continue
        if a is None:
            value = b
        elif b is None or a == b:
            value = a
        elif b != previous.get(second) and a == previous.get(first):
            value = b
        else:
            value = a
        record[first] = record[second] = value
    return record


ENTERPRISE_RESOURCES = (
    "employees",
    "visitors",
    "rooms",
    "bookings",
    "assets",
    "leaves",
    "attendance",
)

DEFAULT_SETTINGS: dict[str, list[str]] = {
    "rooms": [
        "Room 101", "Room 102", "Room 103", "Room 104", "Room 105",
        "Room 201", "Room 202", "Room 203", "Room 204", "Room 205",
        "Lab 1", "Lab 2", "Lab 3", "Conference Hall", "Auditorium",
        "Seminar Hall", "Board Room", "Training Room",
    ],
    "subjects": [
        "Computer Science Fundamentals", "Data Structures & Algorithms",
        "Database Management Systems", "Operating Systems", "Computer Networks",
        "Software Engineering", "Web Development", "Mobile App Development",
        "Artificial Intelligence", "Machine Learning", "Cloud Computing",
        "Cybersecurity", "Digital Marketing", "Business Analytics",
        "Project Management", "Team Meeting", "Workshop", "Seminar",
    ],
    "faculties": [
        "Dr. Sarah Johnson", "Prof. Michael Chen", "Dr. Emily Rodriguez",
        "Prof. David Kumar", "Dr. Lisa Anderson", "Prof. James Wilson",
        "Dr. Maria Garcia", "Prof. Robert Taylor", "Dr. Jennifer Lee",
        "Prof. William Brown", "Dr. Amanda White", "Prof. Christopher Davis",
    ],
    "departments": [
        "Computer Science", "Information Technology", "Electronics",
        "Mechanical", "Civil", "Electrical", "Human Resources",
        "Finance", "Marketing", "Operations", "Administration",
    ],
    "positions": [
        "Professor", "Associate Professor", "Assistant Professor",
        "Lecturer", "Senior Lecturer", "Lab Assistant", "Manager",
        "Senior Manager", "Team Lead", "Developer", "Senior Developer",
        "Analyst", "Consultant", "Administrator", "Coordinator",
    ],
    "locations": [
        "Floor 1", "Floor 2", "Floor 3", "Floor 4",
        "Ground Floor", "Basement", "East Wing",
        "West Wing", "North Block", "South Block",
    ],
    "amenities": [
        "Projector", "Whiteboard", "TV Screen", "Video Conference",
        "Audio System", "WiFi", "Air Conditioning", "Podium",
        "Microphone", "Smart Board", "Recording Equipment",
    ],
    "companies": [
        "ABC Corporation", "XYZ Technologies", "Global Solutions Inc.",
        "Tech Innovators Ltd.", "Digital Dynamics", "Future Systems",
        "Smart Solutions", "Enterprise Partners", "Innovation Labs",
        "Consulting Group", "Business Solutions", "Other",
    ],
    "purposes": [
        "Business Meeting", "Interview", "Consultation",
        "Training Session", "Workshop", "Conference",
        "Product Demo", "Client Visit", "Vendor Meeting",
        "Recruitment", "Audit", "Other",
    ],
}


class Repository(Generic[T]):
    """Keyed collection of one entity type. Writes replace; last write wins."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: dict[str, T] = {}

    def get(self, key: str) -> T | None:
        return self._items.get(key)

    def list(self) -> list[T]:
        return list(self._items.values())

    def put(self, key: str, value: T) -> T:
        self._items[key] = value
        return value

    def delete(self, key: str) -> T | None:
        return self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))


class Store:
    """All repositories plus the dropdown-settings catalogue."""

    def __init__(self) -> None:
        self.users: Repository[User] = Repository("users")
        self.schedules: Repository[Record] = Repository("schedules")
        self.announcements: Repository[Record] = Repository("announcements")
        self.tasks: Repository[Record] = Repository("tasks")
        self.enterprise: dict[str, Repository[Record]] = {
            name: Repository(name) for name in ENTERPRISE_RESOURCES
        }
        self.settings: dict[str, list[str]] = copy.deepcopy(DEFAULT_SETTINGS)

    def resource(self, name: str) -> Repository[Record]:
        """Look up a dict-backed repository by its plural name."""
        if name in ("schedules", "announcements", "tasks"):
            return getattr(self, name)
        return self.enterprise[name]

    def counts(self) -> dict[str, int]:
        return {
            "users": len(self.users),
            "schedules": len(self.schedules),
            "announcements": len(self.announcements),
            "tasks": len(self.tasks),
        }

    def clear(self) -> None:
        """Drop every record and restore the default settings."""
        self.users.clear()
        self.schedules.clear()
        self.announcements.clear()
        self.tasks.clear()
        for repo in self.enterprise.values():
            repo.clear()
        self.settings = copy.deepcopy(DEFAULT_SETTINGS)
        logger.debug("Store cleared")


store = Store()


def get_store() -> Store:
    """FastAPI dependency — the process-wide store."""
    return store
