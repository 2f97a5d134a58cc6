"""Pydantic schemas for the enterprise resources (minimal validation)."""

from __future__ import annotations

from pydantic import ConfigDict

from liveboard.schemas.common import CamelModel


class _EnterpriseModel(CamelModel):
    # Unknown keys are kept on the record as-is.
    model_config = ConfigDict(extra="allow")


class EmployeeCreate(_EnterpriseModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    department: str | None = None
    position: str | None = None


class VisitorCreate(_EnterpriseModel):
    name: str | None = None
    company: str | None = None
    email: str | None = None
    phone: str | None = None
    purpose: str | None = None
    host_employee: str | None = None


class RoomCreate(_EnterpriseModel):
    name: str | None = None
    capacity: int | None = None
    location: str | None = None
    amenities: list[str] | None = None


class BookingCreate(_EnterpriseModel):
    room_id: str | None = None
    title: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    attendees: list[str] | int | None = None


class AssetCreate(_EnterpriseModel):
    name: str | None = None
    category: str | None = None
    serial_number: str | None = None
    location: str | None = None
    status: str | None = None


class LeaveCreate(_EnterpriseModel):
    employee_id: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    type: str | None = None
    reason: str | None = None


class AttendanceCreate(_EnterpriseModel):
    employee_id: str | None = None
    date: str | None = None
    check_in: str | None = None
    check_out: str | None = None
    status: str | None = None


class EnterpriseUpdate(_EnterpriseModel):
    """Free-form patch merged onto the stored record."""
