"""
Enterprise resource CRUD — employees, visitors, rooms, bookings, assets,
leaves, attendance.

Every resource gets the same five routes over its own repository. All of
them require an authenticated user; none of them check the role.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from liveboard.api.deps import get_token_claims
from liveboard.core.exceptions import NotFoundError
from liveboard.db.store import Record, Store, get_store, new_id, now_iso
from liveboard.schemas.common import MessageResponse
from liveboard.schemas.enterprise import (AssetCreate, AttendanceCreate,
                                          BookingCreate, EmployeeCreate,
                                          EnterpriseUpdate, LeaveCreate,
                                          RoomCreate, VisitorCreate)
from liveboard.schemas.token import TokenClaims

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnterpriseResource:
    name: str  # plural; URL segment and repository key
    label: str
    create_schema: type[BaseModel]
    defaults: Callable[[], dict[str, Any]] = field(default=dict)


RESOURCES = (
    EnterpriseResource("employees", "Employee", EmployeeCreate, lambda: {"status": "active"}),
    EnterpriseResource(
        "visitors",
        "Visitor",
        VisitorCreate,
        lambda: {"status": "checked-in", "checkIn": now_iso()},
    ),
    EnterpriseResource("rooms", "Room", RoomCreate, lambda: {"status": "available"}),
    EnterpriseResource("bookings", "Booking", BookingCreate, lambda: {"status": "confirmed"}),
    EnterpriseResource("assets", "Asset", AssetCreate, lambda: {"status": "available"}),
    EnterpriseResource("leaves", "Leave", LeaveCreate, lambda: {"status": "pending"}),
    EnterpriseResource("attendance", "Attendance record", AttendanceCreate, lambda: {"status": "present"}),
)


def build_router(resource: EnterpriseResource) -> APIRouter:
    router = APIRouter(prefix=f"/{resource.name}", tags=[resource.name])
    create_schema = resource.create_schema

    def _get_or_404(store: Store, record_id: str) -> Record:
        record = store.resource(resource.name).get(record_id)
        if record is None:
            raise NotFoundError(f"{resource.label} not found")
        return record

    @router.get("")
    async def list_records(
        _claims: TokenClaims = Depends(get_token_claims),
        store: Store = Depends(get_store),
    ) -> list[Record]:
        return store.resource(resource.name).list()

    @router.get("/{record_id}")
    async def get_record(
        record_id: str,
        _claims: TokenClaims = Depends(get_token_claims),
        store: Store = Depends(get_store),
    ) -> Record:
        return _get_or_404(store, record_id)

    @router.post("", status_code=201)
    async def create_record(
        body: create_schema,  # type: ignore[valid-type]
        claims: TokenClaims = Depends(get_token_claims),
        store: Store = Depends(get_store),
    ) -> Record:
        record: Record = {
            **resource.defaults(),
            **body.model_dump(by_alias=True, exclude_none=True),
            "id": new_id(),
            "createdAt": now_iso(),
            "createdBy": claims.id,
        }
        store.resource(resource.name).put(record["id"], record)
        logger.info("%s %s created by %s", resource.label, record["id"], claims.username)
        return record

    @router.put("/{record_id}")
    async def update_record(
        record_id: str,
        body: EnterpriseUpdate,
        claims: TokenClaims = Depends(get_token_claims),
        store: Store = Depends(get_store),
    ) -> Record:
        record = _get_or_404(store, record_id)
        changes = body.model_dump(by_alias=True, exclude_unset=True)
        changes.pop("id", None)
        record.update(changes, updatedAt=now_iso(), updatedBy=claims.id)
        logger.info("%s %s updated by %s", resource.label, record_id, claims.username)
        return record

    @router.delete("/{record_id}", response_model=MessageResponse)
    async def delete_record(
        record_id: str,
        claims: TokenClaims = Depends(get_token_claims),
        store: Store = Depends(get_store),
    ) -> MessageResponse:
        _get_or_404(store, record_id)
        store.resource(resource.name).delete(record_id)
        logger.info("%s %s deleted by %s", resource.label, record_id, claims.username)
        return MessageResponse(message=f"{resource.label} deleted successfully")

    return router


routers = [build_router(resource) for resource in RESOURCES]
