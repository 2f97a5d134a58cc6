"""
Schedule endpoints.

- GET is public (display screens poll it without logging in).
- POST / PUT / DELETE require authentication and broadcast ``schedule_update``.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from liveboard.api.deps import get_token_claims
from liveboard.core.exceptions import NotFoundError
from liveboard.db.store import Record, Store, get_store
from liveboard.realtime.broadcaster import Broadcaster
from liveboard.realtime.server import get_broadcaster
from liveboard.schemas.board import ScheduleUpdate
from liveboard.schemas.common import MessageResponse
from liveboard.schemas.token import TokenClaims
from liveboard.services.schedules import (apply_schedule_update,
                                          build_schedule_record,
                                          filter_schedules,
                                          parse_schedule_input)

router = APIRouter(prefix="/schedule", tags=["schedule"])
logger = logging.getLogger(__name__)


def _get_or_404(store: Store, schedule_id: str) -> Record:
    schedule = store.schedules.get(schedule_id)
    if schedule is None:
        raise NotFoundError("Schedule not found")
    return schedule


@router.get("")
async def list_schedules(
    date: str | None = None,
    room: str | None = None,
    faculty: str | None = None,
    search: str | None = None,
    store: Store = Depends(get_store),
) -> list[Record]:
    """Active entries, optionally filtered, ordered by start time."""
    return filter_schedules(
        store.schedules.list(), date=date, room=room, faculty=faculty, search=search
    )


@router.post("", status_code=201)
async def create_schedule(
    body: dict[str, Any] = Body(...),
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> Record:
    """Create an entry from either the academic or the general field shape."""
    data = parse_schedule_input(body)
    schedule = build_schedule_record(data, claims.id)
    store.schedules.put(schedule["id"], schedule)
    logger.info("Schedule %s created by %s", schedule["id"], claims.username)
    await broadcaster.publish("schedule", "created", schedule)
    return schedule


@router.put("/{schedule_id}")
async def update_schedule(
    schedule_id: str,
    body: ScheduleUpdate,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> Record:
    schedule = apply_schedule_update(_get_or_404(store, schedule_id), body, claims.id)
    logger.info("Schedule %s updated by %s", schedule_id, claims.username)
    await broadcaster.publish("schedule", "updated", schedule)
    return schedule


@router.delete("/{schedule_id}", response_model=MessageResponse)
async def delete_schedule(
    schedule_id: str,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> MessageResponse:
    schedule = _get_or_404(store, schedule_id)
    store.schedules.delete(schedule_id)
    logger.info("Schedule %s deleted by %s", schedule_id, claims.username)
    await broadcaster.publish("schedule", "deleted", schedule)
    return MessageResponse(message="Schedule deleted successfully")
