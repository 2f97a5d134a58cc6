"""
Announcement endpoints — GET is public, writes require auth and broadcast.
"""

import logging

from fastapi import APIRouter, Depends

from liveboard.api.deps import get_token_claims
from liveboard.core.exceptions import NotFoundError
from liveboard.db.store import Record, Store, get_store, newest_first
from liveboard.realtime.broadcaster import Broadcaster
from liveboard.realtime.server import get_broadcaster
from liveboard.schemas.board import AnnouncementCreate, AnnouncementUpdate
from liveboard.schemas.common import MessageResponse
from liveboard.schemas.token import TokenClaims
from liveboard.services.announcements import (apply_announcement_update,
                                              build_announcement_record,
                                              is_active)

router = APIRouter(prefix="/announcements", tags=["announcements"])
logger = logging.getLogger(__name__)


def _get_or_404(store: Store, announcement_id: str) -> Record:
    announcement = store.announcements.get(announcement_id)
    if announcement is None:
        raise NotFoundError("Announcement not found")
    return announcement


@router.get("")
async def list_announcements(store: Store = Depends(get_store)) -> list[Record]:
    """Active announcements, newest first."""
    return newest_first([a for a in store.announcements if is_active(a)])


@router.post("", status_code=201)
async def create_announcement(
    body: AnnouncementCreate,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> Record:
    announcement = build_announcement_record(body, claims.id)
    store.announcements.put(announcement["id"], announcement)
    logger.info("Announcement %s created by %s", announcement["id"], claims.username)
    await broadcaster.publish("announcement", "created", announcement)
    return announcement


@router.put("/{announcement_id}")
async def update_announcement(
    announcement_id: str,
    body: AnnouncementUpdate,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> Record:
    announcement = apply_announcement_update(
        _get_or_404(store, announcement_id), body, claims.id
    )
    logger.info("Announcement %s updated by %s", announcement_id, claims.username)
    await broadcaster.publish("announcement", "updated", announcement)
    return announcement


@router.delete("/{announcement_id}", response_model=MessageResponse)
async def delete_announcement(
    announcement_id: str,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> MessageResponse:
    announcement = _get_or_404(store, announcement_id)
    store.announcements.delete(announcement_id)
    logger.info("Announcement %s deleted by %s", announcement_id, claims.username)
    await broadcaster.publish("announcement", "deleted", announcement)
    return MessageResponse(message="Announcement deleted successfully")
