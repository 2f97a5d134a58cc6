"""
Task endpoints — all require authentication; writes broadcast ``task_update``.
"""

import logging

from fastapi import APIRouter, Depends

from liveboard.api.deps import get_token_claims
from liveboard.core.exceptions import NotFoundError
from liveboard.db.store import Record, Store, get_store, newest_first
from liveboard.realtime.broadcaster import Broadcaster
from liveboard.realtime.server import get_broadcaster
from liveboard.schemas.board import TaskCreate, TaskUpdate
from liveboard.schemas.common import MessageResponse
from liveboard.schemas.token import TokenClaims
from liveboard.services.tasks import apply_task_update, build_task_record

router = APIRouter(prefix="/tasks", tags=["tasks"])
logger = logging.getLogger(__name__)


def _get_or_404(store: Store, task_id: str) -> Record:
    task = store.tasks.get(task_id)
    if task is None:
        raise NotFoundError("Task not found")
    return task


@router.get("")
async def list_tasks(
    _claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> list[Record]:
    return newest_first(store.tasks.list())


@router.get("/{task_id}")
async def get_task(
    task_id: str,
    _claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> Record:
    return _get_or_404(store, task_id)


@router.post("", status_code=201)
async def create_task(
    body: TaskCreate,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> Record:
    task = build_task_record(body, claims.id)
    store.tasks.put(task["id"], task)
    logger.info("Task %s created by %s", task["id"], claims.username)
    await broadcaster.publish("task", "created", task)
    return task


@router.put("/{task_id}")
async def update_task(
    task_id: str,
    body: TaskUpdate,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> Record:
    task = apply_task_update(_get_or_404(store, task_id), body, claims.id)
    logger.info("Task %s updated by %s", task_id, claims.username)
    await broadcaster.publish("task", "updated", task)
    return task


@router.delete("/{task_id}", response_model=MessageResponse)
async def delete_task(
    task_id: str,
    claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
    broadcaster: Broadcaster = Depends(get_broadcaster),
) -> MessageResponse:
    task = _get_or_404(store, task_id)
    store.tasks.delete(task_id)
    logger.info("Task %s deleted by %s", task_id, claims.username)
    await broadcaster.publish("task", "deleted", task)
    return MessageResponse(message="Task deleted successfully")
