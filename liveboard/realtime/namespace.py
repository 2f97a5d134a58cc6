"""
Socket.IO namespace — socket authentication, mutation intake and
on-demand snapshots.

Connections are accepted anonymously. A client becomes authenticated by
emitting ``authenticate`` with its bearer token; until then every mutation
and ``request_data`` event it sends is dropped. Failed authentication does
not close the connection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import socketio
from fastapi.encoders import jsonable_encoder

from liveboard.core.exceptions import AuthenticationError
from liveboard.core.security import decode_access_token
from liveboard.db.store import Record, Repository, Store, new_id
from liveboard.realtime.broadcaster import Broadcaster
from liveboard.services.announcements import (is_active,
                                              mirror_announcement_fields)
from liveboard.services.dashboard import dashboard_snapshot
from liveboard.services.schedules import mirror_schedule_fields

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SocketIdentity:
    user_id: str
    user_role: str
    username: str


def _extract_token(data: Any) -> str | None:
    if isinstance(data, str):
        token = data
    elif isinstance(data, dict):
        token = data.get("token")
    else:
        return None
    if isinstance(token, str) and token.startswith("Bearer "):
        token = token[len("Bearer "):]
    return token or None


class LiveBoardNamespace(socketio.AsyncNamespace):
    def __init__(self, store: Store, broadcaster: Broadcaster, namespace: str = "/") -> None:
        super().__init__(namespace)
        self.store = store
        self.broadcaster = broadcaster
        self._identities: dict[str, SocketIdentity] = {}

    def _repository(self, resource: str) -> Repository[Record]:
        return self.store.resource(f"{resource}s")

    def identity(self, sid: str) -> SocketIdentity | None:
        return self._identities.get(sid)

    # ── Lifecycle ───────────────────────────────────────────────────
    async def on_connect(self, sid: str, environ: dict[str, Any], auth: Any = None) -> None:
        logger.info("Client connected: %s", sid)

    async def on_disconnect(self, sid: str, *args: Any) -> None:
        self._identities.pop(sid, None)
        logger.info("Client disconnected: %s", sid)

    async def on_authenticate(self, sid: str, data: Any = None) -> None:
        token = _extract_token(data)
        try:
            if token is None:
                raise AuthenticationError("Invalid token")
            claims = decode_access_token(token)
        except AuthenticationError:
            self._identities.pop(sid, None)
            await self.emit("authentication_error", {"error": "Invalid token"}, to=sid)
            logger.info("Socket %s failed authentication", sid)
            return

        self._identities[sid] = SocketIdentity(
            user_id=claims.id, user_role=claims.role, username=claims.username
        )
        await self.emit("authenticated", {"success": True}, to=sid)
        logger.info("Socket %s authenticated for user: %s", sid, claims.username)

    # ── Mutation intake ─────────────────────────────────────────────
    async def _upsert(self, sid: str, resource: str, action: str, payload: Any) -> None:
        if sid not in self._identities:
            logger.debug("Dropped %s_%s from unauthenticated socket %s", resource, action, sid)
            return
        if not isinstance(payload, dict):
            logger.warning("Dropped %s_%s from %s: payload is not an object", resource, action, sid)
            return

        record = dict(payload)
        if not record.get("id"):
            if action != "created":
                logger.warning("Dropped %s_%s from %s: missing id", resource, action, sid)
                return
            record["id"] = new_id()
        record["id"] = str(record["id"])

        repository = self._repository(resource)
        previous = repository.get(record["id"])
        if resource == "schedule":
            mirror_schedule_fields(record, previous)
        elif resource == "announcement":
            mirror_announcement_fields(record, previous)

        repository.put(record["id"], record)
        await self.broadcaster.publish(resource, action, record, skip_sid=sid)

    async def _remove(self, sid: str, resource: str, payload: Any) -> None:
        if sid not in self._identities:
            logger.debug("Dropped %s_deleted from unauthenticated socket %s", resource, sid)
            return
        record_id = payload.get("id") if isinstance(payload, dict) else payload
        if record_id is None:
            return

        removed = self._repository(resource).delete(str(record_id))
        if removed is None:
            logger.debug("%s %s already gone", resource, record_id)
            return
        await self.broadcaster.publish(resource, "deleted", removed, skip_sid=sid)

    async def on_schedule_created(self, sid: str, data: Any = None) -> None:
        await self._upsert(sid, "schedule", "created", data)

    async def on_schedule_updated(self, sid: str, data: Any = None) -> None:
        await self._upsert(sid, "schedule", "updated", data)

    async def on_schedule_deleted(self, sid: str, data: Any = None) -> None:
        await self._remove(sid, "schedule", data)

    async def on_announcement_created(self, sid: str, data: Any = None) -> None:
        await self._upsert(sid, "announcement", "created", data)

    async def on_announcement_updated(self, sid: str, data: Any = None) -> None:
        await self._upsert(sid, "announcement", "updated", data)

    async def on_announcement_deleted(self, sid: str, data: Any = None) -> None:
        await self._remove(sid, "announcement", data)

    async def on_task_created(self, sid: str, data: Any = None) -> None:
        await self._upsert(sid, "task", "created", data)

    async def on_task_updated(self, sid: str, data: Any = None) -> None:
        await self._upsert(sid, "task", "updated", data)

    async def on_task_deleted(self, sid: str, data: Any = None) -> None:
        await self._remove(sid, "task", data)

    # ── Snapshots ───────────────────────────────────────────────────
    async def on_request_data(self, sid: str, data_type: Any = None) -> None:
        """Send a full snapshot of one collection to the requesting socket only."""
        if sid not in self._identities:
            return

        if data_type == "schedules":
            event, payload = "schedules_data", self.store.schedules.list()
        elif data_type == "announcements":
            event = "announcements_data"
            payload = [a for a in self.store.announcements if is_active(a)]
        elif data_type == "tasks":
            event, payload = "tasks_data", self.store.tasks.list()
        elif data_type == "dashboard":
            event, payload = "dashboard_data", dashboard_snapshot(self.store)
        else:
            logger.debug("Unknown request_data type %r from %s", data_type, sid)
            return

        await self.emit(event, jsonable_encoder(payload), to=sid)
