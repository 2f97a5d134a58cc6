"""
Fan-out of resource mutations to connected Socket.IO clients.

One event name per resource (``schedule_update``, ``announcement_update``,
``task_update``) whether the change came in over REST or over a socket.
"""

from __future__ import annotations

import logging
from typing import Any

import socketio
from fastapi.encoders import jsonable_encoder

logger = logging.getLogger(__name__)

BROADCAST_RESOURCES = ("schedule", "announcement", "task")


class Broadcaster:
    def __init__(self, server: socketio.AsyncServer) -> None:
        self.server = server

    @staticmethod
    def event_name(resource: str) -> str:
        return f"{resource}_update"

    async def publish(
        self,
        resource: str,
        action: str,
        record: dict[str, Any],
        *,
        skip_sid: str | None = None,
    ) -> None:
        """Emit ``{resource}_update`` to every client except *skip_sid*.

        ``created`` / ``updated`` carry the whole record under the resource
        name; ``deleted`` carries ``{resource}Id``. Schedule events also carry
        the entry's ``date`` so display pages can ignore other days.
        Fire-and-forget: nothing is acknowledged or replayed.
        """
        if resource not in BROADCAST_RESOURCES:
            raise ValueError(f"Unknown broadcast resource: {resource}")

        payload: dict[str, Any] = {"action": action}
        if action == "deleted":
            payload[f"{resource}Id"] = record.get("id")
        else:
            payload[resource] = record
        if resource == "schedule":
            payload["date"] = record.get("date")

        await self.server.emit(
            self.event_name(resource), jsonable_encoder(payload), skip_sid=skip_sid
        )
        logger.debug("Broadcast %s %s (skip_sid=%s)", resource, action, skip_sid)
