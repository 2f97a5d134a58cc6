"""
Socket.IO server (ASGI) shared by the REST layer and the socket namespace.
"""

from __future__ import annotations

import socketio

from liveboard.core.config import settings
from liveboard.db.store import store
from liveboard.realtime.broadcaster import Broadcaster
from liveboard.realtime.namespace import LiveBoardNamespace

# engineio only treats the bare string "*" as a wildcard
_cors = "*" if "*" in settings.CORS_ORIGINS else settings.CORS_ORIGINS

sio = socketio.AsyncServer(
    async_mode="asgi",
    cors_allowed_origins=_cors,
)

broadcaster = Broadcaster(sio)
namespace = LiveBoardNamespace(store, broadcaster)
sio.register_namespace(namespace)


def get_broadcaster() -> Broadcaster:
    """FastAPI dependency — the process-wide broadcaster."""
    return broadcaster
