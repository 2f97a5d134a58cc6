"""
LiveBoard — Application entry point.

This is the **only** file that assembles the app. The FastAPI app serves
the REST API under ``/api``; ``asgi_app`` wraps it with the Socket.IO
server so both share one port.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import socketio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from liveboard.api.api import api_router
from liveboard.api.endpoints.auth import limiter
from liveboard.core.config import settings
from liveboard.core.exceptions import register_exception_handlers
from liveboard.db.store import store
from liveboard.realtime.server import sio
from liveboard.services.auth import AuthService
from liveboard.services.seed import seed_sample_data

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
)
logger = logging.getLogger(__name__)


# ── Lifespan ────────────────────────────────────────────────────────
@asynccontextmanager
async def lifespan(_app: FastAPI):
    admin = AuthService(store).ensure_admin()
    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(store, admin.id)

    logger.info("LiveBoard v%s started on port %d", settings.VERSION, settings.PORT)
    yield
    store.clear()
    logger.info("Shutdown complete")


# ── App factory ─────────────────────────────────────────────────────
def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.PROJECT_NAME,
        description="Real-time digital display board",
        version=settings.VERSION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # CORS
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Login rate limiting
    application.state.limiter = limiter

    # Global exception handlers (prevent stack-trace leakage)
    register_exception_handlers(application)

    application.include_router(api_router, prefix=settings.API_PREFIX)

    return application


app = create_app()

# Socket.IO on /socket.io, everything else falls through to FastAPI.
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)


def run() -> None:
    uvicorn.run("liveboard.main:asgi_app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
