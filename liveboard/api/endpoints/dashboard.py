"""
Dashboard stats and the public health check.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends

from liveboard.api.deps import get_token_claims
from liveboard.db.store import Store, get_store
from liveboard.schemas.common import HealthResponse
from liveboard.schemas.token import TokenClaims
from liveboard.services.dashboard import dashboard_snapshot

router = APIRouter(tags=["dashboard"])
logger = logging.getLogger(__name__)

_STARTED_AT = time.monotonic()


# ── Dashboard ───────────────────────────────────────────────────────
@router.get("/dashboard/stats")
async def dashboard_stats(
    _claims: TokenClaims = Depends(get_token_claims),
    store: Store = Depends(get_store),
) -> dict[str, Any]:
    """Totals plus recent items. Same payload as the socket ``dashboard_data``."""
    return dashboard_snapshot(store)


# ── Health ──────────────────────────────────────────────────────────
@router.get("/health", response_model=HealthResponse)
async def health(store: Store = Depends(get_store)) -> HealthResponse:
    """Public liveness probe."""
    return HealthResponse(
        timestamp=datetime.now(timezone.utc).isoformat(),
        uptime=round(time.monotonic() - _STARTED_AT, 3),
        counts=store.counts(),
    )
