"""
Note Store: Health Check Route
==============================

What:  GET /health for monitoring and container liveness checks.
How:   Checks that the cache directory exists and is writable, and counts
       the notes in it.

    Status levels:
    - healthy:   cache directory usable (HTTP 200)
    - unhealthy: cache directory missing or read-only (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends, Response

from notestore import __version__
from notestore.dependencies import get_note_store
from notestore.schemas.note import HealthResponse
from notestore.services.note_store import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Cache directory unusable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    response: Response,
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    storage = await store.storage_status()
    note_count = 0
    if storage == "available":
        try:
            note_count = await store.count_notes()
        except OSError as e:
            storage = "unavailable"
            logger.warning("Health check: cannot scan %s: %s", store.root, e)

    overall = "healthy" if storage == "available" else "unhealthy"
    if overall == "unhealthy":
        response.status_code = 503

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage,
        note_count=note_count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
