import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from storefront.config import Settings
from storefront.database import Database, get_database
from storefront.infrastructure.common.schemas import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def get_app_settings(request: Request) -> Settings:
    """Get the settings the app was created with."""
    settings: Settings = request.app.state.settings
    return settings


@router.get("/health")
async def health(
    database: Annotated[Database, Depends(get_database)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    """
    Report liveness and whether the database answers.

    Always returns 200 while the process is up; the db field says whether a
    trivial query succeeded within the health check timeout.
    """
    db_ok = await run_in_threadpool(database.ping, settings.HEALTH_CHECK_TIMEOUT_MS)
    if not db_ok:
        logger.warning("Health check: database unreachable")
    return HealthResponse(status="ok", db="ok" if db_ok else "error")
