import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db, get_template_storage
from app.core.config import get_settings
from app.schemas.health import HealthResponse, StatusResponse
from app.storage.base import FileStorage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: AsyncSession = Depends(get_db),
    template_storage: FileStorage = Depends(get_template_storage),
) -> HealthResponse:
    settings = get_settings()
    try:
        await db.execute(text("SELECT 1"))
        db_status = "connected"
    except Exception as e:
        logger.warning("Database health check failed: %s", e)
        db_status = "disconnected"

    if await template_storage.exists(settings.cv_template_name):
        template_status = "installed"
    else:
        logger.warning("CV template '%s' is missing", settings.cv_template_name)
        template_status = "missing"

    healthy = db_status == "connected" and template_status == "installed"
    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        database=db_status,
        template=template_status,
        locale=settings.cv_locale,
        version=settings.app_version,
    )


@router.get("/status", response_model=StatusResponse)
async def liveness() -> StatusResponse:
    return StatusResponse(status="ok")
