"""Health check endpoint."""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.database import Database, get_database
from app.schemas.common import APIResponse, HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health", response_model=APIResponse[HealthStatus])
async def health(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
):
    """
    Liveness plus a store round-trip.

    Always answers 200; an unreachable database only shows up as
    "disconnected" in the payload.
    """
    connected = await database.ping()
    return APIResponse(
        message="Service is healthy",
        data=HealthStatus(
            timestamp=datetime.now(timezone.utc),
            version=settings.APP_VERSION,
            database="connected" if connected else "disconnected",
        ),
    )
