"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import booking_hours, clips, courts, health
from app.core.config import Settings, settings as default_settings
from app.core.database import Database
from app.core.errors import register_error_handlers
from app.services.clip_storage import ensure_clips_dir

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # Startup
    logger.info("Starting Court Clip Backend")
    logger.info(f"Upload directory: {settings.UPLOAD_DIR}")

    try:
        ensure_clips_dir(settings.UPLOAD_DIR)
    except OSError as e:
        logger.warning(f"Could not create upload directory: {e}")

    if await database.ping():
        logger.info("Database connected successfully")
        if settings.DB_AUTO_CREATE:
            await database.create_all()
    else:
        logger.warning("Database unreachable at startup, serving anyway")

    yield

    # Shutdown
    logger.info("Shutting down Court Clip Backend")
    await database.dispose()


def create_app(settings: Optional[Settings] = None, database: Optional[Database] = None) -> FastAPI:
    """
    Build the application around an explicit settings object and store handle.

    Args:
        settings: Configuration, defaults to the environment-loaded settings
        database: Store handle, defaults to one built from settings

    Returns:
        Configured FastAPI app
    """
    settings = settings or default_settings
    database = database or Database.from_settings(settings)

    app = FastAPI(
        title="Court Clip Backend",
        description="Courts, booking hours and uploaded video clips",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # Include routers
    app.include_router(health.router, prefix=settings.API_PREFIX)
    app.include_router(courts.router, prefix=settings.API_PREFIX)
    app.include_router(booking_hours.router, prefix=settings.API_PREFIX)
    app.include_router(clips.router, prefix=settings.API_PREFIX)

    return app


app = create_app()


def run():
    """Serve the app with uvicorn on the configured host and port."""
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=default_settings.SERVER_HOST,
        port=default_settings.SERVER_PORT,
        reload=default_settings.DEBUG,
    )


if __name__ == "__main__":
    run()
