"""Application configuration."""
from urllib.parse import quote_plus
from fastapi import Request
from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings."""

    # Database
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "password"
    DB_NAME: str = "cctv_system"
    DATABASE_URL: Optional[str] = None  # Overrides the DB_* fields when set
    DB_AUTO_CREATE: bool = False

    # Connection pool
    DB_MAX_OPEN_CONNS: int = 25
    DB_MAX_IDLE_CONNS: int = 5
    DB_CONN_MAX_LIFETIME_SECONDS: int = 300

    # API
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 5009
    API_PREFIX: str = "/api/v1"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Uploads
    UPLOAD_DIR: str = "./uploads"
    MAX_UPLOAD_SIZE: int = 100 * 1024 * 1024

    class Config:
        env_file = ".env"
        case_sensitive = True

    @property
    def database_url(self) -> str:
        """Async SQLAlchemy URL for the store."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DB_USER}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


settings = Settings()


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the running app was built with."""
    return request.app.state.settings
