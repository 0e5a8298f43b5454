"""Application settings loaded from environment variables."""
import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Settings read once from the environment (and an optional .env file)."""

    def __init__(self):
        # Database
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "")
        self.POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "")
        self.POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
        self.POSTGRES_DB: str = os.getenv("POSTGRES_DB", "tyre_service")
        self.POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
        self.POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "")
        self.DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", "10"))
        self.DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", "20"))

        # Photo uploads
        self.UPLOADS_ROOT: str = os.getenv("UPLOADS_ROOT", "wwwroot")
        self.MAX_UPLOAD_SIZE: int = int(os.getenv("MAX_UPLOAD_SIZE", str(10 * 1024 * 1024)))

        # Dashboard
        self.TOP_CLIENTS_LIMIT: int = int(os.getenv("TOP_CLIENTS_LIMIT", "3"))
        self.RECENT_ORDERS_LIMIT: int = int(os.getenv("RECENT_ORDERS_LIMIT", "5"))

        # Logging
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def database_url(self) -> str:
        """Explicit DATABASE_URL wins, then POSTGRES_* variables, then a local SQLite file."""
        if self.DATABASE_URL:
            return self.DATABASE_URL.replace("postgres://", "postgresql://", 1)
        if self.POSTGRES_HOST:
            return (
                f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_HOST}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        return "sqlite:///./tyre_service.db"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
