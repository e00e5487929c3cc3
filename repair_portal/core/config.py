# repair_portal/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    # In-memory by default: state lives only as long as the process
    DATABASE_URL: str = Field(default="sqlite://")
    APP_NAME: str = "Tenant Repair Portal API"
    APP_DESC: str = "Repair request intake and worker assignment"
    APP_VERSION: str = "1.0.0"

    # The only origin allowed through CORS
    FRONTEND_ORIGIN: str = "http://localhost:8501"

    API_HOST: str = "0.0.0.0"
    API_PORT: int = 4000

    # Where the UI finds the API
    API_BASE_URL: str = "http://localhost:4000"

    LOG_LEVEL: str = "INFO"

    # Pydantic v2 style config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
