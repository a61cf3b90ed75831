from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Supply Chain API"
    ENVIRONMENT: str = "local"
    API_PREFIX: str = "/api"

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./supply_chain.db"
    SEED_DEMO_DATA: bool = False

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_SQL: bool = False

    # ==============================
    # Search
    # ==============================
    SEARCH_MIN_QUERY_LENGTH: int = 3
    SEARCH_DEFAULT_LIMIT: int = 10
    SEARCH_MAX_LIMIT: int = 20


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
