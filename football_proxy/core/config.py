# football_proxy/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === API de football-data.org ===
    # Obligatoria: sin ella el proceso no arranca
    FOOTBALL_API_KEY: str

    # === Servidor ===
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    # === CORS ===
    CORS_ORIGIN: str = "http://localhost:3000"

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_TO_FILE: bool = True
    SLOW_REQUEST_THRESHOLD: float = 5.0

    # Configuración de pydantic v2
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
