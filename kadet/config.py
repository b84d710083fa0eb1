"""
Settings for the hand history API.

Values come from the process environment or a local .env file; names are
matched case-insensitively (LOG_LEVEL, MAX_HAND_CHARS, ...).
"""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Server, logging and request size settings."""

    # Server
    backend_port: int = 8000
    backend_host: str = "0.0.0.0"
    environment: str = "development"
    log_level: str = "INFO"

    # Comma-separated origins allowed by CORS
    allowed_origins: str = "http://localhost:3000"

    # Largest hand history accepted per request
    max_hand_chars: int = 200_000

    class Config:
        """Pydantic configuration"""
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    @property
    def allowed_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.allowed_origins.split(',') if origin.strip()]

    @property
    def is_production(self) -> bool:
        """Production disables the interactive docs and auto-reload"""
        return self.environment.strip().lower() == "production"


@lru_cache()
def get_settings() -> Settings:
    """Settings are read once per process."""
    return Settings()
