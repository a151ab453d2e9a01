# ========================================
# config.py - Service configuration
# ========================================

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ---------- Service ------------------------------------------------ #
    app_name: str = "Resume Upload Service"
    app_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000

    # ---------- Uploads ------------------------------------------------ #
    max_upload_bytes: int = 10 * 1024 * 1024  # 10MB

    # ---------- CORS --------------------------------------------------- #
    allowed_origins: str = "http://localhost:3000,http://localhost:5173,http://localhost:5174"

    # ---------- Logging ------------------------------------------------ #
    log_level: str = "INFO"
    log_format: str = "console"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)


@lru_cache
def get_settings() -> Settings:
    return Settings()
