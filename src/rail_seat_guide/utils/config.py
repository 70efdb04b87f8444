"""Settings"""

import logging
from typing import Optional
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent.parent / "resources" / "catalog.json"


class Settings(BaseSettings):
    """Application settings"""
    server_host: str = Field(default="0.0.0.0", description="Bind address")
    server_port: int = Field(default=8000, description="Bind port")
    debug: bool = Field(default=False, description="Debug mode")
    user_agent: str = Field(
        default="rail-seat-guide/1.0 (+https://github.com/rail-seat-guide)",
        description="User agent sent to the content API"
    )
    request_timeout: int = Field(default=10, description="Content API timeout in seconds")
    log_level: str = Field(default="INFO", description="Logging level")
    catalog_path: str = Field(default=str(DEFAULT_CATALOG_PATH), description="Local catalog snapshot")
    catalog_url: Optional[str] = Field(default=None, description="Content API catalog endpoint")
    seats_per_block: int = Field(default=5, description="Seats on each side of the aisle")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the shared settings instance"""
    global _settings
    if _settings is None:
        env_file_path = Path(".env")
        if not env_file_path.exists():
            logger.warning(f"Env file {env_file_path.absolute()} not found, using defaults")
        else:
            logger.info(f"Loading env file: {env_file_path.absolute()}")

        try:
            _settings = Settings()
            logger.info(f"Settings loaded - host: {_settings.server_host}, port: {_settings.server_port}, debug: {_settings.debug}, log level: {_settings.log_level}")
        except Exception as e:
            logger.error(f"Failed to load settings: {e}, using defaults")
            _settings = Settings.model_validate({})

    return _settings
