"""
Environment configuration for the hostel booking client.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


class Settings(BaseSettings):
    """Client settings with environment variable support"""

    # Application configuration
    APP_NAME: str = "Hostel Booking Client"
    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # Backend API
    API_BASE_URL: str = "http://localhost:1000"
    REQUEST_TIMEOUT_SECONDS: float = 30.0
    CONNECT_TIMEOUT_SECONDS: float = 10.0
    RESERVATION_TIMEOUT_SECONDS: float = 60.0

    # Authentication bootstrap (normally set at login time)
    ACCESS_TOKEN: Optional[str] = None

    # Business logic
    BOOKING_FEE: Decimal = Field(default=Decimal("70.00"), ge=0)
    CURRENCY: str = "GHS"

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None
    LOG_JSON: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"

    @field_validator('API_BASE_URL')
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Endpoints are joined as base + '/path', so drop a trailing slash"""
        return v.rstrip('/')

    @field_validator('LOG_LEVEL')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {v}")
        return level

    def get_api_url(self, path: str = "") -> str:
        """Get full API URL for an endpoint path"""
        if path and not path.startswith('/'):
            path = f"/{path}"
        return f"{self.API_BASE_URL}{path}"

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
