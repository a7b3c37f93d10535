"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./data/eventos.db")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
    DB_BUSY_TIMEOUT: float = 30.0  # seconds
    SQLITE_FOREIGN_KEYS: bool = True
    SEED_DEFAULTS: bool = True

    # Application
    ENVIRONMENT: str = "production"
    SERVICE_NAME: str = "Guest Management API"
    VERSION: str = "1.0.0"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # CORS
    ALLOW_ORIGINS: List[str] = ["*"]

    # Pagination
    MAX_PAGE_SIZE: int = 100

    class Config:
        env_file = ".env"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

settings = Settings()
