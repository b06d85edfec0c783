from typing import List

from pydantic_settings import BaseSettings
from pydantic import Field
import os
from pathlib import Path


class Config(BaseSettings):
    # Database Configuration (any async SQLAlchemy URL)
    database_url: str = Field(
        default=f"sqlite+aiosqlite:///{Path(__file__).parent.parent.parent / 'data' / 'gallery.db'}",
        alias="DB_URL",
    )
    db_echo: bool = Field(default=False, alias="DB_ECHO")

    # JWT Configuration
    secret_key: str = Field(default="change-me", alias="JWT_SECRET")
    algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24, alias="ACCESS_TOKEN_EXPIRE_MINUTES"
    )

    # HTTP
    cors_origins: List[str] = Field(
        default=["http://localhost", "http://localhost:3000", "http://localhost:8000"],
        alias="CORS_ORIGINS",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    is_production: bool = (
        os.getenv("ENVIRONMENT", "development").lower() == "production"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        populate_by_name = True


# Instantiate the settings
config = Config()
