"""Application configuration via Pydantic BaseSettings.

Values come from the OS environment and an optional .env file in the project
root. Import the `settings` singleton wherever configuration is needed.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENV_FILE = Path(__file__).parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database
    database_url: str = ""
    db_pool_size: int = 10
    db_max_overflow: int = 20

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    admin_username: str = "admin"
    host: str = "0.0.0.0"
    port: int = 3000

    allowed_origins: list[str] = ["*"]

    @field_validator("log_level", mode="before")
    @classmethod
    def _uppercase_log_level(cls, v: str) -> str:
        return v.upper()

    @field_validator("database_url", mode="after")
    @classmethod
    def _normalise_scheme(cls, v: str) -> str:
        # SQLAlchemy requires "postgresql://", hosted providers hand out "postgres://"
        if v.startswith("postgres://"):
            return v.replace("postgres://", "postgresql://", 1)
        return v


settings = Settings()
