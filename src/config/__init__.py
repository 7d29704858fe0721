"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from sqlalchemy.engine import URL
from functools import lru_cache
from pathlib import Path
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field is optional; a `.env` file in the working directory
    is read when present.
    """

    # ========== Application ==========
    app_name: str = Field(default="todo-service", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    env: str = Field(default="", description="Environment flag ('production' serves the client bundle)")
    debug: bool = Field(default=False, description="Echo SQL statements")
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=5000, description="Server port", ge=1, le=65535)

    # ========== Database ==========
    db_host: str = Field(default="", description="PostgreSQL host")
    db_port: str = Field(default="", description="PostgreSQL port")
    db_user: str = Field(default="", description="PostgreSQL user")
    db_password: str = Field(default="", description="PostgreSQL password")
    db_name: str = Field(default="", description="PostgreSQL database name")
    db_sslmode: str = Field(default="disable", description="asyncpg ssl mode")
    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL, overrides the DB_* fields when set"
    )
    db_pool_size: int = Field(default=5, description="Database connection pool size", ge=1)
    db_max_overflow: int = Field(default=10, description="Max overflow connections", ge=0)

    # ========== Client ==========
    static_dir: Path = Field(
        default=Path("client/dist"),
        description="Built client bundle served at / in production"
    )

    # ========== CORS ==========
    cors_origins: List[str] = Field(
        default=[],
        description="Allowed CORS origins (middleware disabled when empty)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("db_port")
    @classmethod
    def validate_db_port(cls, v: str) -> str:
        """Allow an empty port, otherwise require digits."""
        v = v.strip()
        if v and not v.isdigit():
            raise ValueError("db_port must be numeric")
        return v

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @property
    def sqlalchemy_url(self) -> str | URL:
        """
        Database URL for the async engine.

        Built from the DB_* fields unless DATABASE_URL is set.
        """
        if self.database_url:
            return self.database_url

        query = {"ssl": self.db_sslmode} if self.db_sslmode else {}
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user or None,
            password=self.db_password or None,
            host=self.db_host or None,
            port=int(self.db_port) if self.db_port else None,
            database=self.db_name or None,
            query=query,
        )


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()
