"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from functools import lru_cache
from typing import List


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="dbrowser-backend", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Echo SQL statements")
    log_level: str = Field(default="INFO", description="Root logging level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port", ge=1, le=65535)

    # ========== Database ==========
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/dbrowser",
        description="PostgreSQL connection URL (async)"
    )
    db_pool_size: int = Field(default=5, description="Database connection pool size", ge=1)
    db_max_overflow: int = Field(default=10, description="Max overflow connections", ge=0)
    db_ssl: bool = Field(
        default=True,
        description="Connect to Postgres over TLS without verifying the certificate"
    )
    create_tables: bool = Field(
        default=True,
        description="Create missing tables on startup"
    )

    # ========== Schema ==========
    schema_mode: str = Field(
        default="linked",
        description="'linked' keys rows by users.id, 'direct' keys them by firebase_uid"
    )

    # ========== CORS ==========
    cors_origins: List[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("schema_mode")
    @classmethod
    def validate_schema_mode(cls, v: str) -> str:
        """Ensure schema mode is a known variant."""
        if v not in SCHEMA_MODES:
            raise ValueError(f"schema_mode must be one of {set(SCHEMA_MODES)}")
        return v

    @field_validator("database_url")
    @classmethod
    def normalize_database_url(cls, v: str) -> str:
        """Point bare Postgres URLs at the asyncpg driver."""
        for prefix in ("postgres://", "postgresql://"):
            if v.startswith(prefix):
                return "postgresql+asyncpg://" + v[len(prefix):]
        return v


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# ========== Constants ==========

class SchemaMode(str):
    """Storage layouts for rows owned by a user."""
    LINKED = "linked"   # user_id -> users.id
    DIRECT = "direct"   # firebase_uid column, no join


SCHEMA_MODES = [SchemaMode.LINKED, SchemaMode.DIRECT]

# Global settings instance
settings = get_settings()
