"""Configuration for the seed runner.

Configuration is loaded from:
- environment variables
- and a local `.env` file (if present)
"""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# bcrypt hash of "senha123", the password shared by seeded test accounts.
DEFAULT_PASSWORD_HASH = "$2a$10$7AgJ/DxbkJH6aNcmBFAYUOQjMBBjsM9C7FimOtS3XTCq0yqvBpvTO"


class SeederSettings(BaseSettings):
    """Settings for a seed run.

    Environment variables:
    - DATABASE_URL                (optional, SQLAlchemy URL)
    - LOG_LEVEL                   (optional)
    - SEED_CONTINUE_ON_ERROR      (optional)
    - SEED_DEFAULT_PASSWORD_HASH  (optional)

    Notes:
        Pydantic-settings supports overriding the env file in tests via:
        `SeederSettings(_env_file=path_to_env)`.
    """

    database_url: str = Field(
        default="sqlite:///seed.db",
        validation_alias="DATABASE_URL",
        description="SQLAlchemy URL of the database to seed",
    )

    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Root logging level",
    )

    continue_on_error: bool = Field(
        default=False,
        validation_alias="SEED_CONTINUE_ON_ERROR",
        description=(
            "Keep running unrelated seeds when one fails. Only applies when every "
            "registered seed is run."
        ),
    )

    default_password_hash: str = Field(
        default=DEFAULT_PASSWORD_HASH,
        validation_alias="SEED_DEFAULT_PASSWORD_HASH",
        description="Password hash stored on seeded test users",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _require_database_url(self) -> SeederSettings:
        if not self.database_url.strip():
            raise ValueError("DATABASE_URL must not be blank")
        return self
