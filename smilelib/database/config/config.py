"""
Configuration — Pydantic v2 Settings (env / .env)
=================================================

Purpose
-------
Centralized, strongly-typed library configuration using:
- Pydantic v2 `BaseSettings` for environment-driven values
- `pydantic-settings` v2 for `.env` loading and model config

Load Order & Behavior
---------------------
- Values are read from the environment; if not present, `.env` is used.
- Every field has a default, so importing the module never fails; the
  defaults describe an embedded SQLite file in the working directory.
- `extra="ignore"`: unknown env vars are ignored (not an error).

Usage
-----
from smilelib.database.config.config import settings

profile = settings.database_profile()
log_dir = settings.LOG_DIRECTORY

Security
--------
- Never commit secrets or the `.env` file to source control.
- `DB_PASSWORD` is a `SecretStr`; call `get_secret_value()` only where the
  plain value is really needed.
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from smilelib.database.entities.profile import DatabaseProfile


class Settings(BaseSettings):
    """
    Library configuration settings loaded from environment variables
    or a `.env` file. Provides strongly typed access to environment values.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    DB_ENGINE: str = Field("embedded", description="Engine kind (`networked`/`mysql` or `embedded`/`sqlite`).")
    DB_HOST: Optional[str] = Field(None, description="Hostname or IP address of the database server.")
    DB_PORT: int = Field(3306, description="Port of the database server.")
    DB_USERNAME: Optional[str] = Field(None, description="Database username credential.")
    DB_PASSWORD: Optional[SecretStr] = Field(None, description="Database password credential.")
    DB_DATABASE_NAME: str = Field("smilelib.db", description="Database name, or SQLite file path for embedded stores.")
    DB_DRIVER_NAME: str = Field("mysql+pymysql", description="SQLAlchemy driver for networked stores.")
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Logging level name, case-insensitive."
    )
    LOG_DIRECTORY: str = Field("logs", description="Directory that receives the shutdown log file.")
    DISCORD_WEBHOOK_URL: Optional[str] = Field(None, description="Webhook URL that receives ERROR records.")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    def database_profile(self) -> DatabaseProfile:
        """Build the `DatabaseProfile` described by the `DB_*` settings."""
        return DatabaseProfile(
            engine_kind=self.DB_ENGINE,
            host=self.DB_HOST,
            port=self.DB_PORT,
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD,
            database=self.DB_DATABASE_NAME,
            driver=self.DB_DRIVER_NAME,
        )

# Singleton instance of Settings, ready to be imported across the library
settings = Settings()
"""Defines a Settings object that contains the contents of the .env file"""
