"""Environment configuration using pydantic-settings.

Values come from RECORDING_* environment variables, with an optional .env
file. settings.py projects them onto Django settings.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecordingSettings(BaseSettings):
    """Recording API settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="RECORDING_", env_file=".env", extra="ignore")

    debug: bool = Field(default=False, description="Django DEBUG")
    secret_key: str = Field(
        default="django-insecure-recording-dev-key", description="Django SECRET_KEY"
    )
    allowed_hosts: str = Field(
        default="localhost,127.0.0.1,testserver", description="Comma separated host names"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    # Database
    database_engine: Literal["sqlite", "postgresql"] = Field(default="sqlite")
    database_name: str = Field(default="recording.sqlite3", description="Database name or sqlite path")
    database_host: Optional[str] = Field(default=None)
    database_port: int = Field(default=5432)
    database_user: Optional[str] = Field(default=None)
    database_password: Optional[str] = Field(default=None)
    query_timeout_seconds: int = Field(default=5, gt=0, description="Per-operation store timeout")

    # Recording behaviour
    store_backend: Literal["django", "memory"] = Field(default="django")
    enforce_session_exists: bool = Field(
        default=True, description="Reject events for sessions that do not exist"
    )
    default_page_size: int = Field(default=20, ge=0)
    max_page_size: int = Field(default=100, ge=1)

    @property
    def host_list(self) -> list[str]:
        """Parse allowed hosts from comma-separated string."""
        return [host.strip() for host in self.allowed_hosts.split(",") if host.strip()]

    def database(self) -> dict:
        """Django DATABASES["default"] entry with the timeout applied."""
        if self.database_engine == "postgresql":
            return {
                "ENGINE": "django.db.backends.postgresql",
                "NAME": self.database_name,
                "HOST": self.database_host or "localhost",
                "PORT": self.database_port,
                "USER": self.database_user or "",
                "PASSWORD": self.database_password or "",
                "OPTIONS": {
                    "connect_timeout": self.query_timeout_seconds,
                    "options": f"-c statement_timeout={self.query_timeout_seconds * 1000}",
                },
            }
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": self.database_name,
            "OPTIONS": {"timeout": self.query_timeout_seconds},
        }


@lru_cache
def get_settings() -> RecordingSettings:
    """Get cached settings instance."""
    return RecordingSettings()
