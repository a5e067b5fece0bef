"""
Application configuration using Pydantic Settings.
All configuration is loaded from environment variables.
"""
from functools import lru_cache
from typing import List

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

# Database backends with an ON CONFLICT DO NOTHING insert
SUPPORTED_BACKENDS = ("sqlite", "postgresql")

# Secrets that must never be used outside development
_DEV_ONLY_DEFAULTS = {
    "secret_key": "userskillhub-secret-change-in-production",
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "SkillHub API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"  # development, staging, production

    # API
    api_prefix: str = ""
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Database
    database_url: str = "sqlite+aiosqlite:///./userskillhub.db"
    db_pool_size: int = 5
    db_max_overflow: int = 10

    # JWT Authentication
    secret_key: str = "userskillhub-secret-change-in-production"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24

    # Session cookie carrying the access token for browser clients
    session_cookie_name: str = "session"
    session_cookie_secure: bool = False

    # Password hashing
    bcrypt_rounds: int = 12

    # Rate limiting
    rate_limit_enabled: bool = True
    rate_limit_storage_uri: str = "memory://"

    # Landing pages the frontend navigates to after auth actions
    login_page: str = "/auth.html"
    student_home_page: str = "/dashboard.html"
    instructor_home_page: str = "/instructor.html"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @field_validator("database_url")
    @classmethod
    def _require_supported_backend(cls, value: str) -> str:
        """Only SQLite and PostgreSQL can run the skill get-or-create insert."""
        try:
            backend = make_url(value).get_backend_name()
        except ArgumentError:
            raise ValueError(f"DATABASE_URL is not a valid SQLAlchemy URL: {value!r}")
        if backend not in SUPPORTED_BACKENDS:
            raise ValueError(
                f"DATABASE_URL backend '{backend}' is not supported; "
                f"use one of {', '.join(SUPPORTED_BACKENDS)}."
            )
        return value

    @model_validator(mode="after")
    def _reject_dev_secrets_in_production(self) -> "Settings":
        """Fail loud if production/staging still uses dev-only default secrets."""
        if self.environment in ("production", "staging"):
            for field_name, dev_default in _DEV_ONLY_DEFAULTS.items():
                actual = getattr(self, field_name)
                if actual == dev_default:
                    raise ValueError(
                        f"SECURITY: '{field_name}' is still set to its development default. "
                        f"Set a real value via environment variable in {self.environment}."
                    )
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
