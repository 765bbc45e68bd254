"""
Configuration Layer
===================

Centralized, type-safe configuration management for all environment variables.
Settings modules and services read from here instead of calling os.getenv().

Usage:
    from inkwell.config import config

    # Access database settings
    db_url = config.database.url

    # Default page size for post listings
    limit = config.pagination.posts_page_size

    # Check if in production
    if config.is_production:
        ...
"""

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List
import logging

logger = logging.getLogger(__name__)


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


# =============================================================================
# Configuration Classes
# =============================================================================

@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""
    url: str = field(default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///db.sqlite3"))
    name: str = field(default_factory=lambda: os.getenv("DB_NAME", "db.sqlite3"))
    host: str = field(default_factory=lambda: os.getenv("DB_HOST", "localhost"))
    port: int = field(default_factory=lambda: int(os.getenv("DB_PORT", "5432")))
    user: str = field(default_factory=lambda: os.getenv("DB_USER", ""))
    password: str = field(default_factory=lambda: os.getenv("DB_PASSWORD", ""))

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.url.lower()


@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: _env_list("ALLOWED_HOSTS", "localhost,127.0.0.1"))
    cors_origins: List[str] = field(default_factory=lambda: _env_list(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173"
    ))
    admin_url: str = field(default_factory=lambda: os.getenv("ADMIN_URL", "admin").strip("/"))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class JWTConfig:
    """Bearer token lifetimes, in minutes."""
    access_lifetime_minutes: int = field(default_factory=lambda: int(os.getenv("JWT_ACCESS_MINUTES", "60")))
    refresh_lifetime_minutes: int = field(default_factory=lambda: int(os.getenv("JWT_REFRESH_MINUTES", str(7 * 24 * 60))))


@dataclass(frozen=True)
class PaginationConfig:
    """Default page sizes for list endpoints (maximum is fixed at 50)."""
    posts_page_size: int = field(default_factory=lambda: int(os.getenv("POSTS_PAGE_SIZE", "10")))
    comments_page_size: int = field(default_factory=lambda: int(os.getenv("COMMENTS_PAGE_SIZE", "20")))


@dataclass(frozen=True)
class APIConfig:
    """Public API surface settings."""
    sunset_date: str = field(default_factory=lambda: os.getenv("API_UNVERSIONED_SUNSET", "2027-06-01T00:00:00Z"))
    version: str = "1.0.0"


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    # Sub-configurations
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    jwt: JWTConfig = field(default_factory=JWTConfig)
    pagination: PaginationConfig = field(default_factory=PaginationConfig)
    api: APIConfig = field(default_factory=APIConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of warnings/errors.
        Call this on startup to catch misconfigurations early.
        """
        issues = []

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")
            if self.database.is_sqlite:
                issues.append("WARNING: SQLite database configured in production")

        for name, size in (
            ("POSTS_PAGE_SIZE", self.pagination.posts_page_size),
            ("COMMENTS_PAGE_SIZE", self.pagination.comments_page_size),
        ):
            if not 1 <= size <= 50:
                issues.append(f"CRITICAL: {name}={size} is outside 1..50")

        if self.jwt.refresh_lifetime_minutes <= self.jwt.access_lifetime_minutes:
            issues.append("WARNING: JWT refresh lifetime should exceed the access lifetime")

        if self.security.admin_url == "admin":
            issues.append("INFO: Admin served at the default /admin/ path")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info("Environment: %s", self.environment)
        logger.info("Debug: %s", self.debug)
        logger.info("Database: %s", "sqlite" if self.database.is_sqlite else "postgresql")


# =============================================================================
# Singleton Instance
# =============================================================================

@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """
    Get the singleton configuration instance.
    Uses lru_cache to ensure single instance across the application.
    """
    return AppConfig()


# Convenience alias
config = get_config()


# =============================================================================
# Django Settings Helpers
# =============================================================================

def get_database_config() -> dict:
    """
    Get database configuration in Django format.
    Returns dict suitable for DATABASES setting.
    """
    if config.database.is_sqlite:
        return {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": config.database.name,
        }

    return {
        "ENGINE": "django.db.backends.postgresql",
        "NAME": config.database.name,
        "HOST": config.database.host,
        "PORT": config.database.port,
        "USER": config.database.user,
        "PASSWORD": config.database.password,
    }
