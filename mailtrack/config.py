"""
Configuration Layer
===================

Centralized, type-safe configuration management for all environment variables.
Settings modules read from here instead of calling os.getenv() directly.

Usage:
    from mailtrack.config import config

    # Build absolute beacon URLs
    base = config.tracking.site_url

    # Access database settings
    db_url = config.database.url

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

    # libpq sslmode: disable / prefer / require / verify-full
    ssl_mode: str = field(default_factory=lambda: os.getenv("DB_SSL_MODE", "prefer"))

    @property
    def is_sqlite(self) -> bool:
        return "sqlite" in self.url.lower()

    @property
    def requires_tls(self) -> bool:
        return self.ssl_mode.lower() in ("require", "verify-ca", "verify-full")


@dataclass(frozen=True)
class SecurityConfig:
    """Security-related settings."""
    secret_key: str = field(default_factory=lambda: os.getenv("SECRET_KEY", "django-insecure-dev-key-change-in-production"))
    allowed_hosts: List[str] = field(default_factory=lambda: os.getenv("ALLOWED_HOSTS", "localhost,127.0.0.1").split(","))
    cors_origins: List[str] = field(default_factory=lambda: os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000,http://127.0.0.1:3000"
    ).split(","))
    admin_url: str = field(default_factory=lambda: os.getenv("ADMIN_URL", "admin").strip("/"))

    @property
    def is_secure_key(self) -> bool:
        """Check if using a proper secret key."""
        return "insecure" not in self.secret_key.lower() and len(self.secret_key) >= 50


@dataclass(frozen=True)
class TrackingConfig:
    """Beacon and redirect settings."""
    site_url: str = field(default_factory=lambda: os.getenv("SITE_URL", "http://localhost:8000").rstrip("/"))
    default_redirect_url: str = field(default_factory=lambda: os.getenv("DEFAULT_REDIRECT_URL", "/"))

    @property
    def is_https(self) -> bool:
        return self.site_url.startswith("https://")


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration - aggregates all config sections."""

    # Environment
    environment: str = field(default_factory=lambda: os.getenv("DJANGO_ENV", "development"))
    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "True").lower() == "true")

    # Sub-configurations
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    security: SecurityConfig = field(default_factory=SecurityConfig)
    tracking: TrackingConfig = field(default_factory=TrackingConfig)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    def validate(self) -> List[str]:
        """
        Validate configuration and return list of warnings/errors.
        Call this on startup to catch misconfigurations early.
        """
        issues = []

        if self.is_production:
            if not self.security.is_secure_key:
                issues.append("CRITICAL: Using insecure SECRET_KEY in production!")
            if self.database.is_sqlite:
                issues.append("CRITICAL: SQLite database configured in production")
            if self.debug:
                issues.append("WARNING: DEBUG=True in production!")
            if not self.database.requires_tls:
                issues.append("WARNING: Database TLS not required (set DB_SSL_MODE=require)")
            if not self.tracking.is_https:
                issues.append("WARNING: SITE_URL is not https; beacons may be blocked by mail clients")

        if self.security.admin_url == "admin":
            issues.append("INFO: Admin served on the default /admin/ path")

        return issues

    def log_status(self) -> None:
        """Log configuration status on startup."""
        logger.info(f"Environment: {self.environment}")
        logger.info(f"Debug: {self.debug}")
        logger.info(f"Database: {'sqlite' if self.database.is_sqlite else self.database.host}")
        logger.info(f"Tracking base URL: {self.tracking.site_url}")


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

def get_secret_key() -> str:
    """Get Django SECRET_KEY from config."""
    return config.security.secret_key


def get_allowed_hosts() -> List[str]:
    """Get ALLOWED_HOSTS from config."""
    return config.security.allowed_hosts


def get_debug() -> bool:
    """Get DEBUG setting from config."""
    return config.debug


def get_database_config() -> dict:
    """
    Get database configuration in Django format.
    Returns dict suitable for DATABASES["default"].
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
        "OPTIONS": {
            "sslmode": config.database.ssl_mode,
        },
    }
