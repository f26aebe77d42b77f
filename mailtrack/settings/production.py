"""
Production Settings - Security Hardened
"""

from .base import *
from mailtrack.config import config, get_database_config

DEBUG = False
SECRET_KEY = config.security.secret_key
ALLOWED_HOSTS = config.security.allowed_hosts

# PostgreSQL for production (from config, with production overrides)
DATABASES = {"default": get_database_config()}
DATABASES["default"]["CONN_MAX_AGE"] = 60  # Persistent connections
DATABASES["default"]["CONN_HEALTH_CHECKS"] = True

# Database internals never leak into error bodies
EXPOSE_ERROR_DETAILS = False

# =============================================================================
# SECURITY SETTINGS - PRODUCTION
# =============================================================================

# HTTPS/SSL Security
SECURE_SSL_REDIRECT = True  # Force HTTPS
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")

# HSTS (HTTP Strict Transport Security)
SECURE_HSTS_SECONDS = 31536000  # 1 year
SECURE_HSTS_INCLUDE_SUBDOMAINS = True

# Cookie Security (admin only; the tracking API is cookieless)
SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
SESSION_COOKIE_SAMESITE = "Lax"

CSRF_COOKIE_SECURE = True
CSRF_COOKIE_SAMESITE = "Lax"

SECURE_CONTENT_TYPE_NOSNIFF = True
X_FRAME_OPTIONS = "DENY"

SECURE_REFERRER_POLICY = "strict-origin-when-cross-origin"

# =============================================================================
# CORS - Strict Production Settings (from config)
# =============================================================================
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = config.security.cors_origins
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]

# Production logging: tracking at INFO
LOGGING["loggers"]["tracking"]["level"] = "INFO"
