"""
Base Django Settings - Shared across all environments
"""

from pathlib import Path
import os

# Import centralized config
from mailtrack.config import (
    config,
    get_allowed_hosts,
    get_database_config,
    get_debug,
    get_secret_key,
)

# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent.parent

SECRET_KEY = get_secret_key()
DEBUG = get_debug()
ALLOWED_HOSTS = get_allowed_hosts()

# Application definition
INSTALLED_APPS = [
    "jazzmin",  # Modern admin UI - must be before django.contrib.admin
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    # Third-party apps
    "rest_framework",
    "corsheaders",
    # Local apps
    "core.apps.CoreConfig",
    "tracking.apps.TrackingConfig",
]


MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "mailtrack.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "mailtrack.wsgi.application"

DATABASES = {"default": get_database_config()}

# Internationalization
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# Static files
STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "staticfiles"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# Tracking paths carry no trailing slash (/stats, /track/<id>/click)
APPEND_SLASH = False

# REST Framework settings
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
        "rest_framework.parsers.FormParser",
    ],
    # Public, cookieless API: no session auth means no CSRF enforcement
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
    "EXCEPTION_HANDLER": "core.exceptions.handlers.tracker_exception_handler",
}

# Whether 5xx JSON bodies carry the underlying error message
EXPOSE_ERROR_DETAILS = not config.is_production

# Beacon URLs
SITE_URL = config.tracking.site_url
TRACKING_DEFAULT_REDIRECT_URL = config.tracking.default_redirect_url

# CORS Settings (from config)
CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = config.security.cors_origins
CORS_ALLOW_METHODS = [
    "GET",
    "OPTIONS",
    "POST",
]

# Logging Configuration
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {module} {message}",
            "style": "{",
        },
        "simple": {
            "format": "{levelname} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {
        "handlers": ["console"],
        "level": os.getenv("LOG_LEVEL", "INFO"),
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "tracking": {
            "handlers": ["console"],
            "level": "DEBUG",
            "propagate": False,
        },
        "mailtrack.config": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}

# =============================================================================
# JAZZMIN - ADMIN UI
# =============================================================================
JAZZMIN_SETTINGS = {
    "site_title": "Mailtrack",
    "site_header": "Mailtrack",
    "site_brand": "Mailtrack",
    "welcome_sign": "Email engagement tracking",
    "copyright": "Mailtrack",
    "search_model": ["tracking.Contact"],
    "user_avatar": None,
    "show_sidebar": True,
    "navigation_expanded": True,
    "icons": {
        "auth": "fas fa-users-cog",
        "auth.user": "fas fa-user",
        "auth.Group": "fas fa-users",
        "tracking.Contact": "fas fa-address-book",
        "tracking.TrackingRecord": "fas fa-envelope-open-text",
    },
    "default_icon_parents": "fas fa-chevron-circle-right",
    "default_icon_children": "fas fa-circle",
    "related_modal_active": True,
    "show_ui_builder": False,
}
