"""
Tests for the configuration layer and startup validation.

Run with: python -m pytest tests/test_config.py -v
"""

import logging

import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

from core.config import validate_config_on_startup
from mailtrack.config import (
    AppConfig,
    DatabaseConfig,
    SecurityConfig,
    TrackingConfig,
    get_config,
)

SECURE_KEY = "k" * 64


def production_config(**overrides):
    parts = {
        "environment": "production",
        "debug": False,
        "database": DatabaseConfig(url="postgresql://db/mailtrack", ssl_mode="require"),
        "security": SecurityConfig(secret_key=SECURE_KEY, admin_url="ops-console"),
        "tracking": TrackingConfig(site_url="https://track.example.com"),
    }
    parts.update(overrides)
    return AppConfig(**parts)


class TestDatabaseConfig:

    def test_sqlite_detection(self):
        assert DatabaseConfig(url="sqlite:///db.sqlite3").is_sqlite
        assert not DatabaseConfig(url="postgresql://db/mailtrack").is_sqlite

    @pytest.mark.parametrize("mode,expected", [
        ("require", True),
        ("verify-full", True),
        ("prefer", False),
        ("disable", False),
    ])
    def test_tls_requirement(self, mode, expected):
        assert DatabaseConfig(ssl_mode=mode).requires_tls is expected


class TestValidate:

    def test_clean_production_config(self):
        assert production_config().validate() == []

    def test_insecure_key_is_critical(self):
        issues = production_config(security=SecurityConfig(secret_key="django-insecure-x")).validate()
        assert any(i.startswith("CRITICAL") and "SECRET_KEY" in i for i in issues)

    def test_sqlite_in_production_is_critical(self):
        config = production_config(database=DatabaseConfig(url="sqlite:///db.sqlite3", ssl_mode="require"))
        assert any("SQLite" in i for i in config.validate() if i.startswith("CRITICAL"))

    def test_tls_not_required_is_warning(self):
        config = production_config(database=DatabaseConfig(url="postgresql://db/x", ssl_mode="prefer"))
        assert config.validate() == ["WARNING: Database TLS not required (set DB_SSL_MODE=require)"]

    def test_plain_http_site_url_is_warning(self):
        config = production_config(tracking=TrackingConfig(site_url="http://track.example.com"))
        assert len(config.validate()) == 1
        assert config.validate()[0].startswith("WARNING: SITE_URL")

    def test_development_skips_production_checks(self):
        config = AppConfig(
            environment="development",
            security=SecurityConfig(secret_key="django-insecure-x", admin_url="admin"),
        )
        assert config.validate() == ["INFO: Admin served on the default /admin/ path"]


class TestStartupValidation:

    def test_critical_issue_fails_production_startup(self):
        config = production_config(security=SecurityConfig(secret_key="short", admin_url="ops"))
        with pytest.raises(ImproperlyConfigured, match="SECRET_KEY"):
            validate_config_on_startup(config)

    def test_development_config_passes(self, caplog):
        config = AppConfig(
            environment="development",
            database=DatabaseConfig(url="sqlite:///db.sqlite3"),
            security=SecurityConfig(secret_key="short", admin_url="ops"),
        )
        with caplog.at_level(logging.INFO, logger="core.config.validators"):
            validate_config_on_startup(config)
        assert "no issues found" in caplog.text

    def test_warnings_do_not_block_production(self, caplog):
        config = production_config(debug=True)
        with caplog.at_level(logging.WARNING, logger="core.config.validators"):
            validate_config_on_startup(config)
        assert "DEBUG=True in production" in caplog.text

    def test_core_app_validates_project_config(self, monkeypatch):
        seen = []
        monkeypatch.setattr("core.config.validate_config_on_startup", seen.append)

        apps.get_app_config("core").ready()

        assert seen == [get_config()]
