"""
Tests for the configuration layer and startup validation.

Run with: python -m pytest core/tests/test_config.py -v
"""

import logging

import pytest
from django.core.exceptions import ImproperlyConfigured

from core.config import validate_config_on_startup
from inkwell.config import AppConfig


@pytest.fixture
def production_env(monkeypatch):
    monkeypatch.setenv("DJANGO_ENV", "production")
    monkeypatch.setenv("DEBUG", "False")
    monkeypatch.setenv("DATABASE_URL", "postgres://inkwell@db/inkwell")
    monkeypatch.setenv("SECRET_KEY", "k" * 64)
    monkeypatch.setenv("ADMIN_URL", "backstage")


class TestAppConfig:

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("POSTS_PAGE_SIZE", "25")
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")
        cfg = AppConfig()
        assert cfg.pagination.posts_page_size == 25
        assert cfg.security.cors_origins == ["https://a.example", "https://b.example"]

    def test_clean_production_config(self, production_env):
        cfg = AppConfig()
        assert cfg.is_production
        assert cfg.validate() == []

    def test_insecure_key_in_production_is_critical(self, production_env, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "django-insecure-short")
        issues = AppConfig().validate()
        assert any(issue.startswith("CRITICAL") and "SECRET_KEY" in issue for issue in issues)

    def test_page_size_out_of_range(self, monkeypatch):
        monkeypatch.setenv("COMMENTS_PAGE_SIZE", "80")
        issues = AppConfig().validate()
        assert "CRITICAL: COMMENTS_PAGE_SIZE=80 is outside 1..50" in issues


class TestStartupValidation:

    def test_production_critical_raises(self, production_env, monkeypatch):
        monkeypatch.setenv("SECRET_KEY", "django-insecure-short")
        with pytest.raises(ImproperlyConfigured):
            validate_config_on_startup(AppConfig())

    def test_development_only_logs(self, monkeypatch, caplog):
        monkeypatch.setenv("DJANGO_ENV", "development")
        monkeypatch.setenv("POSTS_PAGE_SIZE", "0")
        with caplog.at_level("CRITICAL", logger="core.config.validators"):
            validate_config_on_startup(AppConfig())
        assert "POSTS_PAGE_SIZE=0" in caplog.text


class TestLoggingSetup:

    @pytest.mark.parametrize("name", ["blog", "core", "users", "inkwell"])
    def test_app_loggers_emit_through_root_only(self, name):
        app_logger = logging.getLogger(name)
        assert app_logger.propagate is True
        assert app_logger.handlers == []

    def test_root_keeps_console_handler(self):
        root_handlers = logging.getLogger().handlers
        assert any(type(h) is logging.StreamHandler for h in root_handlers)

    def test_service_record_reaches_caplog_once(self, caplog):
        with caplog.at_level("INFO", logger="blog.services.posts"):
            logging.getLogger("blog.services.posts").info("single line")
        assert [r.getMessage() for r in caplog.records] == ["single line"]
