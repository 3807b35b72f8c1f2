"""Tests for settings loading and logging setup."""

import pytest
import structlog

from cotacao.config import configure_logging, get_logger, get_settings, reset_settings
from cotacao.config.logging import build_processors, mask_link_tokens, mask_token


@pytest.fixture(autouse=True)
def fresh_settings():
    reset_settings()
    yield
    reset_settings()


class TestSettings:
    def test_defaults(self):
        settings = get_settings()
        assert settings.importing.header_rows == 1
        assert settings.importing.allowed_extensions == [".xlsx", ".csv"]
        assert settings.export.delimiter == ";"
        assert settings.export.file_extension == ".csv"
        assert settings.storage.db_path.name == "cotacao.db"

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("API_PUBLIC_BASE_URL", "https://compras.example.com")
        monkeypatch.setenv("EXPORT_DELIMITER", ",")
        monkeypatch.setenv("IMPORT_HEADER_ROWS", "2")
        monkeypatch.setenv("STORAGE_DATA_DIR", str(tmp_path))

        settings = get_settings()

        assert settings.api.public_base_url == "https://compras.example.com"
        assert settings.export.delimiter == ","
        assert settings.importing.header_rows == 2
        assert settings.storage.db_path == tmp_path / "cotacao.db"


class TestLogging:
    def test_configure_and_log(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        configure_logging()
        logger = get_logger("cotacao.test")
        logger.info("settings_test_event", list_id="list-1")

    def test_development_uses_console_renderer(self):
        processors = build_processors("development")
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert mask_link_tokens in processors

    def test_production_renders_json(self):
        processors = build_processors("production")
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert processors.index(mask_link_tokens) < len(processors) - 1


class TestTokenMasking:
    def test_token_field_masked(self):
        event = mask_link_tokens(None, "info", {"event": "link_opened", "token": "3f2a9c1e-77aa"})
        assert event["token"] == "3f2a***"

    def test_short_token_fully_masked(self):
        assert mask_token("abc") == "***"

    def test_form_path_masked(self):
        event = mask_link_tokens(
            None,
            "info",
            {"event": "request_completed", "path": "/api/cotacao/3f2a9c1e-77aa/responses"},
        )
        assert event["path"] == "/api/cotacao/3f2a***/responses"

    def test_other_paths_untouched(self):
        event = mask_link_tokens(None, "info", {"event": "x", "path": "/api/lists/list-1"})
        assert event["path"] == "/api/lists/list-1"

    def test_non_string_values_untouched(self):
        event = mask_link_tokens(None, "info", {"event": "x", "token": None})
        assert event["token"] is None
