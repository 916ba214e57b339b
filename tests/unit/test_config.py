"""Unit tests for settings parsing"""

import pytest
from pydantic import ValidationError

from splitbill.config import Settings

DATABASE_URL = "sqlite+aiosqlite://"
SECRET_KEY = "test-secret-key-that-is-at-least-32-characters"


def make_settings(**overrides) -> Settings:
    values = {"database_url": DATABASE_URL, "secret_key": SECRET_KEY}
    values.update(overrides)
    return Settings(_env_file=None, **values)


class TestAllowedOrigins:
    """Test CORS origin parsing"""

    def test_default_is_empty(self, monkeypatch):
        monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)

        assert make_settings().allowed_origins == []

    def test_comma_separated_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test, http://b.test")

        assert make_settings().allowed_origins == ["http://a.test", "http://b.test"]

    def test_json_array_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", '["http://a.test", "http://b.test"]')

        assert make_settings().allowed_origins == ["http://a.test", "http://b.test"]

    def test_single_origin_env(self, monkeypatch):
        monkeypatch.setenv("ALLOWED_ORIGINS", "http://a.test")

        assert make_settings().allowed_origins == ["http://a.test"]

    def test_list_passed_directly(self):
        settings = make_settings(allowed_origins=[" http://a.test ", ""])

        assert settings.allowed_origins == ["http://a.test"]


class TestValidation:
    def test_short_secret_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            Settings(_env_file=None, database_url=DATABASE_URL, secret_key="short")

    def test_unknown_database_rejected(self):
        with pytest.raises(ValidationError):
            make_settings(database_url="mysql://localhost/bills")

    def test_log_level_upper_cased(self):
        assert make_settings(log_level="debug").log_level == "DEBUG"
