"""Unit tests for Settings (pydantic-settings).

Tests cover:
- Required secrets
- Validators (token expiry, URL normalization, log level)
- Environment helper properties
"""

import pytest
from pydantic import ValidationError

from src.core.config import Settings
from src.core.enums import Environment

REQUIRED = {
    "database_url": "sqlite+aiosqlite:///:memory:",
    "secret_key": "x" * 32,
}


@pytest.mark.unit
class TestSettings:
    def test_loads_from_environment(self, monkeypatch):
        monkeypatch.setenv("APP_NAME", "People API")
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "15")

        settings = Settings()

        assert settings.app_name == "People API"
        assert settings.access_token_expire_minutes == 15

    def test_database_url_is_required(self, monkeypatch):
        monkeypatch.delenv("DATABASE_URL", raising=False)

        with pytest.raises(ValidationError):
            Settings(secret_key="x" * 32)

    def test_non_positive_expiry_rejected(self):
        with pytest.raises(ValidationError):
            Settings(**REQUIRED, access_token_expire_minutes=0)

    def test_base_url_trailing_slash_removed(self):
        settings = Settings(**REQUIRED, api_base_url="https://hr.example.com/")

        assert settings.api_base_url == "https://hr.example.com"

    def test_log_level_normalized(self):
        assert Settings(**REQUIRED, log_level="debug").log_level == "DEBUG"

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValidationError):
            Settings(**REQUIRED, log_level="chatty")

    @pytest.mark.parametrize(
        ("environment", "prop"),
        [
            (Environment.DEVELOPMENT, "is_development"),
            (Environment.TESTING, "is_testing"),
            (Environment.CI, "is_ci"),
            (Environment.PRODUCTION, "is_production"),
        ],
    )
    def test_environment_flags(self, environment, prop):
        settings = Settings(**REQUIRED, environment=environment)

        assert getattr(settings, prop) is True
