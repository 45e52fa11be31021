"""
Unit tests for configuration: ServiceSettings (API) and Config (workflows).
"""

import pytest
from pydantic import ValidationError

from career_service.config import ServiceSettings
from src.common.config import Config


class TestServiceSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        settings = ServiceSettings(session_secret="a-strong-secret-123")

        assert settings.environment == "development"
        assert settings.port == 8000
        assert settings.cors_origins_list == []
        assert not settings.is_production

    def test_cors_origins_parsed(self):
        settings = ServiceSettings(cors_origins="https://a.example, https://b.example,")
        assert settings.cors_origins_list == ["https://a.example", "https://b.example"]

    @pytest.mark.parametrize("secret", ["short", "abababababababababab", "aaaaaaaaaaaaaaaaaaaa"])
    def test_weak_secrets_rejected(self, secret):
        with pytest.raises(ValidationError):
            ServiceSettings(session_secret=secret)

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            ServiceSettings(environment="qa")

    def test_production_requires_secret(self):
        settings = ServiceSettings(environment="production", session_secret=None)
        issues = settings.validate_production_config()
        assert any(issue.startswith("CRITICAL") for issue in issues)

    def test_development_without_secret_warns(self):
        settings = ServiceSettings(session_secret=None)
        assert settings.validate_production_config() == [
            "WARNING: SESSION_SECRET not set - every request will be unauthorized"
        ]


class TestConfig:

    def test_validate_reports_missing_keys(self, monkeypatch):
        monkeypatch.setattr(Config, "OPENAI_API_KEY", "")
        with pytest.raises(ValueError, match="OPENAI_API_KEY"):
            Config.validate()

    def test_validate_rejects_non_mongodb_uri(self, monkeypatch):
        monkeypatch.setattr(Config, "OPENAI_API_KEY", "sk-test")
        monkeypatch.setattr(Config, "MONGODB_URI", "postgres://localhost")
        with pytest.raises(ValueError, match="Invalid MongoDB URI"):
            Config.validate()

    def test_production_warns_on_local_mongodb(self, monkeypatch):
        monkeypatch.setattr(Config, "MONGODB_URI", "mongodb://localhost:27017")
        settings = ServiceSettings(
            environment="production",
            session_secret="a-strong-secret-123",
            cors_origins="https://app.example",
        )
        assert settings.validate_production_config() == [
            "WARNING: Using a local MongoDB in production"
        ]

    def test_validate_passes_with_keys(self, monkeypatch):
        monkeypatch.setattr(Config, "OPENAI_API_KEY", "sk-test")
        monkeypatch.setattr(Config, "MONGODB_URI", "mongodb://localhost:27017")
        Config.validate()

    def test_empty_base_url_means_default_endpoint(self, monkeypatch):
        monkeypatch.setattr(Config, "LLM_BASE_URL", "")
        assert Config.get_llm_base_url() is None

    def test_summary_hides_secrets(self, monkeypatch):
        monkeypatch.setattr(Config, "OPENAI_API_KEY", "sk-very-secret")
        summary = Config.summary()
        assert "sk-very-secret" not in summary
        assert "Insight TTL" in summary
