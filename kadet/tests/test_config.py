"""
Tests for environment-driven settings.
"""

from kadet.config import Settings


class TestSettings:

    def test_is_production(self):
        assert Settings(environment="Production").is_production is True
        assert Settings(environment=" production ").is_production is True

    def test_not_production(self):
        assert Settings(environment="development").is_production is False
        assert Settings(environment="staging").is_production is False

    def test_allowed_origins_list(self):
        settings = Settings(allowed_origins="http://a.test, http://b.test,")
        assert settings.allowed_origins_list == ["http://a.test", "http://b.test"]

    def test_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("MAX_HAND_CHARS", "500")
        monkeypatch.setenv("ENVIRONMENT", "production")

        settings = Settings()

        assert settings.max_hand_chars == 500
        assert settings.is_production is True
