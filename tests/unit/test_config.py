"""
Tests for environment-backed settings.
"""

from juridico_app.core.config import Settings


class TestSettings:
    """Typed parsing of environment values."""

    def test_cors_origins_split_on_commas(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

        assert Settings().CORS_ORIGINS == ["https://a.example", "https://b.example"]

    def test_numbers_are_parsed(self, monkeypatch):
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "30")

        assert Settings().ACCESS_TOKEN_EXPIRE_MINUTES == 30

    def test_cookie_secure_follows_environment(self, monkeypatch):
        monkeypatch.delenv("COOKIE_SECURE", raising=False)
        monkeypatch.setenv("ENVIRONMENT", "production")
        assert Settings().COOKIE_SECURE is True

        monkeypatch.setenv("ENVIRONMENT", "development")
        assert Settings().COOKIE_SECURE is False

    def test_explicit_cookie_secure_wins(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("COOKIE_SECURE", "false")

        assert Settings().COOKIE_SECURE is False
