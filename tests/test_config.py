"""Tests for settings."""

from pwnquery import __version__
from pwnquery.config import Settings, get_settings, reset_settings
from pwnquery.urls import DEFAULT_BASE_URL


class TestSettings:
    """Tests for environment-driven settings."""

    def test_defaults(self, monkeypatch) -> None:
        for name in ("PWNQUERY_USER_AGENT", "PWNQUERY_BASE_URL", "PWNQUERY_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)
        assert settings.user_agent == f"pwnquery/{__version__}"
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout == 30.0

    def test_from_environment(self, monkeypatch) -> None:
        monkeypatch.setenv("PWNQUERY_USER_AGENT", "my-monitor/2.0")
        monkeypatch.setenv("PWNQUERY_TIMEOUT", "5")
        settings = Settings(_env_file=None)
        assert settings.user_agent == "my-monitor/2.0"
        assert settings.timeout == 5.0

    def test_client_config(self) -> None:
        settings = Settings(_env_file=None, user_agent="ua", base_url="http://mirror", timeout=2.5)
        config = settings.client_config()
        assert config.user_agent == "ua"
        assert config.base_url == "http://mirror"
        assert config.timeout == 2.5

    def test_singleton(self) -> None:
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first
