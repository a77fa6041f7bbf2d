"""Tests for configuration loading."""
from n2yo.api.uri import BASE_URL
from n2yo.config import N2YOConfig


class TestN2YOConfig:

    def test_defaults(self):
        config = N2YOConfig()
        assert config.api_key == ""
        assert config.base_url == BASE_URL
        assert config.timeout == 30
        assert config.transaction_warning_threshold == 900

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("N2YO_API_KEY", "KEY")
        monkeypatch.setenv("N2YO_BASE_URL", "http://mirror.local/satellite")
        monkeypatch.setenv("N2YO_TIMEOUT", "5")
        config = N2YOConfig.from_env()
        assert config.api_key == "KEY"
        assert config.base_url == "http://mirror.local/satellite"
        assert config.timeout == 5.0

    def test_from_env_unset(self, monkeypatch):
        for name in ("N2YO_API_KEY", "N2YO_BASE_URL", "N2YO_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)
        config = N2YOConfig.from_env()
        assert config.api_key == ""
        assert config.base_url == BASE_URL
        assert config.timeout == 30

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("N2YO_API_KEY", "ENV")
        config = N2YOConfig.from_env(api_key="EXPLICIT", timeout=2)
        assert config.api_key == "EXPLICIT"
        assert config.timeout == 2
