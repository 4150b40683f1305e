"""
Tests for settings resolution.
"""

from pathlib import Path

from visitorlog.core.config import Settings, get_settings, parse_path_patterns, reset_settings


class TestSettings:
    """Test environment-driven configuration."""

    def test_defaults(self):
        settings = Settings.from_env()
        assert settings.sink_url is None
        assert not settings.sink_configured
        assert settings.paths == ["/*"]
        assert settings.sink_timeout == 5.0
        assert settings.port == 8000
        assert settings.site_dir is None
        assert settings.log_level == "INFO"

    def test_log_endpoint(self, monkeypatch):
        monkeypatch.setenv("LOG_ENDPOINT", "https://sink.example/collect")
        settings = Settings.from_env()
        assert settings.sink_url == "https://sink.example/collect"
        assert settings.sink_configured

    def test_log_endpoint_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("LOG_ENDPOINT", "https://a.example/")
        monkeypatch.setenv("VISITORLOG_ENDPOINT", "https://b.example/")
        assert Settings.from_env().sink_url == "https://a.example/"

    def test_blank_endpoint_disables_sink(self, monkeypatch):
        monkeypatch.setenv("LOG_ENDPOINT", "   ")
        assert Settings.from_env().sink_url is None

    def test_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("VISITORLOG_PATHS", "/, /blog/*")
        monkeypatch.setenv("VISITORLOG_SINK_TIMEOUT", "2.5")
        monkeypatch.setenv("VISITORLOG_PORT", "9000")
        monkeypatch.setenv("VISITORLOG_SITE_DIR", str(tmp_path))
        monkeypatch.setenv("VISITORLOG_LOG_LEVEL", "debug")

        settings = Settings.from_env()

        assert settings.paths == ["/", "/blog/*"]
        assert settings.sink_timeout == 2.5
        assert settings.port == 9000
        assert settings.site_dir == Path(str(tmp_path))
        assert settings.log_level == "DEBUG"

    def test_dotenv_file(self, tmp_path, monkeypatch):
        # conftest chdirs into tmp_path
        (tmp_path / ".env").write_text('# sink\nLOG_ENDPOINT="https://dotenv.example/"\n', encoding="utf-8")
        # register LOG_ENDPOINT so the loader's write is undone at teardown
        monkeypatch.setenv("LOG_ENDPOINT", "")
        monkeypatch.delenv("LOG_ENDPOINT")
        assert Settings.from_env().sink_url == "https://dotenv.example/"

    def test_singleton(self, monkeypatch):
        first = get_settings()
        assert get_settings() is first
        monkeypatch.setenv("LOG_ENDPOINT", "https://sink.example/")
        reset_settings()
        assert get_settings().sink_url == "https://sink.example/"


class TestParsePathPatterns:
    def test_blank_means_default(self):
        assert parse_path_patterns("") == ["/*"]
        assert parse_path_patterns(" , ") == ["/*"]
