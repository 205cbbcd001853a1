"""Tests for Settings loading and configure()."""

import json
import logging

from rich.logging import RichHandler

import browsekit
from browsekit.config import Settings, get_settings
from browsekit.context import get_default_context
from browsekit.drivers.http import HttpDriver


class TestSettings:
    def test_defaults(self):
        settings = Settings()
        assert settings.default_driver == "http"
        assert settings.javascript_driver == "playwright"
        assert settings.app_host is None
        assert settings.headless is True

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("BROWSEKIT_DEFAULT_DRIVER", "playwright")
        assert Settings().default_driver == "playwright"

    def test_load_from_json(self, tmp_path):
        path = tmp_path / "browsekit.json"
        path.write_text(json.dumps({"app_host": "http://localhost:5000"}))
        assert Settings.load(path).app_host == "http://localhost:5000"

    def test_load_reads_working_directory(self, tmp_path):
        (tmp_path / "browsekit.json").write_text(json.dumps({"javascript_driver": "fake_js"}))
        assert Settings.load().javascript_driver == "fake_js"

    def test_overrides_win(self, tmp_path):
        path = tmp_path / "browsekit.json"
        path.write_text(json.dumps({"default_driver": "from_file"}))
        assert Settings.load(path, default_driver="from_kwargs").default_driver == "from_kwargs"

    def test_unreadable_json_ignored(self, tmp_path):
        path = tmp_path / "browsekit.json"
        path.write_text("{not json")
        assert Settings.load(path).default_driver == "http"

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestConfigure:
    def test_default_context_reads_settings(self, monkeypatch):
        monkeypatch.setenv("BROWSEKIT_JAVASCRIPT_DRIVER", "fake_js")
        assert get_default_context().javascript_driver == "fake_js"

    def test_configure_applies_to_default_context(self):
        settings = browsekit.configure(default_driver="fake", app_host="http://localhost:5000")
        ctx = get_default_context()
        assert settings.default_driver == "fake"
        assert ctx.default_driver == "fake"
        assert ctx.app == "http://localhost:5000"

    def test_configure_keeps_pool(self, fake_drivers):
        browsekit.configure(default_driver="fake")
        session = browsekit.current_session()
        browsekit.configure(default_driver="fake")
        assert browsekit.current_session() is session

    def test_reset_sessions_shortcut(self, fake_drivers):
        browsekit.configure(default_driver="fake")
        session = browsekit.current_session()
        session.visit("/")
        browsekit.reset_sessions()
        session.driver.reset.assert_called_once_with()


class TestConfigureReachesDrivers:
    def test_installs_settings_for_get_settings(self):
        settings = browsekit.configure(http_timeout=1.5)
        assert get_settings() is settings

    def test_http_timeout_reaches_http_driver(self):
        browsekit.configure(http_timeout=1.5)
        assert HttpDriver(None)._timeout == 1.5

    def test_force_reload_drops_configured_settings(self):
        browsekit.configure(http_timeout=1.5)
        assert get_settings(force_reload=True).http_timeout == 10.0


class TestConfigureLogging:
    def test_sets_up_rich_logging_at_configured_level(self):
        browsekit.configure(log_level="DEBUG")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert any(isinstance(h, RichHandler) for h in root.handlers)

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("BROWSEKIT_LOG_LEVEL", "WARNING")
        browsekit.configure()
        assert logging.getLogger().level == logging.WARNING
