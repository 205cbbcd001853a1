"""Shared fixtures: isolated default context and an in-memory fake driver."""

import logging
from unittest.mock import MagicMock

import pytest

from browsekit.config import set_settings
from browsekit.context import set_default_context
from browsekit.drivers.registry import register_driver, unregister_driver

_ENV_VARS = (
    "BROWSEKIT_DEFAULT_DRIVER",
    "BROWSEKIT_JAVASCRIPT_DRIVER",
    "BROWSEKIT_APP_HOST",
    "BROWSEKIT_HEADLESS",
    "BROWSEKIT_HTTP_TIMEOUT",
    "BROWSEKIT_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch, tmp_path):
    """Keep env, config files and the default context out of every test."""
    for var in _ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    set_settings(None)
    set_default_context(None)
    yield
    set_default_context(None)
    set_settings(None)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Undo root logger changes made by setup_logging()."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    quiet = {name: logging.getLogger(name).level for name in ("httpx", "httpcore")}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, saved in quiet.items():
        logging.getLogger(name).setLevel(saved)


@pytest.fixture
def fake_drivers():
    """Register ``fake`` and ``fake_js`` drivers; yields the drivers they build."""
    built: list[MagicMock] = []

    def factory(app):
        driver = MagicMock(name=f"driver{len(built)}")
        driver.app = app
        built.append(driver)
        return driver

    register_driver("fake", factory)
    register_driver("fake_js", factory)
    yield built
    unregister_driver("fake")
    unregister_driver("fake_js")


class App:
    """Application handle whose instances all compare equal."""

    def __eq__(self, other):
        return isinstance(other, App)

    def __hash__(self):
        return 0

    def __repr__(self):
        return "App(http://example.test)"


@pytest.fixture
def make_app():
    """Factory for application handles that are equal but not identical."""
    return App
