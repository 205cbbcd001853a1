"""browsekit — session registry and driver selection for browser tests."""

from __future__ import annotations

from typing import Any

from browsekit.config import Settings, get_settings, set_settings
from browsekit.context import (
    AutomationContext,
    get_default_context,
    namespace_for,
    set_default_context,
)
from browsekit.dsl import DSL
from browsekit.errors import (
    BrowsekitError,
    DriverError,
    DriverNotFound,
    ExpectationNotMet,
    SessionResetFailed,
)
from browsekit.logging_setup import setup_logging
from browsekit.session import Session

__version__ = "0.1.0"


def configure(**overrides: Any) -> Settings:
    """Load settings (file, env, then *overrides*) and make them current.

    The settings become what drivers read through ``get_settings()``, their
    driver ids and ``app_host`` are copied onto the default context and the
    console log handler is installed at ``log_level``.
    """
    settings = Settings.load(**overrides)
    set_settings(settings)
    get_default_context().apply_settings(settings)
    setup_logging(settings.log_level)
    return settings


def current_session() -> Session:
    return get_default_context().current_session()


def reset_sessions() -> None:
    get_default_context().reset_sessions()


__all__ = [
    "AutomationContext",
    "BrowsekitError",
    "DSL",
    "DriverError",
    "DriverNotFound",
    "ExpectationNotMet",
    "Session",
    "SessionResetFailed",
    "Settings",
    "configure",
    "current_session",
    "get_default_context",
    "get_settings",
    "namespace_for",
    "reset_sessions",
    "set_default_context",
    "set_settings",
    "setup_logging",
]
