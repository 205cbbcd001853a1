"""Configuration management for browsekit.

Settings come from ``BROWSEKIT_*`` environment variables, an optional
``.env`` file and an optional ``browsekit.json`` in the working directory.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

BUILTIN_DEFAULT_DRIVER = "http"
BUILTIN_JAVASCRIPT_DRIVER = "playwright"


def get_config_path() -> Path:
    """Get the JSON config file path."""
    return Path.cwd() / "browsekit.json"


class Settings(BaseSettings):
    """browsekit settings with env and file support."""

    model_config = SettingsConfigDict(
        env_prefix="BROWSEKIT_",
        env_file=".env",
        extra="ignore",
    )

    # Drivers
    default_driver: str = Field(
        default=BUILTIN_DEFAULT_DRIVER,
        description="Driver used when no override is active",
    )
    javascript_driver: str = Field(
        default=BUILTIN_JAVASCRIPT_DRIVER,
        description="Driver used for pages that need JavaScript",
    )

    # Application under test
    app_host: Optional[str] = Field(
        default=None,
        description="Base URL of the application when no in-process app is given",
    )

    # Driver tuning
    headless: bool = Field(default=True, description="Run browser drivers without a window")
    http_timeout: float = Field(default=10.0, description="Request timeout for the http driver")

    # Logging
    log_level: str = Field(default="INFO", description="Log level: DEBUG, INFO, WARNING, ERROR")

    @classmethod
    def load(cls, path: Path | None = None, **overrides) -> "Settings":
        """Load settings from a JSON file, falling back to env/defaults.

        Keyword overrides win over both the file and the environment.
        """
        config_path = path or get_config_path()
        data: dict = {}
        if config_path.exists():
            try:
                data = json.loads(config_path.read_text())
            except json.JSONDecodeError as e:
                logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        data.update(overrides)
        return cls(**data)


_settings: Settings | None = None


def get_settings(force_reload: bool = False) -> Settings:
    """Get the process-wide settings, loading them on first use."""
    global _settings  # noqa: PLW0603
    if force_reload or _settings is None:
        _settings = Settings.load()
    return _settings


def set_settings(settings: Settings | None) -> None:
    """Install *settings* for every later ``get_settings()``; ``None`` reloads on next use."""
    global _settings  # noqa: PLW0603
    _settings = settings
