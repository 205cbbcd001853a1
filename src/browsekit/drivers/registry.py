"""Driver Registry — lazy discovery and import of drivers.

Built-in drivers are registered as ``(module_path, class_name)`` pairs and
imported on demand so a missing optional dependency (Playwright) only
fails the sessions that ask for that driver. Test suites can register
their own factories with ``register_driver``.
"""

from __future__ import annotations

import importlib
import logging
from typing import TYPE_CHECKING

from browsekit.errors import DriverNotFound

if TYPE_CHECKING:
    from browsekit.drivers.base import DriverFactory

logger = logging.getLogger(__name__)

# name -> (module path, class name) or factory callable
_DRIVER_REGISTRY: dict[str, tuple[str, str] | DriverFactory] = {
    "http": ("browsekit.drivers.http", "HttpDriver"),
    "playwright": ("browsekit.drivers.playwright", "PlaywrightDriver"),
}


def list_drivers() -> list[str]:
    """Return all registered driver names (installed or not)."""
    return list(_DRIVER_REGISTRY)


def get_driver_factory(name: str) -> DriverFactory:
    """Resolve *name* to a driver factory, importing its module if needed.

    Raises:
        DriverNotFound: the name is not registered or its module cannot be loaded.
    """
    entry = _DRIVER_REGISTRY.get(name)
    if entry is None:
        raise DriverNotFound(name, available=list_drivers())

    if callable(entry):
        return entry

    module_path, class_name = entry
    try:
        mod = importlib.import_module(module_path)
        return getattr(mod, class_name)
    except (ImportError, AttributeError) as exc:
        logger.debug("Cannot load driver '%s': %s", name, exc)
        raise DriverNotFound(name, available=list_drivers(), reason=str(exc)) from exc


def register_driver(name: str, factory: DriverFactory) -> None:
    """Register a driver factory called as ``factory(app)``."""
    _DRIVER_REGISTRY[name] = factory
    logger.debug("Registered driver: %s", name)


def register_driver_class(name: str, module: str, cls: str) -> None:
    """Register a driver class to be imported lazily (plugin support)."""
    _DRIVER_REGISTRY[name] = (module, cls)
    logger.debug("Registered driver: %s -> %s.%s", name, module, cls)


def unregister_driver(name: str) -> None:
    """Remove a driver registration if present."""
    _DRIVER_REGISTRY.pop(name, None)
