"""Drivers and the registry that resolves driver ids to them."""

from browsekit.drivers.base import Driver, DriverFactory
from browsekit.drivers.registry import (
    get_driver_factory,
    list_drivers,
    register_driver,
    register_driver_class,
    unregister_driver,
)

__all__ = [
    "Driver",
    "DriverFactory",
    "get_driver_factory",
    "list_drivers",
    "register_driver",
    "register_driver_class",
    "unregister_driver",
]
