"""Exception hierarchy for browsekit."""

from __future__ import annotations


class BrowsekitError(Exception):
    """Base class for all browsekit errors."""


class DriverNotFound(BrowsekitError):
    """Raised when a session is built for a driver id that cannot be resolved."""

    def __init__(self, driver: str, available: list[str] | None = None, reason: str = ""):
        self.driver = driver
        self.available = available or []
        message = f"No driver called {driver!r} was found"
        if reason:
            message += f" ({reason})"
        if self.available:
            message += f", available drivers: {', '.join(self.available)}"
        super().__init__(message)


class DriverError(BrowsekitError):
    """Raised by a driver that cannot serve the requested operation."""


class SessionResetFailed(BrowsekitError):
    """Raised by ``reset_sessions()`` when one or more sessions failed to reset.

    ``failures`` maps each failing namespace to the exception it raised.
    The first underlying error is also chained as ``__cause__``.
    """

    def __init__(self, failures: dict[str, BaseException]):
        self.failures = dict(failures)
        namespaces = ", ".join(self.failures)
        super().__init__(f"Failed to reset {len(self.failures)} session(s): {namespaces}")

    @property
    def namespace(self) -> str:
        return next(iter(self.failures))


class ExpectationNotMet(BrowsekitError, AssertionError):
    """Raised when a page assertion does not hold."""
