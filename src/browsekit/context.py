"""AutomationContext — driver selection, session pool and scoped overrides.

One context holds everything a test worker mutates: the configured driver
ids, the pool of sessions keyed by namespace and the stack of named
session scopes. Tests running in parallel workers should each use their
own context; nothing here is locked.

Usage:
    ctx = AutomationContext(app=wsgi_app)
    ctx.current_session().visit("/")

    with ctx.using_driver(ctx.javascript_driver):
        ctx.current_session().visit("/dashboard")

    with ctx.in_session("admin"):
        ctx.current_session().visit("/admin")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from types import MappingProxyType
from typing import Any

from browsekit.config import (
    BUILTIN_DEFAULT_DRIVER,
    BUILTIN_JAVASCRIPT_DRIVER,
    Settings,
    get_settings,
)
from browsekit.errors import SessionResetFailed
from browsekit.session import Session

logger = logging.getLogger(__name__)


def namespace_for(driver: str, app: Any) -> str:
    """Return the pool key for *driver* and *app*.

    Applications are keyed by identity, so two equal URL strings held in
    different objects get different sessions. The pooled session keeps its
    app alive, which keeps the id from being reused.
    """
    return f"{driver}:{id(app)}"


class AutomationContext:
    """Driver registry, session pool and scope manager for one test worker."""

    def __init__(
        self,
        app: Any = None,
        *,
        default_driver: str | None = None,
        javascript_driver: str | None = None,
    ) -> None:
        self.app = app
        self._default_driver = default_driver
        self._javascript_driver = javascript_driver
        self._current_driver: str | None = None
        self._session_pool: dict[str, Session] = {}
        self._scope_names: dict[str, list[str]] = {}

    # -- driver selection ---------------------------------------------------

    @property
    def default_driver(self) -> str:
        return self._default_driver or BUILTIN_DEFAULT_DRIVER

    @default_driver.setter
    def default_driver(self, driver: str | None) -> None:
        self._default_driver = driver

    @property
    def javascript_driver(self) -> str:
        return self._javascript_driver or BUILTIN_JAVASCRIPT_DRIVER

    @javascript_driver.setter
    def javascript_driver(self, driver: str | None) -> None:
        self._javascript_driver = driver

    @property
    def current_driver(self) -> str:
        return self._current_driver or self.default_driver

    @current_driver.setter
    def current_driver(self, driver: str | None) -> None:
        self._current_driver = driver

    mode = current_driver

    def use_default_driver(self) -> None:
        """Drop any driver override."""
        self._current_driver = None

    @contextmanager
    def using_driver(self, driver: str) -> Iterator[None]:
        """Run the ``with`` block with *driver* as the current driver.

        On exit the override is cleared, not restored, so the current
        driver is the default driver again.
        """
        self.current_driver = driver
        try:
            yield
        finally:
            self.use_default_driver()

    # -- session pool -------------------------------------------------------

    @property
    def session_namespace(self) -> str:
        return namespace_for(self.current_driver, self.app)

    @property
    def sessions(self) -> Mapping[str, Session]:
        """Read-only view of the pool."""
        return MappingProxyType(self._session_pool)

    def _get_or_create(self, namespace: str) -> Session:
        session = self._session_pool.get(namespace)
        if session is None:
            session = Session(self.current_driver, self.app)
            self._session_pool[namespace] = session
            logger.debug("Created session %s", namespace)
        return session

    def current_session(self) -> Session:
        """Return the session for the current driver and app, creating it on first use."""
        return self._get_or_create(self.session_namespace)

    @property
    def page(self) -> Session:
        return self.current_session()

    def reset_sessions(self) -> None:
        """Reset every pooled session, keeping the pool and its sessions.

        Every session is attempted even if an earlier one fails; failures
        are raised together afterwards as ``SessionResetFailed``.
        """
        failures: dict[str, BaseException] = {}
        seen: set[int] = set()
        for namespace, session in list(self._session_pool.items()):
            # in_session installs one session under two keys
            if id(session) in seen:
                continue
            seen.add(id(session))
            try:
                session.reset()
            except Exception as exc:
                logger.warning("Failed to reset session %s: %s", namespace, exc)
                failures[namespace] = exc

        if failures:
            raise SessionResetFailed(failures) from next(iter(failures.values()))

    reset = reset_sessions

    @contextmanager
    def in_session(self, name: str) -> Iterator[Session]:
        """Make the session named *name* current for the ``with`` block.

        Named sessions live under ``"<namespace>:<name>"``, where the
        namespace includes the names of enclosing scopes opened for the same
        driver and app. The unsuffixed slot is pointed at the named session
        and restored on exit. Nothing happens until the block is entered.
        """
        slot = self.session_namespace
        scope_names = self._scope_names.setdefault(slot, [])
        namespace = ":".join([slot, *scope_names, name])
        previous_session = self.current_session()
        session = self._get_or_create(namespace)

        self._session_pool[slot] = session
        scope_names.append(name)
        logger.debug("Entered session scope %s", namespace)
        try:
            yield session
        finally:
            scope_names.pop()
            self._session_pool[slot] = previous_session
            logger.debug("Left session scope %s", namespace)

    # -- configuration ------------------------------------------------------

    def apply_settings(self, settings: Settings) -> None:
        """Copy driver ids and ``app_host`` from *settings* onto this context."""
        self.default_driver = settings.default_driver
        self.javascript_driver = settings.javascript_driver
        if settings.app_host is not None:
            self.app = settings.app_host

    @classmethod
    def from_settings(cls, settings: Settings) -> AutomationContext:
        ctx = cls()
        ctx.apply_settings(settings)
        return ctx


_default_context: AutomationContext | None = None


def get_default_context() -> AutomationContext:
    """Get or create the process-wide context, configured from ``get_settings()``."""
    global _default_context  # noqa: PLW0603
    if _default_context is None:
        _default_context = AutomationContext.from_settings(get_settings())
    return _default_context


def set_default_context(ctx: AutomationContext | None) -> None:
    """Replace the process-wide context; ``None`` rebuilds it on next use."""
    global _default_context  # noqa: PLW0603
    _default_context = ctx
