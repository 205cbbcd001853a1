"""DSL — call session methods without holding a session.

Every name in ``Session.DSL_METHODS`` is available two ways, both resolving
the current session at call time:

    from browsekit.dsl import visit, has_text
    visit("/")

    class CheckoutPage(DSL):
        def open(self):
            self.visit("/checkout")
            return self.page.status_code()

Mixin users can point ``automation_context`` at their own context; the
module-level functions always use the default context.
"""

from __future__ import annotations

from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any

from browsekit.context import AutomationContext, get_default_context
from browsekit.session import Session


def _forwarder(resolve_context: Callable[[], AutomationContext], name: str) -> Callable[..., Any]:
    def forward(*args: Any, **kwargs: Any) -> Any:
        return getattr(resolve_context().current_session(), name)(*args, **kwargs)

    forward.__name__ = forward.__qualname__ = name
    forward.__doc__ = getattr(Session, name).__doc__
    return forward


class DSL:
    """Mixin forwarding ``Session.DSL_METHODS`` to the current session."""

    automation_context: AutomationContext | None = None

    def _automation_context(self) -> AutomationContext:
        return self.automation_context or get_default_context()

    @property
    def page(self) -> Session:
        return self._automation_context().current_session()

    def using_driver(self, driver: str) -> AbstractContextManager[None]:
        return self._automation_context().using_driver(driver)

    def in_session(self, name: str) -> AbstractContextManager[Session]:
        return self._automation_context().in_session(name)

    def __getattr__(self, name: str) -> Any:
        if name in Session.DSL_METHODS:
            return _forwarder(self._automation_context, name)
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")


def page() -> Session:
    return get_default_context().current_session()


def using_driver(driver: str) -> AbstractContextManager[None]:
    return get_default_context().using_driver(driver)


def in_session(name: str) -> AbstractContextManager[Session]:
    return get_default_context().in_session(name)


def __getattr__(name: str) -> Any:
    if name in Session.DSL_METHODS:
        return _forwarder(get_default_context, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted({*globals(), *Session.DSL_METHODS})


__all__ = ["DSL", "page", "using_driver", "in_session", *Session.DSL_METHODS]
