"""Driver Protocol — the interface every browsekit driver implements.

A driver owns one live browsing context. ``Session`` builds it lazily and
forwards its DSL methods to it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Driver(Protocol):
    """Protocol that all drivers must implement."""

    def visit(self, url: str) -> None: ...

    def current_url(self) -> str: ...

    def html(self) -> str: ...

    def status_code(self) -> int: ...

    def response_headers(self) -> dict[str, str]: ...

    def refresh(self) -> None: ...

    def go_back(self) -> None: ...

    def reset(self) -> None: ...

    def quit(self) -> None: ...


# Builds a driver for the given application handle.
DriverFactory = Callable[[Any], Driver]
