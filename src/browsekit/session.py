"""Session — one browsing context bound to a driver id and an application.

A ``Session`` checks its driver id when it is built but only starts the
driver on first use, so sessions that are pooled and never touched cost
nothing. ``DSL_METHODS`` is the public interaction surface that
``browsekit.dsl`` forwards to the current session.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from browsekit.drivers.base import Driver
from browsekit.drivers.registry import get_driver_factory
from browsekit.errors import ExpectationNotMet

logger = logging.getLogger(__name__)

_HIDDEN_TAGS = ["script", "style", "noscript", "template"]


def _normalize(text: str) -> str:
    return " ".join(text.split())


def visible_text(html: str) -> str:
    """Return the whitespace-normalized text a reader would see in *html*."""
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup.find_all(_HIDDEN_TAGS):
        tag.extract()
    return _normalize(soup.get_text(" "))


class Session:
    """A browsing session driven by the driver registered as ``mode``."""

    DSL_METHODS: ClassVar[tuple[str, ...]] = (
        "visit",
        "current_url",
        "current_path",
        "current_host",
        "html",
        "status_code",
        "response_headers",
        "has_text",
        "assert_text",
        "refresh",
        "go_back",
    )

    def __init__(self, mode: str, app: Any = None) -> None:
        self.mode = mode
        self.app = app
        self._driver_factory = get_driver_factory(mode)
        self._driver: Driver | None = None

    def __repr__(self) -> str:
        return f"<Session mode={self.mode!r} app={self.app!r}>"

    @property
    def driver(self) -> Driver:
        if self._driver is None:
            logger.debug("Starting %s driver for %r", self.mode, self.app)
            self._driver = self._driver_factory(self.app)
        return self._driver

    def reset(self) -> None:
        """Clear cookies and page state. Untouched sessions have nothing to clear."""
        if self._driver is not None:
            self._driver.reset()

    def quit(self) -> None:
        """Shut the driver down; the next DSL call starts a fresh one."""
        if self._driver is not None:
            self._driver.quit()
            self._driver = None

    # -- DSL --------------------------------------------------------------

    def visit(self, url: str) -> None:
        self.driver.visit(url)

    def current_url(self) -> str:
        return self.driver.current_url()

    def current_path(self) -> str:
        return urlsplit(self.current_url()).path

    def current_host(self) -> str:
        parts = urlsplit(self.current_url())
        if not parts.netloc:
            return ""
        return f"{parts.scheme}://{parts.netloc}"

    def html(self) -> str:
        return self.driver.html()

    def status_code(self) -> int:
        return self.driver.status_code()

    def response_headers(self) -> dict[str, str]:
        return self.driver.response_headers()

    def has_text(self, text: str) -> bool:
        """Return True if *text* appears in the page's visible text."""
        return _normalize(text) in visible_text(self.html())

    def assert_text(self, text: str) -> None:
        if not self.has_text(text):
            raise ExpectationNotMet(f"Expected to find text {text!r} on {self.current_url()}")

    def refresh(self) -> None:
        self.driver.refresh()

    def go_back(self) -> None:
        self.driver.go_back()
